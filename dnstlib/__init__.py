"""
dnstlib is the library of routines behind dnst - a multicall command
line tool for DNS related functions. The binary picks its argument
grammar from the name it was invoked under: the native subcommand
interface, or a compatibility mode that mimics the argument syntax of
the corresponding ldns-* utility.

Usage:

        dnst nsec3-hash [-a ALG] [-i NUMBER] [-s HEX] <domain name>
        dnst help [COMMAND]
        ldns-nsec3-hash [-a ALG] [-t NUMBER] [-s HEX] <domain name>

Example usage:

       dnst nsec3-hash example.test
       dnst nsec3-hash -a SHA-1 -i 12 -s aabbccdd a.example
       ldns-nsec3-hash -t 12 -s aabbccdd a.example

Setting DNST_DEBUG=1 in the environment prints debugging output on
standard error.

Exit codes:

        0       success
        1       error (including ldns-* argument errors, as ldns does)
        2       command line usage error in the native interface

Pre-requisites:

        Python 3.7 (or later)

"""
