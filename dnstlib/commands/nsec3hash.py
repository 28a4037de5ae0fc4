from collections import namedtuple

from ..common import ErrorMessage, DEFAULT_NSEC3_ALG, DEFAULT_ITERATIONS, dprint
from ..dnsparam import nsec3_hash_alg
from ..nsec3 import (nsec3_hash, parse_nsec3_alg, parse_iterations,
                     parse_salt, parse_name)
from ..options import ShortOptionLexer, arg_type
from ..util import b32hex, hexdump
from .base import LdnsCommand, parse_os


LDNS_HELP = """\
ldns-nsec3-hash [OPTIONS] <domain name>
  prints the NSEC3 hash of the given domain name

  -a <algorithm> hashing algorithm number
  -t <number>    iterations
  -s <string>    salt in hex"""


class Nsec3Hash(LdnsCommand,
                namedtuple('Nsec3Hash', 'algorithm iterations salt name')):

    """Print the NSEC3 hash of a domain name"""

    __slots__ = ()

    NAME = "nsec3-hash"
    SUMMARY = "print the NSEC3 hash of a given domain name"
    LDNS_HELP = LDNS_HELP

    @staticmethod
    def add_arguments(parser):
        parser.add_argument("-a", "--algorithm", metavar="NUMBER_OR_MNEMONIC",
                            type=arg_type(parse_nsec3_alg),
                            default=DEFAULT_NSEC3_ALG,
                            help="the hashing algorithm to use "
                            "(default: %(default)s)")
        parser.add_argument("-i", "-t", "--iterations", metavar="NUMBER",
                            type=arg_type(parse_iterations),
                            default=DEFAULT_ITERATIONS,
                            help="the number of hash iterations "
                            "(default: %(default)s)")
        parser.add_argument("-s", "--salt", metavar="HEX_STRING",
                            type=arg_type(parse_salt), default=b'',
                            help="the salt in hex representation")
        parser.add_argument("name", metavar="DOMAIN_NAME",
                            type=arg_type(parse_name),
                            help="the domain name to hash")

    @classmethod
    def from_args(cls, namespace, parser):
        return cls(namespace.algorithm, namespace.iterations,
                   namespace.salt, namespace.name)

    @classmethod
    def parse_ldns(cls, args):
        algorithm = DEFAULT_NSEC3_ALG
        iterations = DEFAULT_ITERATIONS
        salt = b''
        name = None

        lexer = ShortOptionLexer(args)
        for kind, arg in lexer:
            if kind == "short" and arg == "a":
                algorithm = parse_os("algorithm (-a)", lexer.value(),
                                     parse_nsec3_alg)
            elif kind == "short" and arg == "s":
                salt = parse_os("salt (-s)", lexer.value(), parse_salt)
            elif kind == "short" and arg == "t":
                iterations = parse_os("iterations (-t)", lexer.value(),
                                      parse_iterations)
            elif kind == "value":
                # ldns only uses the first domain name, the rest are
                # ignored without complaint.
                if name is not None:
                    continue
                name = parse_os("domain name", arg, parse_name)
            elif kind == "short":
                raise ErrorMessage("Invalid short option: -%s" % arg)
            else:
                raise ErrorMessage(
                    "Long options are not supported, but `--%s` given" % arg)

        if name is None:
            raise ErrorMessage("Missing domain name argument")

        return cls(algorithm, iterations, salt, name)

    def execute(self, env):
        dprint(env, "NSEC3 hash of %s: algorithm=%s iterations=%d salt=%s" %
               (self.name.text(), nsec3_hash_alg.get_name(self.algorithm),
                self.iterations, hexdump(self.salt) or "-"))
        h = nsec3_hash(self.name, self.algorithm, self.iterations, self.salt)
        env.stdout().write("%s.\n" % b32hex(h))
