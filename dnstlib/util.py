
import os
import base64
import binascii


# Translation table for normal base32 to base32 with extended hex
# alphabet used by NSEC3 (see RFC 4648, Section 7). This alphabet
# has the property that encoded data maintains its sort order when
# compared bitwise.
b32_to_ext_hex = bytes.maketrans(b'ABCDEFGHIJKLMNOPQRSTUVWXYZ234567',
                                 b'0123456789ABCDEFGHIJKLMNOPQRSTUV')


def decode_arg(arg):
    """return a command line argument (str or bytes) as text. Raises
    UnicodeError if the underlying bytes aren't valid UTF-8."""
    return os.fsencode(arg).decode('utf-8')


def hexdump(inputbytes):
    """return a hexadecimal string representation of given byte string"""
    return binascii.hexlify(inputbytes).decode('ascii')


def h2bin(x):
    """turn hex dump string with optional whitespaces into binary string"""
    return binascii.unhexlify(x.replace(' ', '').replace('\n', ''))


def b32hex(inputbytes):
    """return lower case base32 extended hex encoding of given bytes,
    without padding"""
    encoded = base64.b32encode(inputbytes).translate(b32_to_ext_hex)
    return encoded.decode('ascii').rstrip('=').lower()
