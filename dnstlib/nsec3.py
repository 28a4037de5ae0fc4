"""
NSEC3 owner name hashing (RFC 5155, Section 5) and the validators for
its parameters.

The validators take text and raise ValueError with a short description
of what is wrong; callers put that message in context.
"""

import re
import hashlib

from .common import MAX_SALT_LEN
from .dnsparam import nsec3_hash_alg
from .name import name_from_text
from .util import h2bin


# NSEC3 hash algorithm number: digest function
nsec3_digest = {
    1: hashlib.sha1,
    }

re_number = re.compile(r'\+?[0-9]+')


def parse_number(arg, maxval):
    """parse an unsigned decimal number no larger than maxval"""
    if arg == "":
        raise ValueError("cannot parse integer from empty string")
    if not re_number.fullmatch(arg):
        raise ValueError("invalid digit found in string")
    val = int(arg)
    if val > maxval:
        raise ValueError("number too large to fit in target type")
    return val


def parse_nsec3_alg(arg):
    """Return NSEC3 hash algorithm number given a number or mnemonic"""
    try:
        num = parse_number(arg, 255)
    except ValueError:
        num = None
    if num is not None:
        if not nsec3_hash_alg.is_known(num):
            raise ValueError("unknown algorithm number")
        return num
    if arg not in nsec3_hash_alg:
        raise ValueError("unknown algorithm mnemonic")
    return nsec3_hash_alg.get_val(arg)


def parse_iterations(arg):
    return parse_number(arg, 0xffff)


def parse_salt(arg):
    """Return salt bytes from hex text; '-' and '' are the empty salt"""
    if arg in ("", "-"):
        return b''
    if len(arg) % 2 != 0 or not all(c in '0123456789abcdefABCDEF' for c in arg):
        raise ValueError("invalid hex string")
    salt = h2bin(arg)
    if len(salt) > MAX_SALT_LEN:
        raise ValueError("salt exceeds %d octets" % MAX_SALT_LEN)
    return salt


def parse_name(arg):
    """Return Name() for domain name text, lower cased first"""
    return name_from_text(arg.lower())


def nsec3_hash(name, algorithm, iterations, salt):
    """
    Compute the NSEC3 hash of a domain name:

        IH(salt, x, 0) = H(x || salt)
        IH(salt, x, k) = H(IH(salt, x, k-1) || salt), if k > 0

    where x is the name in canonical wire format. algorithm must
    already have been validated; anything else is a programming error.
    """
    try:
        digest = nsec3_digest[algorithm]
    except KeyError:
        raise AssertionError(
            "nsec3_hash called with unsupported algorithm %r" % algorithm)

    h = digest(name.wire(canonical_form=True) + salt).digest()
    for _ in range(iterations):
        h = digest(h + salt).digest()
    return h
