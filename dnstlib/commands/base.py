"""
Shared pieces of dnst commands.

"""

from ..common import ErrorMessage
from ..util import decode_arg


def parse_os(name, val, parser):
    """Decode a command line value and parse it with parser(). Errors
    are reported in terms of name, e.g. "iterations (-t)"."""
    try:
        text = decode_arg(val)
    except UnicodeError:
        raise ErrorMessage("Invalid value for %s: not valid unicode" % name)
    try:
        return parser(text)
    except ValueError as e:
        raise ErrorMessage("Invalid value '%s' for %s: %s" % (text, name, e))


class LdnsCommand:
    """Mixin for commands that can also be run as an ldns-* tool.

    Subclasses set LDNS_HELP and implement parse_ldns(args).
    """

    __slots__ = ()

    LDNS_HELP = ""

    @classmethod
    def parse_ldns(cls, args):
        raise NotImplementedError

    @classmethod
    def parse_ldns_args(cls, args):
        """Parse ldns style arguments, adding the ldns help text to any
        error"""
        try:
            return cls.parse_ldns(args)
        except ErrorMessage as e:
            e.message = "%s\n\n%s" % (e.message, cls.LDNS_HELP)
            raise
