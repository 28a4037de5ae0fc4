"""
Command line grammars.

The native interface is an argparse parser with one subparser per
command. The ldns-* compatibility interface uses ShortOptionLexer, which
splits arguments the way the ldns tools see them: short options with
values, positional values, and long options (which are never valid).

"""

import os
import argparse

from .common import UsageError, ErrorMessage, PROGDESC, __version__


class NativeArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting"""

    def error(self, message):
        raise UsageError("%s%s: error: %s\n" %
                         (self.format_usage(), self.prog, message))

    def print_help(self, file=None):
        raise UsageError(self.format_help(), exit_code=0)

    def exit(self, status=0, message=None):
        raise UsageError(message or "", exit_code=status)


class VersionAction(argparse.Action):
    """Report the program version through UsageError with exit code 0"""

    def __init__(self, option_strings, version, dest=argparse.SUPPRESS,
                 default=argparse.SUPPRESS, help="print version"):
        argparse.Action.__init__(self, option_strings=option_strings,
                                 dest=dest, default=default, nargs=0,
                                 help=help)
        self.version = version

    def __call__(self, parser, namespace, values, option_string=None):
        raise UsageError("%s\n" % self.version, exit_code=0)


def arg_type(func):
    """Wrap a validator raising ValueError for use as an argparse type"""
    def convert(text):
        try:
            return func(text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e))
    convert.__name__ = func.__name__
    return convert


def build_parser(prog, commands):
    """Return the native parser for the given command classes"""
    parser = NativeArgumentParser(prog=prog, description=PROGDESC,
                                  allow_abbrev=False)
    parser.add_argument("-V", "--version", action=VersionAction,
                        version="%s %s" % (prog, __version__))
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND",
                                       title="commands")
    subparsers.required = True
    for cls in commands:
        sub = subparsers.add_parser(cls.NAME, help=cls.SUMMARY,
                                    description=cls.SUMMARY,
                                    allow_abbrev=False)
        cls.add_arguments(sub)
        sub.set_defaults(command_class=cls)
    parser.commands = subparsers.choices
    return parser


class ShortOptionLexer:
    """
    Iterate over ldns style arguments, yielding (kind, value) tuples:

        ("short", "a")      for -a
        ("long", "algo")    for --algo or --algo=x
        ("value", "text")   for anything else

    After a short option, call value() to fetch its argument, either
    attached (-t5, -t=5) or the next argument. "--" ends option
    processing; "-" on its own is a value.
    """

    def __init__(self, args):
        self.args = list(args)
        self.pos = 0
        self.shorts = ""
        self.last = None
        self.finished = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.shorts:
            c, self.shorts = self.shorts[0], self.shorts[1:]
            self.last = "-" + c
            return ("short", c)
        if self.pos >= len(self.args):
            raise StopIteration
        arg = os.fsdecode(self.args[self.pos])
        self.pos += 1
        if self.finished:
            return ("value", arg)
        if arg == "--":
            self.finished = True
            return next(self)
        if arg.startswith("--"):
            return ("long", arg[2:].split("=", 1)[0])
        if arg.startswith("-") and arg != "-":
            self.shorts = arg[2:]
            self.last = arg[:2]
            return ("short", arg[1])
        return ("value", arg)

    def value(self):
        """Return the argument of the most recent short option"""
        if self.shorts:
            val, self.shorts = self.shorts, ""
            if val.startswith("="):
                val = val[1:]
            return val
        if self.pos >= len(self.args):
            raise ErrorMessage("missing argument for option '%s'" % self.last)
        val = os.fsdecode(self.args[self.pos])
        self.pos += 1
        return val
