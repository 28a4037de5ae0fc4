"""
Entry points of dnst: decide which grammar handles an invocation, run
the resulting command and turn errors into messages and exit codes.

"""

import os

from .common import ErrorMessage, UsageError, progname, dprint
from .commands import COMMANDS, LEGACY_COMMANDS, execute
from .env import RealEnv
from .options import build_parser
from .util import decode_arg


DEFAULT_PROGNAME = "dnst"


def try_ldns_compatibility(args):
    """
    If the program was invoked as one of the ldns-* tools, parse the
    remaining arguments the way that tool would and return the command.
    Returns None for any other program name.
    """
    args = list(args)
    if not args:
        raise ErrorMessage("Missing binary name")

    binary = os.path.basename(os.fsencode(args[0]).rstrip(b'/'))
    if not binary:
        raise ErrorMessage("Missing binary file name")
    try:
        binary_name = decode_arg(binary)
    except UnicodeError:
        raise ErrorMessage("Binary file name is not valid unicode")

    cls = LEGACY_COMMANDS.get(binary_name)
    if cls is None:
        return None
    return cls.parse_ldns_args(args[1:])


def native_parser(prog):
    return build_parser(prog, COMMANDS)


def parse_args(env):
    """Return the command for the invocation in env"""
    args = env.args_os()
    command = try_ldns_compatibility(args)
    if command is not None:
        dprint(env, "ldns compatibility mode: %s" % progname(args[0]))
        return command

    parser = native_parser(progname(args[0]))
    namespace = parser.parse_args([os.fsdecode(a) for a in args[1:]])
    return namespace.command_class.from_args(namespace, parser)


def report(env, err):
    """Print err to the right stream and return its exit code"""
    args = env.args_os()
    prog = progname(args[0]) if args else DEFAULT_PROGNAME
    if isinstance(err, UsageError) and not err.is_error:
        err.pretty_print(env.stdout(), prog)
    else:
        err.pretty_print(env.stderr(), prog)
    return err.exit_code


def run(env):
    """Parse and execute the command in env, returning the exit code"""
    try:
        command = parse_args(env)
        execute(command, env)
    except ErrorMessage as e:
        return report(env, e)
    return 0


def main(argv=None):
    """main function"""
    return run(RealEnv(argv))
