"""
The commands of dnst.

Every command is an immutable record of its validated arguments with an
execute(env) method. COMMANDS is the complete set, in the order shown by
help; LEGACY_COMMANDS maps ldns-* program names to the command that
emulates them.

"""

from .nsec3hash import Nsec3Hash
from .help import Help


COMMANDS = (Nsec3Hash, Help)

LEGACY_COMMANDS = {
    "ldns-nsec3-hash": Nsec3Hash,
}


def execute(command, env):
    """Run a parsed command"""
    if type(command) not in COMMANDS:
        raise AssertionError("not a dnst command: %r" % (command,))
    command.execute(env)
