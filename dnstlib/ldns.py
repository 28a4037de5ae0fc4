"""
Run an ldns-* command without installing it under that name:

        python -m dnstlib.ldns ldns-nsec3-hash -t 0 example.test

The first argument is taken as the program name. This is meant for
testing the ldns compatibility mode during development.

"""

import sys

from .common import ErrorMessage
from .commands import execute
from .env import RealEnv
from .main import try_ldns_compatibility, report


def run(env):
    """Run the ldns command named by the first argument in env"""
    args = env.args_os()[1:]
    try:
        command = try_ldns_compatibility(args)
        if command is None:
            raise ErrorMessage("ldns command is not recognized")
        execute(command, env)
    except ErrorMessage as e:
        return report(env, e)
    return 0


def main(argv=None):
    return run(RealEnv(argv))


if __name__ == '__main__':
    sys.exit(main())
