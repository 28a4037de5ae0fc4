from collections import namedtuple

from ..common import ErrorMessage


class Help(namedtuple('Help', 'text')):

    """Print the help text of dnst or one of its commands"""

    __slots__ = ()

    NAME = "help"
    SUMMARY = "show help for dnst or a command"

    @staticmethod
    def add_arguments(parser):
        parser.add_argument("topic", metavar="COMMAND", nargs="?",
                            help="the command to show help for")

    @classmethod
    def from_args(cls, namespace, parser):
        if namespace.topic is None:
            return cls(parser.format_help())
        try:
            subparser = parser.commands[namespace.topic]
        except KeyError:
            raise ErrorMessage("unknown command: %s" % namespace.topic)
        return cls(subparser.format_help())

    def execute(self, env):
        env.stdout().write(self.text)
