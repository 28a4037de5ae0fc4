
import os

__version__    = "0.1.0"

PROGDESC       = "a multicall tool for DNS related functions"

DEBUG_ENV_VAR  = "DNST_DEBUG"          # enables dprint() output
DEFAULT_NSEC3_ALG  = 1                 # SHA-1, the only NSEC3 hash (RFC 5155)
DEFAULT_ITERATIONS = 1
MAX_SALT_LEN   = 255                   # salt length field is one octet
MAX_LABEL_LEN  = 63
MAX_NAME_LEN   = 255                   # in wire format

ERROR_MARKER   = "ERROR:"
ERROR_MARKER_TTY = "\x1b[31mERROR:\x1b[0m"


def progname(path):
    """Return the file name component of the invoked program path"""
    return os.path.basename(os.fsdecode(path))


def dprint(env, input):
    if env.debug:
        env.stderr().write(";; DEBUG: %s\n" % input)
    return


class ErrorMessage(Exception):
    """A friendly error message.

    The primary message is set when the error is raised; every layer the
    error passes through may add one line of context with context().
    Contexts are kept innermost first.
    """
    exit_code = 1

    def __init__(self, message):
        Exception.__init__(self, message)
        self.message = message
        self.contexts = []

    def context(self, text):
        self.contexts.append(text)
        return self

    def __str__(self):
        return self.message

    def pretty_print(self, stream, prog):
        """Write the error, prefixed with the program name, to stream"""
        isatty = getattr(stream, "isatty", None)
        if isatty and isatty():
            marker = ERROR_MARKER_TTY
        else:
            marker = ERROR_MARKER
        lines = ["[%s] %s %s" % (prog, marker, self.message)]
        for text in self.contexts:
            lines.append("... while %s" % text)
        stream.write("\n".join(lines) + "\n")


class UsageError(ErrorMessage):
    """A command-line usage error, already rendered by the argument parser.

    Requests for help or version information use this class too, with an
    exit code of 0, and go to standard output instead.
    """
    exit_code = 2

    def __init__(self, message, exit_code=2):
        ErrorMessage.__init__(self, message)
        self.exit_code = exit_code

    @property
    def is_error(self):
        return self.exit_code != 0

    def pretty_print(self, stream, prog):
        stream.write(self.message)
