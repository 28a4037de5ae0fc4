"""
The environment a dnst command runs in: where arguments come from and
where output goes. Production code uses RealEnv; tests run the real code
against FakeEnv, which collects output in memory.

"""

import os
import sys
import threading

from .common import DEBUG_ENV_VAR


class Env:
    """Interface to the outside world: arguments and two output streams"""

    debug = False

    def args_os(self):
        """Return the command line arguments, including argv[0]"""
        raise NotImplementedError

    def stdout(self):
        raise NotImplementedError

    def stderr(self):
        raise NotImplementedError


class RealEnv(Env):
    """Environment of the running process"""

    def __init__(self, argv=None):
        self.argv = sys.argv if argv is None else argv
        self.debug = os.environ.get(DEBUG_ENV_VAR, "") not in ("", "0")

    def args_os(self):
        return list(self.argv)

    def stdout(self):
        return sys.stdout

    def stderr(self):
        return sys.stderr


class FakeStream:
    """In-memory text stream, safe to share between threads"""

    def __init__(self):
        self._lock = threading.Lock()
        self._chunks = []

    def write(self, s):
        with self._lock:
            self._chunks.append(s)
        return len(s)

    def flush(self):
        pass

    def isatty(self):
        return False

    def getvalue(self):
        with self._lock:
            return ''.join(self._chunks)

    def __str__(self):
        return self.getvalue()


class FakeEnv(Env):
    """An environment that mocks interaction with the outside world"""

    def __init__(self, cmd, debug=False):
        self.cmd = cmd
        self.debug = debug
        self._stdout = FakeStream()
        self._stderr = FakeStream()

    def args_os(self):
        return list(self.cmd.cmd)

    def stdout(self):
        return self._stdout

    def stderr(self):
        return self._stderr

    def get_stdout(self):
        return self._stdout.getvalue()

    def get_stderr(self):
        return self._stderr.getvalue()


class FakeResult:
    """The result of running a FakeCmd"""

    def __init__(self, exit_code, stdout, stderr):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

    def __repr__(self):
        return "<FakeResult: exit_code=%d stdout=%r stderr=%r>" % \
            (self.exit_code, self.stdout, self.stderr)


class FakeCmd:
    """
    A command to run in a FakeEnv, including argv[0]. args() returns an
    extended copy, so one FakeCmd can serve as the base for several:

        cmd = FakeCmd(["dnst", "nsec3-hash"])
        cmd.args(["example.test"]).run()
    """

    def __init__(self, cmd, debug=False):
        self.cmd = list(cmd)
        self.debug = debug

    def args(self, args):
        return FakeCmd(self.cmd + list(args), debug=self.debug)

    def env(self):
        return FakeEnv(self, debug=self.debug)

    def parse(self):
        """Parse the arguments and return the command; raises
        ErrorMessage on failure"""
        from .main import parse_args
        return parse_args(self.env())

    def run(self):
        from .main import run
        env = self.env()
        exit_code = run(env)
        return FakeResult(exit_code, env.get_stdout(), env.get_stderr())
