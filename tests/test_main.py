from __future__ import annotations

import io
import threading

import pytest

from dnstlib.commands.help import Help
from dnstlib.commands.nsec3hash import Nsec3Hash
from dnstlib.common import ErrorMessage, UsageError, __version__
from dnstlib.env import FakeCmd, RealEnv
from dnstlib.main import try_ldns_compatibility
from dnstlib.nsec3 import parse_name


DNST = FakeCmd(["dnst"])
NSEC3_HASH = DNST.args(["nsec3-hash"])


def test_dnst_parse() -> None:
    with pytest.raises(UsageError):
        NSEC3_HASH.parse()
    with pytest.raises(UsageError):
        NSEC3_HASH.args(["-a"]).parse()


def test_dnst_parse_options() -> None:
    cmd = NSEC3_HASH.args(["example.test"]).parse()
    assert cmd == Nsec3Hash(1, 1, b"", parse_name("example.test"))

    cmd = NSEC3_HASH.args(["--algorithm", "SHA-1", "--iterations", "12",
                           "--salt", "aabbccdd", "a.example"]).parse()
    assert cmd == Nsec3Hash(1, 12, bytes.fromhex("aabbccdd"), parse_name("a.example"))

    assert NSEC3_HASH.args(["-t", "0", "example.test"]).parse().iterations == 0
    assert NSEC3_HASH.args(["-i", "7", "example.test"]).parse().iterations == 7


def test_dnst_run() -> None:
    res = NSEC3_HASH.run()
    assert res.exit_code == 2
    assert res.stdout == ""

    res = NSEC3_HASH.args(["example.test"]).run()
    assert res.exit_code == 0
    assert res.stdout == "o09614ibh1cq1rcc86289olr22ea0fso.\n"
    assert res.stderr == ""


def test_dnst_run_rfc5155() -> None:
    res = NSEC3_HASH.args(["-a", "1", "-i", "12", "-s", "aabbccdd", "A.Example."]).run()
    assert res.exit_code == 0
    assert res.stdout == "35mthgpgcu1qg68fab165klnsnk3dpvl.\n"


def test_no_subcommand_is_usage_error() -> None:
    res = DNST.run()
    assert res.exit_code == 2
    assert res.stdout == ""
    assert res.stderr.startswith("usage: dnst")
    assert "required" in res.stderr


def test_usage_errors_are_printed_verbatim() -> None:
    res = NSEC3_HASH.args(["-a", "2", "example.test"]).run()
    assert res.exit_code == 2
    assert "ERROR:" not in res.stderr
    assert "dnst nsec3-hash: error: argument -a/--algorithm: unknown algorithm number" in res.stderr

    res = NSEC3_HASH.args(["-a", "sha-1", "example.test"]).run()
    assert "unknown algorithm mnemonic" in res.stderr

    res = NSEC3_HASH.args(["-s", "xyz", "example.test"]).run()
    assert res.exit_code == 2
    assert "invalid hex string" in res.stderr

    res = NSEC3_HASH.args(["example.test", "other.test"]).run()
    assert res.exit_code == 2
    assert "unrecognized arguments: other.test" in res.stderr


def test_unknown_subcommand() -> None:
    res = DNST.args(["dig", "example.test"]).run()
    assert res.exit_code == 2
    assert "invalid choice" in res.stderr


def test_help_and_version() -> None:
    res = DNST.args(["--help"]).run()
    assert res.exit_code == 0
    assert "nsec3-hash" in res.stdout
    assert res.stderr == ""

    res = NSEC3_HASH.args(["-h"]).run()
    assert res.exit_code == 0
    assert "DOMAIN_NAME" in res.stdout

    res = DNST.args(["--version"]).run()
    assert res.exit_code == 0
    assert res.stdout == "dnst %s\n" % __version__


def test_help_command() -> None:
    cmd = DNST.args(["help"]).parse()
    assert isinstance(cmd, Help)

    res = DNST.args(["help", "nsec3-hash"]).run()
    assert res.exit_code == 0
    assert "--iterations" in res.stdout

    res = DNST.args(["help", "bogus"]).run()
    assert res.exit_code == 1
    assert res.stderr == "[dnst] ERROR: unknown command: bogus\n"


def test_legacy_name_dispatch() -> None:
    assert try_ldns_compatibility(["dnst", "nsec3-hash", "example.test"]) is None
    assert try_ldns_compatibility(["ldns-other"]) is None
    cmd = try_ldns_compatibility(["ldns-nsec3-hash", "example.test"])
    assert isinstance(cmd, Nsec3Hash)


def test_legacy_name_with_no_arguments() -> None:
    with pytest.raises(ErrorMessage, match="Missing domain name argument"):
        try_ldns_compatibility(["ldns-nsec3-hash"])


@pytest.mark.parametrize("args,message", [
    ([], "Missing binary name"),
    (["/"], "Missing binary file name"),
    ([b"ldns-\xff"], "Binary file name is not valid unicode"),
])
def test_dispatch_errors(args: list, message: str) -> None:
    with pytest.raises(ErrorMessage, match=message):
        try_ldns_compatibility(args)


def test_run_with_empty_argv() -> None:
    res = FakeCmd([]).run()
    assert res.exit_code == 1
    assert res.stderr == "[dnst] ERROR: Missing binary name\n"


def test_error_rendering() -> None:
    err = ErrorMessage("boom").context("hashing").context("running")
    out = io.StringIO()
    err.pretty_print(out, "dnst")
    assert out.getvalue() == "[dnst] ERROR: boom\n... while hashing\n... while running\n"
    assert err.exit_code == 1


def test_error_rendering_on_terminal() -> None:
    class Terminal(io.StringIO):
        def isatty(self) -> bool:
            return True

    out = Terminal()
    ErrorMessage("boom").pretty_print(out, "dnst")
    assert out.getvalue() == "[dnst] \x1b[31mERROR:\x1b[0m boom\n"


def test_debug_output_goes_to_stderr() -> None:
    res = FakeCmd(["dnst", "nsec3-hash", "example.test"], debug=True).run()
    assert res.stdout == "o09614ibh1cq1rcc86289olr22ea0fso.\n"
    assert ";; DEBUG: NSEC3 hash of example.test.: algorithm=SHA-1 iterations=1 salt=-" \
        in res.stderr


def test_real_env_debug_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DNST_DEBUG", "1")
    assert RealEnv(["dnst"]).debug
    monkeypatch.setenv("DNST_DEBUG", "0")
    assert not RealEnv(["dnst"]).debug
    monkeypatch.delenv("DNST_DEBUG")
    assert not RealEnv(["dnst"]).debug


def test_concurrent_runs_do_not_interfere() -> None:
    results = {}

    def worker(i: int) -> None:
        results[i] = NSEC3_HASH.args(["-i", str(i), "example.test"]).run()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results[1].stdout == "o09614ibh1cq1rcc86289olr22ea0fso.\n"
    assert len({r.stdout for r in results.values()}) == 8
    for r in results.values():
        assert r.stdout.count("\n") == 1
