"""Logger Tests.

Tests for fluent configuration, level emission, verbosity inheritance,
fatal termination and end-to-end console/file output.
"""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from namedlog import CYAN, LoggerConfig, RED, Registry, WHITE


class LoggerTestBase(unittest.TestCase):
    """Runs each test inside a temporary working directory."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self._cwd = os.getcwd()
        os.chdir(self.tmp)
        self.exits: list[int] = []
        self.registry = Registry(exit_func=self.exits.append)

    def tearDown(self) -> None:
        os.chdir(self._cwd)
        self._tmp.cleanup()

    def capture(self, func, *args) -> str:
        out = io.StringIO()
        with redirect_stdout(out):
            func(*args)
        return out.getvalue()


class LoggerConfigurationTest(LoggerTestBase):
    """Test the chained setters."""

    def test_setters_chain_and_return_self(self) -> None:
        log = self.registry.create_or_get("chain")
        result = log.no_stdout().no_file().raw().set_time_layout("%H").set_verbosity(1)

        self.assertIs(result, log)
        self.assertFalse(log.stdout_enabled)
        self.assertFalse(log.file_enabled)
        self.assertTrue(log.raw_mode)
        self.assertEqual(log.time_layout, "%H")
        self.assertEqual(log.verbosity, 1)

    def test_path_normalization(self) -> None:
        log = self.registry.create_or_get("testLog")
        self.assertEqual(log.path, "logs/")

        log.set_path("test")
        self.assertEqual(log.path, "test/")

        log.set_path("loggers/")
        self.assertEqual(log.path, "loggers/")

    def test_verbosity_clamps(self) -> None:
        log = self.registry.create_or_get("testLog")
        log.set_verbosity(3)
        self.assertEqual(log.verbosity, 3)
        log.set_verbosity(6)
        self.assertEqual(log.verbosity, 3)
        log.set_verbosity(-25)
        self.assertEqual(log.verbosity, -1)

    def test_configure_and_snapshot(self) -> None:
        log = self.registry.create_or_get("cfg")
        log.configure(LoggerConfig(stdout=False, raw=True, path="out", verbosity=0))

        snapshot = log.config
        self.assertFalse(snapshot.stdout)
        self.assertTrue(snapshot.raw)
        self.assertEqual(snapshot.path, "out/")
        self.assertEqual(snapshot.verbosity, 0)


class LoggerEmissionTest(LoggerTestBase):
    """Test level methods against console and files."""

    def test_warning_end_to_end(self) -> None:
        log = self.registry.create_or_get("svc")

        out = self.capture(log.warning, "retry %d", 3)

        self.assertIn("WARNING", out)
        self.assertIn("retry 3", out)
        lines = (self.tmp / "logs" / "svc-warning.log").read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].endswith("retry 3"))

    def test_file_disabled_still_prints(self) -> None:
        log = self.registry.create_or_get("svc").no_file()

        out = self.capture(log.error, "boom")

        self.assertIn("ERROR: ", out)
        self.assertIn("boom", out)
        self.assertFalse((self.tmp / "logs").exists())

    def test_info_hidden_at_default_verbosity_but_written(self) -> None:
        log = self.registry.create_or_get("svc")

        out = self.capture(log.info, "hello")

        self.assertEqual(out, "")
        self.assertTrue((self.tmp / "logs" / "svc-info.log").exists())

    def test_inherited_verbosity_tracks_global(self) -> None:
        log = self.registry.create_or_get("svc").no_file().set_verbosity(-1)

        self.registry.set_global_verbosity(0)
        self.assertEqual(self.capture(log.error, "hidden"), "")

        self.registry.set_global_verbosity(3)
        out = self.capture(log.info, "shown")
        self.assertIn("INFO: ", out)
        self.assertIn(CYAN, out)

    def test_own_verbosity_overrides_global(self) -> None:
        log = self.registry.create_or_get("svc").no_file().set_verbosity(3)
        self.registry.set_global_verbosity(0)
        self.assertIn("shown", self.capture(log.info, "shown"))

    def test_template_without_args_is_not_formatted(self) -> None:
        log = self.registry.create_or_get("svc").no_stdout().raw()
        log.error("100% done")
        content = (self.tmp / "logs" / "svc-error.log").read_text(encoding="utf-8")
        self.assertEqual(content, "100% done\n")

    def test_custom_level(self) -> None:
        log = self.registry.create_or_get("svc").raw()

        out = self.capture(log.log, "Audit", "user %s", "alice")

        self.assertIn(f"{WHITE}AUDIT: ", out)
        content = (self.tmp / "logs" / "svc-audit.log").read_text(encoding="utf-8")
        self.assertEqual(content, "user alice\n")

    def test_empty_name_has_no_prefix(self) -> None:
        log = self.registry.create_or_get("").no_stdout()
        log.warning("anon")
        self.assertTrue((self.tmp / "logs" / "warning.log").exists())

    def test_fatal_writes_then_exits(self) -> None:
        log = self.registry.create_or_get("svc").raw()
        out = io.StringIO()

        with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            log.fatal("dead %s", "end")

        self.assertEqual(ctx.exception.code, 1)
        self.assertEqual(self.exits, [1])
        self.assertIn(f"{RED}FATAL: ", out.getvalue())
        content = (self.tmp / "logs" / "svc-fatal.log").read_text(encoding="utf-8")
        self.assertEqual(content, "dead end\n")

    def test_fatal_exits_even_when_write_fails(self) -> None:
        Path("blocker").write_text("x", encoding="utf-8")
        log = self.registry.create_or_get("svc").set_path("blocker").no_stdout()

        with self.assertLogs("namedlog.writer", level="WARNING"), self.assertRaises(SystemExit):
            log.fatal("no file")
        self.assertEqual(self.exits, [1])

    def test_mismatched_template_does_not_raise(self) -> None:
        log = self.registry.create_or_get("svc").raw()

        with self.assertLogs("namedlog.logger", level="WARNING"):
            out = self.capture(log.warning, "count %d", "x")

        self.assertIn("count %d ('x',)", out)
        content = (self.tmp / "logs" / "svc-warning.log").read_text(encoding="utf-8")
        self.assertEqual(content, "count %d ('x',)\n")

    def test_fatal_exits_when_template_is_mismatched(self) -> None:
        log = self.registry.create_or_get("svc").no_stdout().no_file()

        with self.assertLogs("namedlog.logger", level="WARNING"), self.assertRaises(SystemExit):
            log.fatal("count %d", "x")
        self.assertEqual(self.exits, [1])

    def test_unencodable_argument_reaches_file(self) -> None:
        log = self.registry.create_or_get("svc").no_stdout().raw()

        log.error("bad name %s", "caf\udce9")

        content = (self.tmp / "logs" / "svc-error.log").read_text(encoding="utf-8")
        self.assertEqual(content, "bad name caf\\udce9\n")

    def test_fatal_uses_sys_exit_by_default(self) -> None:
        log = Registry().create_or_get("svc").no_stdout().no_file()
        with self.assertRaises(SystemExit) as ctx:
            log.fatal("bye")
        self.assertEqual(ctx.exception.code, 1)


class LoggerTimerTest(LoggerTestBase):
    """Test start_timer / stop_timer."""

    def test_stop_timer_emits_once(self) -> None:
        log = self.registry.create_or_get("timed").no_stdout().raw()

        log.start_timer()
        log.stop_timer("elapsed: {time} ({time})")
        log.stop_timer("elapsed again: {time}")

        lines = (self.tmp / "logs" / "timed-info.log").read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("elapsed: "))
        self.assertNotIn("{time}", lines[0])
        elapsed = lines[0][len("elapsed: "):].split(" (")[0]
        self.assertEqual(lines[0], f"elapsed: {elapsed} ({elapsed})")
        self.assertFalse(log.timer.running)

    def test_stop_without_start_is_noop(self) -> None:
        log = self.registry.create_or_get("timed").no_stdout()
        log.stop_timer("never {time}")
        self.assertFalse((self.tmp / "logs").exists())

    def test_restart_overwrites_start(self) -> None:
        log = self.registry.create_or_get("timed")
        log.start_timer()
        first = log.timer.start
        log.start_timer()
        self.assertTrue(log.timer.running)
        self.assertGreaterEqual(log.timer.start, first)

    def test_percent_in_stop_message_is_literal(self) -> None:
        log = self.registry.create_or_get("timed").no_stdout().raw()
        log.start_timer()
        log.stop_timer("100% in {time}")
        content = (self.tmp / "logs" / "timed-info.log").read_text(encoding="utf-8")
        self.assertTrue(content.startswith("100% in "))


if __name__ == "__main__":
    unittest.main()
