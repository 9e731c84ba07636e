"""
Tests for CLI commands.

These tests verify the command-line interface functionality including:
- start/stop/toggle timing across invocations
- intensity validation
- status, log, chart and watch output
- config and logs management
"""

import pytest

from click.testing import CliRunner

from contraction_clock.cli import cli
from contraction_clock.config import save_config
from contraction_clock.constants import CONTROLS_KEY, STORAGE_KEY
from contraction_clock.database.session import init_database
from contraction_clock.render.ascii import EMPTY_STATE_TEXT
from tests.helpers.storage import store_raw


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def run(cli_runner, temp_db, fake_clock):
    """Invoke the CLI against a temporary database and a fake clock."""

    def invoke(*args, **kwargs):
        return cli_runner.invoke(
            cli, ["--db", str(temp_db), *args], obj={"clock": fake_clock}, **kwargs
        )

    return invoke


class TestTimingCommands:
    """Test start, stop and toggle."""

    def test_start_then_stop(self, run, fake_clock):
        result = run("start")
        assert result.exit_code == 0
        assert "Contraction started at" in result.output

        fake_clock.advance(65_000)
        result = run("stop")

        assert result.exit_code == 0
        assert "Recorded contraction: 1m 5s at intensity 5/10" in result.output

    def test_double_start(self, run, fake_clock):
        run("start")
        fake_clock.advance(3_000)

        result = run("start")

        assert result.exit_code == 0
        assert "already in progress" in result.output

    def test_stop_without_start(self, run):
        result = run("stop")

        assert result.exit_code == 0
        assert "No contraction in progress." in result.output

    def test_sub_second_contraction_discarded(self, run, fake_clock):
        run("start")
        fake_clock.advance(500)

        result = run("stop")

        assert "discarded" in result.output
        assert "No contractions recorded." in run("log").output

    def test_toggle(self, run, fake_clock):
        assert "Contraction started" in run("toggle").output

        fake_clock.advance(61_000)
        result = run("toggle")

        assert result.exit_code == 0
        assert "Recorded contraction: 1m 1s" in result.output


class TestIntensityCommand:
    def test_set_intensity(self, run, fake_clock):
        result = run("intensity", "8")
        assert result.exit_code == 0
        assert "Intensity: 8/10" in result.output

        run("start")
        fake_clock.advance(60_000)

        assert "at intensity 8/10" in run("stop").output

    @pytest.mark.parametrize("level", ["0", "11", "high"])
    def test_invalid_intensity(self, run, level):
        result = run("intensity", level)

        assert result.exit_code == 2


class TestClearCommand:
    def test_clear_with_confirmation_flag(self, run, fake_clock):
        run("start")
        fake_clock.advance(60_000)
        run("stop")

        result = run("clear", "--yes")

        assert result.exit_code == 0
        assert "Session cleared" in result.output
        assert "No contractions recorded." in run("log").output

    def test_clear_aborted(self, run, fake_clock):
        run("start")
        fake_clock.advance(60_000)
        run("stop")

        result = run("clear", input="n\n")

        assert result.exit_code == 1
        assert "No contractions recorded." not in run("log").output


class TestDisplayCommands:
    """Test status, log, chart and watch."""

    def record_series(self, run, fake_clock, count):
        for _ in range(count):
            run("start")
            fake_clock.advance(60_000)
            run("stop")
            fake_clock.advance(240_000)

    def test_status_empty(self, run):
        result = run("status")

        assert result.exit_code == 0
        assert "5-1-1 Rule" in result.output
        assert "Is it time? NOT YET" in result.output

    def test_status_threshold_met(self, run, fake_clock):
        self.record_series(run, fake_clock, 13)

        result = run("status")

        assert "Is it time? YES" in result.output
        assert "Count          13" in result.output

    def test_status_shows_in_progress(self, run, fake_clock):
        run("start")
        fake_clock.advance(30_000)

        assert "Contraction in progress: 30s" in run("status").output

    def test_log(self, run, fake_clock):
        self.record_series(run, fake_clock, 2)

        result = run("log")

        assert result.exit_code == 0
        assert "#2*" in result.output
        assert "#1 " in result.output
        assert "5m 0s" in result.output

    def test_chart_empty(self, run):
        result = run("chart")

        assert result.exit_code == 0
        assert EMPTY_STATE_TEXT in result.output

    def test_chart_with_history(self, run, fake_clock):
        self.record_series(run, fake_clock, 3)

        result = run("chart", "--width", "60", "--no-follow")

        assert result.exit_code == 0
        assert "●" in result.output
        assert EMPTY_STATE_TEXT not in result.output

    def test_watch_single_tick(self, run):
        result = run("watch", "--ticks", "1", "--interval-ms", "10")

        assert result.exit_code == 0
        assert "Is it time?" in result.output
        assert EMPTY_STATE_TEXT in result.output


class TestConfigCommands:
    def test_set_rule_changes_evaluation(self, run):
        result = run("config", "set-rule", "411")
        assert result.exit_code == 0
        assert "Rule: 4-1-1 Rule" in result.output

        assert "4-1-1 Rule" in run("status").output

    def test_set_unknown_rule(self, run):
        assert run("config", "set-rule", "999").exit_code == 2

    def test_unset_rule(self, run):
        run("config", "set-rule", "411")

        result = run("config", "unset-rule")

        assert "Removed rule setting: 411" in result.output
        assert "No rule was configured." in run("config", "unset-rule").output
        assert "5-1-1 Rule" in run("status").output

    def test_show(self, run):
        assert "No config file" in run("config", "show").output

        run("config", "set-rule", "411")
        result = run("config", "show")

        assert "[clock]" in result.output
        assert "rule = '411'" in result.output

    def test_invalid_rule_in_config_file(self, run):
        save_config({"clock": {"rule": "bogus"}})

        result = run("status")

        assert result.exit_code == 1
        assert "Unknown rule 'bogus'" in result.output


class TestMiscCommands:
    def test_version(self, cli_runner):
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "contraction-clock" in result.output

    def test_logs_path(self, run):
        result = run("logs", "path")

        assert result.exit_code == 0
        assert "Log file:" in result.output

    def test_logs_clear_nothing(self, run):
        result = run("logs", "clear", "--yes")

        assert result.exit_code == 0


class TestUnreadableStorage:
    """Commands keep working when stored data cannot be read."""

    @pytest.fixture
    def corrupt_db(self, temp_db):
        init_database(str(temp_db))
        store_raw(STORAGE_KEY, "{oops")
        store_raw(CONTROLS_KEY, "not json either")
        return temp_db

    def test_start_and_stop(self, run, fake_clock, corrupt_db):
        result = run("start")
        assert result.exit_code == 0
        assert "Contraction started at" in result.output

        fake_clock.advance(62_000)
        result = run("stop")

        assert result.exit_code == 0
        assert "Recorded contraction: 1m 2s" in result.output
        assert "Count          1" in run("status").output

    def test_intensity(self, run, corrupt_db):
        result = run("intensity", "4")

        assert result.exit_code == 0
        assert "Intensity: 4/10" in run("status").output

    def test_status_shows_empty_session(self, run, corrupt_db):
        result = run("status")

        assert result.exit_code == 0
        assert "Is it time? NOT YET" in result.output
