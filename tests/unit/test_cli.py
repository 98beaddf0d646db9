"""Tests for the run_simulation command-line entry point."""

import importlib.util
import json
import subprocess
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "run_simulation.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("run_simulation", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRunSimulationCli:

    def test_build_overrides(self, cli):
        args = cli.parse_args(["--seed", "5", "--ticks", "300"])
        assert cli.build_overrides(args) == {"market": {"seed": 5, "total_ticks": 300}}
        assert cli.build_overrides(cli.parse_args([])) == {}

    def test_pretty_report(self, cli, capsys):
        assert cli.main(["--seed", "3", "--ticks", "200"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Cumulative PnL per Strategy:")
        assert "Total PnL:" in out

    def test_json_replicas(self, cli, capsys):
        assert cli.main(["--seed", "10", "--ticks", "100", "--replicas", "3",
                         "--format", "json"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line)["seed"] for line in lines] == [10, 11, 12]

    def test_invalid_config_exit_code(self, cli, capsys):
        assert cli.main(["--ticks", "0"]) == 2
        assert "Configuration error" in capsys.readouterr().err

    @pytest.mark.parametrize("argv", [
        ["--replicas", "0"],
        ["--replicas", "-2"],
        ["--log-level", "LOUD"],
        ["--format", "xml"],
    ])
    def test_invalid_arguments_rejected(self, cli, argv, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.parse_args(argv)
        assert exc_info.value.code == 2
        assert "argument --" in capsys.readouterr().err

    def test_log_level_case_insensitive(self, cli):
        assert cli.parse_args(["--log-level", "debug"]).log_level == "DEBUG"


class TestRunSimulationProcess:
    """The script in a fresh interpreter, where logging is configured after import."""

    def run_script(self, *argv: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, str(SCRIPT), *argv],
            capture_output=True,
            text=True,
            cwd=SCRIPT.parents[1],
            timeout=120,
        )

    def test_json_stdout_is_report_only(self):
        result = self.run_script("--seed", "1", "--ticks", "40", "--format", "json",
                                 "--log-level", "DEBUG")

        assert result.returncode == 0, result.stderr
        lines = result.stdout.splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["total_ticks"] == 40
        # Records still emitted, on stderr
        assert "Trade transition" in result.stderr
        assert "Simulation started" in result.stderr

    def test_default_level_keeps_stderr_quiet(self):
        result = self.run_script("--seed", "1", "--ticks", "40")

        assert result.returncode == 0, result.stderr
        assert result.stdout.startswith("Cumulative PnL per Strategy:")
        assert "Trade transition" not in result.stdout + result.stderr
