import re

import pytest

from drtv_guide import __version__
from drtv_guide.args import ArgumentParser, ArgumentValidator


class TestValidator:
    @pytest.mark.parametrize("date", [None, "2026-02-26", "2026-13-40", "0000-00-00"])
    def test_valid_dates(self, date):
        assert ArgumentValidator.validate_date(date) == (True, None)

    @pytest.mark.parametrize("date", ["26-02-2026", "2026-2-26", "2026/02/26", "today", "2026-02-26x"])
    def test_invalid_dates(self, date):
        valid, error = ArgumentValidator.validate_date(date)

        assert not valid
        assert date in error

    @pytest.mark.parametrize("timeout, expected", [(None, True), (5, True), (0, False), (301, False)])
    def test_timeout(self, timeout, expected):
        assert ArgumentValidator.validate_timeout(timeout)[0] is expected


class TestArgumentParser:
    def test_defaults_to_today(self):
        args = ArgumentParser().parse_args([])

        assert re.match(r"^\d{4}-\d{2}-\d{2}$", args.date)

    def test_calendar_invalid_date_passes(self):
        args = ArgumentParser().parse_args(["2026-13-40"])

        assert args.date == "2026-13-40"

    def test_malformed_date_exits_with_usage(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            ArgumentParser().parse_args(["26/02/2026"])

        assert excinfo.value.code == 2
        assert "usage:" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            ArgumentParser().parse_args(["--version"])

        assert excinfo.value.code == 0
        assert capsys.readouterr().out.strip() == __version__

    def test_create_config(self, tmp_path):
        path = tmp_path / "drtv.xml"

        with pytest.raises(SystemExit) as excinfo:
            ArgumentParser().parse_args(["--create-config", str(path)])

        assert excinfo.value.code == 0
        assert "<settings" in path.read_text(encoding="utf-8")

    def test_create_config_unwritable_path(self, tmp_path, capsys):
        blocker = tmp_path / "file.txt"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(SystemExit) as excinfo:
            ArgumentParser().parse_args(["--create-config", str(blocker / "drtv.xml")])

        assert excinfo.value.code == 2
        assert "Cannot write configuration file" in capsys.readouterr().err

    def test_logging_config(self):
        arg_parser = ArgumentParser()

        default = arg_parser.get_logging_config(arg_parser.parse_args([]))
        assert default == {"level": "default", "console": True, "quiet": False, "log_file": None}

        quiet = arg_parser.get_logging_config(arg_parser.parse_args(["--debug", "--quiet"]))
        assert quiet["level"] == "debug"
        assert quiet["console"] is False
        assert quiet["quiet"] is True

    def test_warning_and_debug_are_exclusive(self):
        with pytest.raises(SystemExit):
            ArgumentParser().parse_args(["--warning", "--debug"])

    def test_config_overrides(self, tmp_path):
        arg_parser = ArgumentParser()
        args = arg_parser.parse_args(
            ["2026-02-26", "--no-csv", "--timeout", "12", "--output-dir", str(tmp_path)]
        )

        assert arg_parser.get_config_overrides(args) == {
            "readtimeout": 12.0,
            "outputdir": str(tmp_path),
            "console": None,
            "json": None,
            "csv": False,
        }
