"""Tests for the command-line entry point."""

import json
from datetime import datetime
from unittest.mock import AsyncMock, Mock, patch

import pytest

from weekgrid import cli
from weekgrid.events.models import CalendarData, CanonicalEvent


@pytest.fixture
def cli_settings(test_settings):
    test_settings.log_level = "INFO"
    test_settings.log_file = None
    return test_settings


@pytest.fixture(autouse=True)
def patched_environment(cli_settings):
    with patch.object(cli, "get_settings", return_value=cli_settings), patch.object(
        cli, "setup_logging"
    ) as mock_setup:
        yield mock_setup


def make_cache(data):
    cache = Mock()
    cache.get_calendar_data = AsyncMock(return_value=data)
    return cache


class TestCreateParser:
    def test_source_flags(self):
        args = cli.create_parser().parse_args(
            ["--ics-url", "https://example.com/cal.ics", "--max-results", "5", "--grid"]
        )

        params = cli.params_from_args(args)

        assert params.ics_url == "https://example.com/cal.ics"
        assert params.max_results == 5
        assert params.api_key is None
        assert args.grid is True


class TestMain:
    """Test cli.main output."""

    def test_unconfigured_prints_empty_events(self, capsys):
        assert cli.main([]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["events"] == []
        assert "startDate" in payload

    def test_prints_event_payload(self, capsys):
        event = CanonicalEvent(
            id="planning",
            title="Planning",
            start=datetime(2024, 1, 3, 9, 0),
            end=datetime(2024, 1, 3, 10, 0),
        )
        data = CalendarData(events=[event], start_date=datetime(2024, 1, 1))

        with patch.object(cli, "EventCache", return_value=make_cache(data)):
            assert cli.main(["--api-key", "k"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["events"] == [
            {
                "id": "planning",
                "title": "Planning",
                "start": "2024-01-03T09:00:00",
                "end": "2024-01-03T10:00:00",
                "allDay": False,
            }
        ]

    def test_grid_output(self, capsys):
        event = CanonicalEvent(
            id="planning",
            title="Planning",
            start=datetime(2024, 1, 3, 9, 0),
            end=datetime(2024, 1, 3, 10, 0),
        )
        data = CalendarData(events=[event], start_date=datetime(2024, 1, 1))

        with patch.object(cli, "EventCache", return_value=make_cache(data)):
            assert cli.main(["--api-key", "k", "--grid"]) == 0

        grid = json.loads(capsys.readouterr().out)
        assert [day["header"] for day in grid["days"]][:3] == ["Mon 1/1", "Tue 1/2", "Wed 1/3"]
        assert grid["days"][2]["timed"][0]["offset"] == 4

    def test_log_level_flag_overrides_settings(self, patched_environment, capsys):
        cli.main(["--log-level", "DEBUG"])

        assert patched_environment.call_args[0][0] == "DEBUG"

    def test_invalid_grid_configuration(self, cli_settings, capsys):
        cli_settings.grid_origin_hour = 20
        cli_settings.grid_end_hour = 7
        data = CalendarData(events=[], start_date=datetime(2024, 1, 1))

        with patch.object(cli, "EventCache", return_value=make_cache(data)):
            assert cli.main(["--grid"]) == 2

        assert capsys.readouterr().out == ""
