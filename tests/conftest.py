import pytest

from drtv_guide.config import ConfigManager


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DRTV_* variables from the developer's shell out of the tests"""
    for env_name in ConfigManager.ENV_SETTINGS:
        monkeypatch.delenv(env_name, raising=False)


@pytest.fixture
def raw_schedule():
    """Response mixing the field names of several API versions"""
    return [
        {
            "channelId": 20875,
            "channelName": "DR1",
            "schedules": [
                {
                    "item": {"title": "Nyhederne"},
                    "startDate": "2026-02-26T19:00:00+01:00",
                    "endDate": "2026-02-26T19:30:00+01:00",
                },
                {
                    "customTitle": "Vejret",
                    "startDate": "2026-02-26T18:55:00+01:00",
                    "endDate": "2026-02-26T19:00:00+01:00",
                },
                {
                    "showTitle": "   ",
                    "startDate": "2026-02-26T20:00:00+01:00",
                    "endDate": "2026-02-26T21:00:00+01:00",
                },
            ],
        },
        {
            "channelId": "20876",
            "items": [
                {
                    "showTitle": "Deadline",
                    "start": "2026-02-26T22:00:00+01:00",
                    "end": "2026-02-26T22:30:00+01:00",
                },
                {
                    "showTitle": "Broken",
                    "start": "not a date",
                    "end": "2026-02-26T23:00:00+01:00",
                },
            ],
        },
        {
            "channelId": "99999",
            "schedule": [
                {
                    "customTitle": "Testbillede",
                    "scheduleStart": "2026-02-26T00:00:00Z",
                    "scheduleEnd": "2026-02-26T01:00:00Z",
                }
            ],
        },
    ]
