import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from drtv_guide.models import ScheduleRecord

CET = timezone(timedelta(hours=1))


@pytest.fixture
def record():
    return ScheduleRecord(
        channel_name="DR1",
        title="Nyhederne",
        start_time=datetime(2026, 2, 26, 19, 0, tzinfo=CET),
        end_time=datetime(2026, 2, 26, 19, 30, tzinfo=CET),
    )


def test_record_is_immutable(record):
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.title = "Changed"


def test_format_line(record):
    assert record.format_line() == "DR1              | 19:00    - 19:30    | Nyhederne"


def test_to_dict(record):
    assert record.to_dict() == {
        "channel_name": "DR1",
        "title": "Nyhederne",
        "start_time": "2026-02-26 19:00",
        "end_time": "2026-02-26 19:30",
    }
