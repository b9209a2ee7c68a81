from datetime import date, time
import pytest
from core.shift import Shift
from core.shift_registry import ShiftRegistry
from exceptions.custom_errors import FileReadingError, FileWritingError
from storage.shift_storage import ShiftStorage

TODAY = date(2025, 6, 1)
DAY = date(2025, 6, 10)


class FakeStorage:
    """In-memory stand-in for a storage object that records every write."""

    def __init__(self, records=None, fail_reads=False, fail_writes=False):
        self.records = list(records or [])
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.writes = 0

    def read_all(self):
        if self.fail_reads:
            raise FileReadingError("cannot read")
        return list(self.records)

    def overwrite(self, records):
        if self.fail_writes:
            raise FileWritingError("disk full")
        self.writes += 1
        self.records = list(records)


@pytest.fixture
def fake_storage():
    return FakeStorage()


@pytest.fixture
def registry(fake_storage):
    return ShiftRegistry(fake_storage, today=lambda: TODAY)


@pytest.fixture
def shift_storage(tmp_path):
    return ShiftStorage(tmp_path / "shifts.csv")


def make_shift(start="10:00", end="11:00", on=DAY, task="rounds", **kwargs):
    sh, sm = map(int, start.split(":"))
    eh, em = map(int, end.split(":"))
    return Shift(start_time=time(sh, sm), end_time=time(eh, em), date=on, task=task, **kwargs)
