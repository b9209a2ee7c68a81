from typing import Any, Dict
from core.shift import Shift
from storage.csv_storage import CsvStorage
from utils.shift_utils import format_date, format_time, parse_date, parse_time


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered not in ("true", "false"):
        raise ValueError(f"Expected True or False, got '{value}'")
    return lowered == "true"


class ShiftStorage(CsvStorage[Shift]):
    COLUMNS = ("start_time", "end_time", "date", "task", "done", "overtime_hours")

    def to_row(self, record: Shift) -> Dict[str, Any]:
        return {
            "start_time": format_time(record.start_time),
            "end_time": format_time(record.end_time),
            "date": format_date(record.date),
            "task": record.task,
            "done": str(record.done),
            "overtime_hours": repr(float(record.overtime_hours)),
        }

    def from_row(self, row: Dict[str, str]) -> Shift:
        return Shift(
            start_time=parse_time(row["start_time"]),
            end_time=parse_time(row["end_time"]),
            date=parse_date(row["date"]),
            task=row["task"],
            done=_parse_bool(row["done"]),
            overtime_hours=float(row["overtime_hours"]),
        )
