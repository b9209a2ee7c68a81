import math
from dataclasses import dataclass
from datetime import time, date
from exceptions.custom_errors import ErrorKind, InvalidRecordError
from utils.shift_utils import format_time, format_date, intervals_overlap


@dataclass
class Shift:
    """
    A time-blocked task assignment on a single day.

    Schedule fields are fixed once a shift exists; an edit produces a new
    Shift. Only the completion flag and the logged overtime change in place.
    """

    start_time: time
    """Time of day the shift starts."""
    end_time: time
    """Time of day the shift ends. Always strictly after `start_time`."""
    date: date
    """Calendar day the shift takes place on."""
    task: str
    """What the nurse is assigned to do during the shift."""
    done: bool = False
    """Whether the shift has been marked as completed."""
    overtime_hours: float = 0.0
    """Overtime logged against the shift, never negative."""

    def __post_init__(self):
        if not self.task:
            raise InvalidRecordError(ErrorKind.SHIFT_TASK_EMPTY)
        if not self.start_time < self.end_time:
            raise InvalidRecordError(ErrorKind.INVALID_START_TIME)
        if not math.isfinite(self.overtime_hours):
            raise InvalidRecordError(ErrorKind.INVALID_SHIFT_LOGOT_FORMAT)
        if self.overtime_hours < 0:
            raise InvalidRecordError(ErrorKind.NEGATIVE_OVERTIME)

    def overlaps(self, start: time, end: time, on: date) -> bool:
        """True if [start, end) on `on` intersects this shift beyond a shared boundary."""
        if self.date != on:
            return False
        return intervals_overlap(start, end, self.start_time, self.end_time)

    def replaced_with(self, start_time: time, end_time: time, on: date, task: str) -> "Shift":
        """
        Build the shift that replaces this one after an edit.

        The new shift keeps this shift's completion flag and overtime, so
        changing schedule details never clears what has been tracked.
        """
        return Shift(
            start_time=start_time,
            end_time=end_time,
            date=on,
            task=task,
            done=self.done,
            overtime_hours=self.overtime_hours,
        )

    def sort_key(self):
        return (self.date, self.start_time)

    def __str__(self) -> str:
        mark_status = "[X]" if self.done else "[ ]"
        overtime = f", Overtime: {self.overtime_hours}h" if self.overtime_hours > 0 else ""
        return (
            f"{mark_status} From: {format_time(self.start_time)}, "
            f"To: {format_time(self.end_time)}, "
            f"Date: {format_date(self.date)}, "
            f"shiftTask: {self.task}{overtime}"
        )
