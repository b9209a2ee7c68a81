from datetime import date, time
from typing import Callable, Iterator, List, Optional
from core.outcome import Outcome
from core.shift import Shift
from exceptions.custom_errors import ErrorKind, StorageError
from schemas.shift.intents import (
    AddShift,
    AnyShiftIntent,
    DeleteShift,
    EditShift,
    ListShifts,
    LogOvertime,
    MarkShift,
    SortShifts,
    UnmarkShift,
)
from storage.shift_storage import ShiftStorage
from utils.logger import get_logger

logger = get_logger(__name__)


class ShiftListing:
    """
    Numbered display rows over a registry's shifts.

    Rows are rendered on iteration, from the registry's order at that moment,
    so the same listing can be iterated again after changes.
    """

    EMPTY_MESSAGE = "No shifts available."
    HEADER = "List of all shifts:"

    def __init__(self, shifts: List[Shift]):
        self._shifts = shifts

    def __iter__(self) -> Iterator[str]:
        for number, shift in enumerate(self._shifts, start=1):
            yield f"{number}. {shift}"

    def __len__(self) -> int:
        return len(self._shifts)

    def is_empty(self) -> bool:
        return not self._shifts


class ShiftRegistry:
    """
    Owns the ordered list of shifts and applies changes to it.

    Every change is validated completely before anything is modified, so a
    rejected command leaves the list as it was. Successful changes are
    written to storage straight away; a failed write is logged and the
    in-memory list stays authoritative for the session.

    Positions are 0-based here; users see them 1-based.
    """

    def __init__(self, storage: ShiftStorage, today: Callable[[], date] = date.today):
        self.storage = storage
        self.today = today
        self._shifts: List[Shift] = []

    # --- lifecycle ---

    def load(self) -> None:
        """Replace the in-memory list with what storage holds, or start empty."""
        try:
            self._shifts[:] = self.storage.read_all()
        except StorageError as e:
            logger.warning(f"Failed to load shifts, starting with an empty list: {e}")
            self._shifts.clear()

    def flush(self) -> bool:
        """Write the current list to storage. Returns False if the write failed."""
        try:
            self.storage.overwrite(self._shifts)
        except StorageError as e:
            logger.error(f"Failed to save shifts: {e}")
            return False
        return True

    # --- queries ---

    @property
    def shifts(self) -> List[Shift]:
        """A copy of the current list; changing it does not affect the registry."""
        return list(self._shifts)

    def __len__(self) -> int:
        return len(self._shifts)

    def get(self, index: int) -> Shift:
        return self._shifts[index]

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._shifts)

    def has_overlap(
        self, start: time, end: time, on: date, ignore_index: Optional[int] = None
    ) -> bool:
        """
        Whether [start, end) on `on` would overlap any stored shift.

        Shifts on other days never overlap, and a shift ending exactly when
        another starts does not count. `ignore_index` skips one shift, so a
        shift being edited is not compared with itself.
        """
        for i, existing in enumerate(self._shifts):
            if i == ignore_index:
                continue
            if existing.overlaps(start, end, on):
                return True
        return False

    def list_shifts(self) -> ShiftListing:
        return ShiftListing(self._shifts)

    # --- commands ---

    def _check_timing(
        self, start: time, end: time, on: date, ignore_index: Optional[int] = None
    ) -> Optional[ErrorKind]:
        if on < self.today():
            logger.warning(f"Rejected shift with past date: {on}")
            return ErrorKind.INVALID_SHIFT_DATE
        if not start < end:
            return ErrorKind.INVALID_START_TIME
        if self.has_overlap(start, end, on, ignore_index):
            logger.warning(f"Rejected overlapping shift: {start} to {end} on {on}")
            return ErrorKind.SHIFT_TIMING_OVERLAP
        return None

    def add(self, start: time, end: time, on: date, task: str) -> Outcome:
        error = self._check_timing(start, end, on)
        if error:
            return Outcome.failure(error)

        shift = Shift(start_time=start, end_time=end, date=on, task=task)
        self._shifts.append(shift)
        self.flush()
        logger.info(f"Shift added: {shift}")
        return Outcome.success("Shift added", shift)

    def delete(self, index: int) -> Outcome:
        if not self._in_range(index):
            logger.warning(f"Attempted to delete shift with invalid index: {index}")
            return Outcome.failure(ErrorKind.INVALID_SHIFT_NUMBER, "Invalid shift index.")

        removed = self._shifts.pop(index)
        self.flush()
        logger.info(f"Shift deleted: {removed}")
        return Outcome.success("Shift deleted.", removed)

    def mark(self, index: int) -> Outcome:
        return self._set_done(index, True)

    def unmark(self, index: int) -> Outcome:
        return self._set_done(index, False)

    def _set_done(self, index: int, done: bool) -> Outcome:
        if not self._in_range(index):
            logger.warning(f"There is no shift with index: {index + 1}")
            return Outcome.failure(
                ErrorKind.INVALID_SHIFT_NUMBER, f"There is no shift with index: {index + 1}"
            )

        shift = self._shifts[index]
        if shift.done == done:
            state = "marked as done" if done else "unmarked"
            logger.info(f"Shift at index {index} is already {state}")
            return Outcome.unchanged(f"Shift #{index + 1} is already {state}.", shift)

        shift.done = done
        self.flush()
        logger.info(f"Shift {'marked' if done else 'unmarked'}: {shift}")
        if done:
            return Outcome.success(f"Marked shift as done!\n{shift}", shift)
        return Outcome.success("Marked shift as undone!", shift)

    def edit(
        self,
        index: int,
        start: Optional[time] = None,
        end: Optional[time] = None,
        on: Optional[date] = None,
        task: Optional[str] = None,
    ) -> Outcome:
        """
        Change any subset of a shift's schedule fields.

        None (or an empty task) keeps the current value. The shift is
        replaced by a new one that keeps the original's completion flag and
        overtime.
        """
        if not self._in_range(index):
            logger.warning(f"Attempted to edit shift with invalid index: {index}")
            return Outcome.failure(ErrorKind.INVALID_SHIFT_NUMBER)

        original = self._shifts[index]
        updated_start = start if start is not None else original.start_time
        updated_end = end if end is not None else original.end_time
        updated_date = on if on is not None else original.date
        updated_task = task if task else original.task

        error = self._check_timing(updated_start, updated_end, updated_date, ignore_index=index)
        if error:
            return Outcome.failure(error)

        updated = original.replaced_with(updated_start, updated_end, updated_date, updated_task)
        self._shifts[index] = updated
        self.flush()
        logger.info(f"Shift updated at index {index}: {updated}")
        return Outcome.success(f"Shift updated:\n{updated}", updated)

    def log_overtime(self, index: int, hours: float) -> Outcome:
        if not self._in_range(index):
            return Outcome.failure(ErrorKind.INVALID_SHIFT_NUMBER, "Invalid shift index.")
        if hours < 0:
            return Outcome.failure(ErrorKind.NEGATIVE_OVERTIME)

        shift = self._shifts[index]
        shift.overtime_hours = hours
        self.flush()
        logger.info(f"Overtime logged for shift {index}: {hours}h")
        return Outcome.success(f"Logged overtime: {hours}h for shift:\n{shift}", shift)

    def sort_chronologically(self) -> Outcome:
        """Stable sort by date, then start time. The new order is saved too."""
        self._shifts.sort(key=Shift.sort_key)
        self.flush()
        return Outcome.success("Shifts sorted by date and start time.")

    def apply(self, intent: AnyShiftIntent) -> Outcome:
        """Run the operation an intent asks for."""
        match intent:
            case AddShift():
                return self.add(intent.start, intent.end, intent.date, intent.task)
            case DeleteShift():
                return self.delete(intent.index)
            case MarkShift():
                return self.mark(intent.index)
            case UnmarkShift():
                return self.unmark(intent.index)
            case EditShift():
                return self.edit(intent.index, intent.start, intent.end, intent.date, intent.task)
            case LogOvertime():
                return self.log_overtime(intent.index, intent.hours)
            case SortShifts():
                return self.sort_chronologically()
            case ListShifts():
                listing = self.list_shifts()
                if listing.is_empty():
                    return Outcome.unchanged(ShiftListing.EMPTY_MESSAGE, listing)
                return Outcome.unchanged("\n".join([ShiftListing.HEADER, *listing]), listing)
            case _:
                raise TypeError(f"Unsupported shift intent: {intent!r}")
