from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Literal, Optional, Union
import datetime as dt


# Define intent models
class ShiftIntent(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class AddShift(ShiftIntent):
    command: Literal["add"] = "add"
    start: dt.time
    end: dt.time
    date: dt.date
    task: str = Field(min_length=1)


class DeleteShift(ShiftIntent):
    command: Literal["del"] = "del"
    index: int = Field(ge=0)


class MarkShift(ShiftIntent):
    command: Literal["mark"] = "mark"
    index: int = Field(ge=0)


class UnmarkShift(ShiftIntent):
    command: Literal["unmark"] = "unmark"
    index: int = Field(ge=0)


class EditShift(ShiftIntent):
    command: Literal["edit"] = "edit"
    index: int = Field(ge=0)
    # None means "keep the current value"
    start: Optional[dt.time] = None
    end: Optional[dt.time] = None
    date: Optional[dt.date] = None
    task: Optional[str] = None

    @model_validator(mode="after")
    def check_has_changes(self) -> "EditShift":
        if self.start is None and self.end is None and self.date is None and self.task is None:
            raise ValueError("An edit must change at least one field.")
        return self


class LogOvertime(ShiftIntent):
    command: Literal["logot"] = "logot"
    index: int = Field(ge=0)
    hours: float


class ListShifts(ShiftIntent):
    command: Literal["list"] = "list"


class SortShifts(ShiftIntent):
    command: Literal["sort"] = "sort"


AnyShiftIntent = Union[
    AddShift,
    DeleteShift,
    MarkShift,
    UnmarkShift,
    EditShift,
    LogOvertime,
    ListShifts,
    SortShifts,
]
