from enum import Enum


class ErrorKind(str, Enum):
    """Every user-facing failure a command line can end in."""

    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_COMMAND = "INVALID_COMMAND"

    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    INVALID_SHIFT_NUMBER = "INVALID_SHIFT_NUMBER"
    INVALID_SHIFT_ADD_FORMAT = "INVALID_SHIFT_ADD_FORMAT"
    INVALID_SHIFT_DEL_FORMAT = "INVALID_SHIFT_DEL_FORMAT"
    INVALID_SHIFT_EDIT_FORMAT = "INVALID_SHIFT_EDIT_FORMAT"
    INVALID_SHIFT_MARK_FORMAT = "INVALID_SHIFT_MARK_FORMAT"
    INVALID_SHIFT_UNMARK_FORMAT = "INVALID_SHIFT_UNMARK_FORMAT"
    INVALID_SHIFT_LOGOT_FORMAT = "INVALID_SHIFT_LOGOT_FORMAT"
    SHIFT_TASK_EMPTY = "SHIFT_TASK_EMPTY"

    INVALID_START_TIME = "INVALID_START_TIME"
    INVALID_SHIFT_DATE = "INVALID_SHIFT_DATE"
    SHIFT_TIMING_OVERLAP = "SHIFT_TIMING_OVERLAP"
    NEGATIVE_OVERTIME = "NEGATIVE_OVERTIME"

    INVALID_TEST_ADD_FORMAT = "INVALID_TEST_ADD_FORMAT"
    INVALID_TEST_DEL_FORMAT = "INVALID_TEST_DEL_FORMAT"
    INVALID_TEST_LIST_FORMAT = "INVALID_TEST_LIST_FORMAT"
    EMPTY_PATIENT_ID = "EMPTY_PATIENT_ID"
    EMPTY_PATIENT_TEST_NAME = "EMPTY_PATIENT_TEST_NAME"
    EMPTY_PATIENT_TEST_RESULT = "EMPTY_PATIENT_TEST_RESULT"


ERROR_MESSAGES = {
    ErrorKind.EMPTY_INPUT: "Input is empty!",
    ErrorKind.INVALID_FORMAT: "Invalid input format!",
    ErrorKind.INVALID_COMMAND: "Invalid command!",
    ErrorKind.INVALID_TIME_FORMAT: "Invalid time format! Use HH:MM, e.g. 09:30.",
    ErrorKind.INVALID_DATE_FORMAT: "Invalid date format! Use YYYY-MM-DD, e.g. 2025-04-01.",
    ErrorKind.INVALID_SHIFT_NUMBER: "Invalid shift index!",
    ErrorKind.INVALID_SHIFT_ADD_FORMAT: (
        "Invalid inputs for adding shift! "
        "Expected: shift add s/START e/END d/DATE st/TASK"
    ),
    ErrorKind.INVALID_SHIFT_DEL_FORMAT: (
        "Invalid inputs for deleting shift! Expected: shift del id/INDEX"
    ),
    ErrorKind.INVALID_SHIFT_EDIT_FORMAT: (
        "Invalid inputs for editing shift! "
        "Expected: shift edit id/INDEX [s/START] [e/END] [d/DATE] [st/TASK] "
        "with at least one field to change"
    ),
    ErrorKind.INVALID_SHIFT_MARK_FORMAT: (
        "Invalid inputs for marking shift! Expected: shift mark id/INDEX"
    ),
    ErrorKind.INVALID_SHIFT_UNMARK_FORMAT: (
        "Invalid inputs for unmarking shift! Expected: shift unmark id/INDEX"
    ),
    ErrorKind.INVALID_SHIFT_LOGOT_FORMAT: (
        "Invalid inputs for logging overtime! Expected: shift logot id/INDEX h/HOURS"
    ),
    ErrorKind.SHIFT_TASK_EMPTY: "Shift task cannot be empty!",
    ErrorKind.INVALID_START_TIME: "Start time must be before end time!",
    ErrorKind.INVALID_SHIFT_DATE: "Shift date cannot be in the past!",
    ErrorKind.SHIFT_TIMING_OVERLAP: "Shift timing overlaps with an existing shift!",
    ErrorKind.NEGATIVE_OVERTIME: "Overtime cannot be negative.",
    ErrorKind.INVALID_TEST_ADD_FORMAT: (
        "Invalid inputs for adding medical test! "
        "Expected: test add id/PATIENT_ID t/TEST_NAME r/RESULT"
    ),
    ErrorKind.INVALID_TEST_DEL_FORMAT: (
        "Invalid inputs for deleting medical tests! Expected: test del id/PATIENT_ID"
    ),
    ErrorKind.INVALID_TEST_LIST_FORMAT: (
        "Invalid inputs for listing medical tests! Expected: test list id/PATIENT_ID"
    ),
    ErrorKind.EMPTY_PATIENT_ID: "Patient ID cannot be empty!",
    ErrorKind.EMPTY_PATIENT_TEST_NAME: "Medical test name cannot be empty!",
    ErrorKind.EMPTY_PATIENT_TEST_RESULT: "Medical test result cannot be empty!",
}


def error_message(kind: ErrorKind) -> str:
    return ERROR_MESSAGES[kind]


class ParseError(Exception):
    """Raised when a command line cannot be turned into an intent."""

    def __init__(self, kind: ErrorKind):
        super().__init__(error_message(kind))
        self.kind = kind


class InvalidRecordError(ValueError):
    """Raised when a record is constructed with values that break its invariants."""

    def __init__(self, kind: ErrorKind):
        super().__init__(error_message(kind))
        self.kind = kind


class StorageError(Exception):
    """Raised when a data file cannot be read or written."""

    pass


class FileReadingError(StorageError):
    """Raised when there is an error reading a file."""

    pass


class FileContentError(StorageError):
    """Raised when the content of a file is not as expected."""

    pass


class FileWritingError(StorageError):
    """Raised when there is an error writing a file."""

    pass
