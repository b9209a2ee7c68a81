from typing import Optional
from exceptions.custom_errors import ErrorKind, ParseError
from core.outcome import ParseResult
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
from parsers.tokenizer import (
    DATE,
    END,
    HOURS,
    INDEX,
    START,
    TASK,
    extract_token_value,
    extract_value,
    has_markers,
    normalize,
    split_head,
)
from utils.logger import get_logger
from utils.shift_utils import parse_date, parse_hours, parse_index, parse_time

logger = get_logger(__name__)


def parse_shift_command(line: Optional[str]) -> ParseResult:
    """
    Parse a shift command line without raising on bad input.

    Returns:
        ParseResult: holds the intent on success, or the error kind that
        stopped parsing.
    """
    try:
        return ParseResult(intent=extract_inputs(line))
    except ParseError as e:
        return ParseResult(error=e.kind)


def extract_inputs(line: Optional[str]) -> AnyShiftIntent:
    """
    Turn a line such as ``shift add s/10:00 e/11:00 d/2025-05-01 st/rounds``
    into a shift intent.

    The whole line is lower-cased before fields are read, so task text is
    stored in lower case.

    Raises:
        ParseError: with the kind describing the first problem found.
    """
    logger.info(f"Extracting inputs from: {line!r}")
    text = normalize(line)
    if not text:
        logger.warning("Input is empty.")
        raise ParseError(ErrorKind.EMPTY_INPUT)

    _, remaining = split_head(text)
    if not remaining:
        logger.warning(f"Invalid input format: {text}")
        raise ParseError(ErrorKind.INVALID_FORMAT)

    command, remaining = split_head(remaining)

    try:
        match command:
            case "add":
                intent = _parse_add(remaining)
            case "del":
                intent = _parse_delete(remaining)
            case "mark" | "unmark":
                intent = _parse_mark(remaining, command)
            case "list":
                intent = ListShifts()
            case "edit":
                intent = _parse_edit(remaining)
            case "sort":
                intent = SortShifts()
            case "logot":
                intent = _parse_overtime(remaining)
            case _:
                logger.warning(f"Invalid command: {command}")
                raise ParseError(ErrorKind.INVALID_COMMAND)
    except ParseError as e:
        logger.warning(f"Parsing error: {e}")
        raise

    logger.info(f"Parsed intent: {intent!r}")
    return intent


def _read_index(value: Optional[str]) -> int:
    try:
        index = parse_index(value)
    except ValueError:
        logger.warning(f"Invalid shift index format: {value!r}")
        raise ParseError(ErrorKind.INVALID_SHIFT_NUMBER)
    if index < 0:
        logger.warning(f"Invalid shift index: {index}")
        raise ParseError(ErrorKind.INVALID_SHIFT_NUMBER)
    return index


def _parse_add(remaining: str) -> AddShift:
    """Fields are read in order: s/ up to e/, e/ up to d/, d/ up to st/, st/ to the end."""
    if not has_markers(remaining, START, END, DATE, TASK):
        logger.warning("Invalid add format.")
        raise ParseError(ErrorKind.INVALID_SHIFT_ADD_FORMAT)

    try:
        start = parse_time(extract_value(remaining, START, END))
        end = parse_time(extract_value(remaining, END, DATE))
    except ValueError:
        raise ParseError(ErrorKind.INVALID_TIME_FORMAT)

    try:
        on = parse_date(extract_value(remaining, DATE, TASK))
    except ValueError:
        raise ParseError(ErrorKind.INVALID_DATE_FORMAT)

    task = extract_value(remaining, TASK)
    if not task:
        logger.warning("Shift task is empty.")
        raise ParseError(ErrorKind.SHIFT_TASK_EMPTY)

    if not start < end:
        logger.warning(f"Invalid start/end time: {start} - {end}")
        raise ParseError(ErrorKind.INVALID_START_TIME)

    return AddShift(start=start, end=end, date=on, task=task)


def _parse_delete(remaining: str) -> DeleteShift:
    if not has_markers(remaining, INDEX):
        logger.warning("Invalid delete format.")
        raise ParseError(ErrorKind.INVALID_SHIFT_DEL_FORMAT)
    return DeleteShift(index=_read_index(extract_value(remaining, INDEX)))


def _parse_mark(remaining: str, command: str):
    if not has_markers(remaining, INDEX):
        logger.warning(f"Invalid {command} format.")
        if command == "mark":
            raise ParseError(ErrorKind.INVALID_SHIFT_MARK_FORMAT)
        raise ParseError(ErrorKind.INVALID_SHIFT_UNMARK_FORMAT)

    index = _read_index(extract_token_value(remaining, INDEX))
    if command == "mark":
        return MarkShift(index=index)
    return UnmarkShift(index=index)


def _parse_edit(remaining: str) -> EditShift:
    """
    Only `id/` is required. Any of s/, e/, d/ and st/ may follow in any
    order; a field that is left out stays None and is not changed.
    """
    index_str = extract_token_value(remaining, INDEX)
    if not index_str:
        raise ParseError(ErrorKind.INVALID_SHIFT_EDIT_FORMAT)
    index = _read_index(index_str)

    start = end = on = task = None

    start_str = extract_token_value(remaining, START)
    if start_str is not None:
        try:
            start = parse_time(start_str)
        except ValueError:
            raise ParseError(ErrorKind.INVALID_TIME_FORMAT)

    end_str = extract_token_value(remaining, END)
    if end_str is not None:
        try:
            end = parse_time(end_str)
        except ValueError:
            raise ParseError(ErrorKind.INVALID_TIME_FORMAT)

    date_str = extract_token_value(remaining, DATE)
    if date_str is not None:
        try:
            on = parse_date(date_str)
        except ValueError:
            raise ParseError(ErrorKind.INVALID_DATE_FORMAT)

    task_str = extract_token_value(remaining, TASK)
    if task_str is not None:
        if not task_str:
            raise ParseError(ErrorKind.SHIFT_TASK_EMPTY)
        task = task_str

    # Reject edits that would change nothing
    if start is None and end is None and on is None and task is None:
        raise ParseError(ErrorKind.INVALID_SHIFT_EDIT_FORMAT)

    return EditShift(index=index, start=start, end=end, date=on, task=task)


def _parse_overtime(remaining: str) -> LogOvertime:
    if not has_markers(remaining, INDEX, HOURS):
        raise ParseError(ErrorKind.INVALID_SHIFT_LOGOT_FORMAT)

    index = _read_index(extract_token_value(remaining, INDEX))

    try:
        hours = parse_hours(extract_token_value(remaining, HOURS))
    except ValueError:
        raise ParseError(ErrorKind.INVALID_SHIFT_LOGOT_FORMAT)

    return LogOvertime(index=index, hours=hours)
