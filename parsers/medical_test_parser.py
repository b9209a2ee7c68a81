from typing import Optional
from exceptions.custom_errors import ErrorKind, ParseError
from core.outcome import ParseResult
from schemas.medical_test.intents import (
    AddMedicalTest,
    AnyMedicalTestIntent,
    DeleteMedicalTests,
    ListMedicalTests,
)
from parsers.tokenizer import (
    INDEX,
    TEST_NAME,
    TEST_RESULT,
    extract_token_value,
    extract_value,
    has_markers,
    normalize,
    split_head,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def parse_medical_test_command(line: Optional[str]) -> ParseResult:
    """Parse a medical test command line; errors come back in the result."""
    try:
        return ParseResult(intent=extract_inputs(line))
    except ParseError as e:
        return ParseResult(error=e.kind)


def extract_inputs(line: Optional[str]) -> AnyMedicalTestIntent:
    """
    Turn a line such as ``test add id/p01 t/blood r/normal`` into an intent.

    Raises:
        ParseError: with the kind describing the first problem found.
    """
    logger.info(f"Extracting inputs from: {line!r}")
    text = normalize(line)
    if not text:
        raise ParseError(ErrorKind.EMPTY_INPUT)

    _, remaining = split_head(text)
    if not remaining:
        raise ParseError(ErrorKind.INVALID_FORMAT)

    command, remaining = split_head(remaining)

    match command:
        case "add":
            return _parse_add(remaining)
        case "del":
            return DeleteMedicalTests(
                patient_id=_read_patient_id(remaining, ErrorKind.INVALID_TEST_DEL_FORMAT)
            )
        case "list":
            return ListMedicalTests(
                patient_id=_read_patient_id(remaining, ErrorKind.INVALID_TEST_LIST_FORMAT)
            )
        case _:
            logger.warning(f"Invalid command: {command}")
            raise ParseError(ErrorKind.INVALID_COMMAND)


def _read_patient_id(remaining: str, format_error: ErrorKind) -> str:
    patient_id = extract_token_value(remaining, INDEX)
    if not patient_id:
        raise ParseError(format_error)
    return patient_id


def _parse_add(remaining: str) -> AddMedicalTest:
    """Fields are read in order: id/ up to t/, t/ up to r/, r/ to the end."""
    if not has_markers(remaining, INDEX, TEST_NAME, TEST_RESULT):
        raise ParseError(ErrorKind.INVALID_TEST_ADD_FORMAT)

    patient_id = extract_value(remaining, INDEX, TEST_NAME)
    if not patient_id:
        raise ParseError(ErrorKind.INVALID_TEST_ADD_FORMAT)

    test_name = extract_value(remaining, TEST_NAME, TEST_RESULT)
    if not test_name:
        raise ParseError(ErrorKind.EMPTY_PATIENT_TEST_NAME)

    result = extract_value(remaining, TEST_RESULT)
    if not result:
        raise ParseError(ErrorKind.EMPTY_PATIENT_TEST_RESULT)

    return AddMedicalTest(patient_id=patient_id, test_name=test_name, result=result)
