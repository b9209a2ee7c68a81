from dataclasses import dataclass
from exceptions.custom_errors import ErrorKind, InvalidRecordError


@dataclass(frozen=True)
class MedicalTest:
    """A medical test result recorded against a patient."""

    patient_id: str
    test_name: str
    result: str

    def __post_init__(self):
        if not self.patient_id:
            raise InvalidRecordError(ErrorKind.EMPTY_PATIENT_ID)
        if not self.test_name:
            raise InvalidRecordError(ErrorKind.EMPTY_PATIENT_TEST_NAME)
        if not self.result:
            raise InvalidRecordError(ErrorKind.EMPTY_PATIENT_TEST_RESULT)

    def __str__(self) -> str:
        return f"Patient ID: {self.patient_id} - Test: {self.test_name}, Result: {self.result}"
