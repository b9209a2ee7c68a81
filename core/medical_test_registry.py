from typing import List
from core.medical_test import MedicalTest
from core.outcome import Outcome
from exceptions.custom_errors import StorageError
from schemas.medical_test.intents import (
    AddMedicalTest,
    AnyMedicalTestIntent,
    DeleteMedicalTests,
    ListMedicalTests,
)
from storage.medical_test_storage import MedicalTestStorage
from utils.logger import get_logger

logger = get_logger(__name__)


class MedicalTestRegistry:
    """Flat list of medical tests, looked up by patient id."""

    def __init__(self, storage: MedicalTestStorage):
        self.storage = storage
        self._tests: List[MedicalTest] = []

    def load(self) -> None:
        try:
            self._tests = self.storage.read_all()
        except StorageError as e:
            logger.warning(f"Failed to load medical tests, starting with an empty list: {e}")
            self._tests = []

    def flush(self) -> bool:
        try:
            self.storage.overwrite(self._tests)
        except StorageError as e:
            logger.error(f"Failed to save medical tests: {e}")
            return False
        return True

    @property
    def tests(self) -> List[MedicalTest]:
        return list(self._tests)

    def tests_for_patient(self, patient_id: str) -> List[MedicalTest]:
        return [t for t in self._tests if t.patient_id == patient_id]

    def add(self, test: MedicalTest) -> Outcome:
        self._tests.append(test)
        self.flush()
        logger.info(f"Medical test added: {test}")
        return Outcome.success(f"Medical test added for patient with ID {test.patient_id}", test)

    def remove_for_patient(self, patient_id: str) -> Outcome:
        remaining = [t for t in self._tests if t.patient_id != patient_id]
        if len(remaining) == len(self._tests):
            return Outcome.unchanged(f"No medical tests found for ID: {patient_id}")

        removed = len(self._tests) - len(remaining)
        self._tests = remaining
        self.flush()
        logger.info(f"Removed {removed} medical tests for patient {patient_id}")
        return Outcome.success(f"All medical tests deleted for ID: {patient_id}")

    def list_for_patient(self, patient_id: str) -> Outcome:
        found = self.tests_for_patient(patient_id)
        if not found:
            return Outcome.unchanged(f"No medical tests found for ID: {patient_id}", found)
        lines = [str(t) for t in found]
        lines.append(f"All medical tests listed for ID: {patient_id}")
        return Outcome.unchanged("\n".join(lines), found)

    def apply(self, intent: AnyMedicalTestIntent) -> Outcome:
        match intent:
            case AddMedicalTest():
                test = MedicalTest(intent.patient_id, intent.test_name, intent.result)
                return self.add(test)
            case DeleteMedicalTests():
                return self.remove_for_patient(intent.patient_id)
            case ListMedicalTests():
                return self.list_for_patient(intent.patient_id)
            case _:
                raise TypeError(f"Unsupported medical test intent: {intent!r}")
