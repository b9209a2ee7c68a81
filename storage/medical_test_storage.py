from typing import Any, Dict
from core.medical_test import MedicalTest
from storage.csv_storage import CsvStorage


class MedicalTestStorage(CsvStorage[MedicalTest]):
    COLUMNS = ("patient_id", "test_name", "result")

    def to_row(self, record: MedicalTest) -> Dict[str, Any]:
        return {
            "patient_id": record.patient_id,
            "test_name": record.test_name,
            "result": record.result,
        }

    def from_row(self, row: Dict[str, str]) -> MedicalTest:
        return MedicalTest(
            patient_id=row["patient_id"],
            test_name=row["test_name"],
            result=row["result"],
        )
