from datetime import date, time
import pytest
from core.medical_test import MedicalTest
from exceptions.custom_errors import FileContentError, FileReadingError, FileWritingError
from storage.medical_test_storage import MedicalTestStorage
from storage.shift_storage import ShiftStorage
from tests.conftest import make_shift


class TestShiftStorage:
    def test_round_trip_keeps_every_field(self, shift_storage):
        shifts = [
            make_shift("10:00", "11:00", task="rounds"),
            make_shift("12:00", "13:30", task="meds, charts and \"notes\"", done=True, overtime_hours=2.5),
            make_shift("00:00", "23:59", on=date(2999, 12, 31), task="nan", overtime_hours=0.1),
        ]

        shift_storage.overwrite(shifts)

        assert shift_storage.read_all() == shifts

    def test_round_trip_of_empty_list(self, shift_storage):
        shift_storage.overwrite([])
        assert shift_storage.read_all() == []

    def test_overwrite_replaces_previous_content(self, shift_storage):
        shift_storage.overwrite([make_shift(task="a"), make_shift("12:00", "13:00", task="b")])
        shift_storage.overwrite([make_shift(task="c")])
        assert [s.task for s in shift_storage.read_all()] == ["c"]

    def test_no_temporary_file_left_behind(self, shift_storage):
        shift_storage.overwrite([make_shift()])
        assert [p.name for p in shift_storage.path.parent.iterdir()] == ["shifts.csv"]

    def test_creates_missing_directory(self, tmp_path):
        storage = ShiftStorage(tmp_path / "nested" / "shifts.csv")
        storage.overwrite([make_shift()])
        assert storage.read_all()[0].start_time == time(10, 0)

    def test_missing_file(self, shift_storage):
        with pytest.raises(FileReadingError):
            shift_storage.read_all()

    def test_missing_columns(self, shift_storage):
        shift_storage.path.write_text("start_time,end_time\n10:00,11:00\n", encoding="utf-8")
        with pytest.raises(FileContentError):
            shift_storage.read_all()

    @pytest.mark.parametrize(
        "row",
        [
            "10:00,09:00,2025-06-10,rounds,False,0.0",
            "10:00,11:00,2025-06-10,,False,0.0",
            "10:00,11:00,10/06/2025,rounds,False,0.0",
            "10:00,11:00,2025-06-10,rounds,maybe,0.0",
            "10:00,11:00,2025-06-10,rounds,False,-1.0",
            "10:00,11:00,2025-06-10,rounds,False,nan",
            "10:00,11:00,2025-06-10,rounds,False,inf",
        ],
    )
    def test_invalid_row(self, shift_storage, row):
        header = ",".join(ShiftStorage.COLUMNS)
        shift_storage.path.write_text(f"{header}\n{row}\n", encoding="utf-8")
        with pytest.raises(FileContentError):
            shift_storage.read_all()

    def test_write_failure(self, tmp_path):
        # a directory where the file should be cannot be replaced
        target = tmp_path / "shifts.csv"
        target.mkdir()
        (target / "keep").write_text("x", encoding="utf-8")
        with pytest.raises(FileWritingError):
            ShiftStorage(target).overwrite([make_shift()])


class TestMedicalTestStorage:
    def test_round_trip(self, tmp_path):
        storage = MedicalTestStorage(tmp_path / "tests.csv")
        tests = [MedicalTest("p01", "blood count", "normal"), MedicalTest("p02", "x-ray", "clear, no issues")]

        storage.overwrite(tests)

        assert storage.read_all() == tests

    def test_round_trip_of_empty_list(self, tmp_path):
        storage = MedicalTestStorage(tmp_path / "tests.csv")
        storage.overwrite([])
        assert storage.read_all() == []

    def test_row_without_patient_id(self, tmp_path):
        storage = MedicalTestStorage(tmp_path / "tests.csv")
        storage.path.write_text("patient_id,test_name,result\n,blood,normal\n", encoding="utf-8")
        with pytest.raises(FileContentError):
            storage.read_all()
