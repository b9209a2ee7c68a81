import os
from pathlib import Path
from typing import Any, Dict, Generic, List, Sequence, TypeVar, Union
import pandas as pd
from exceptions.custom_errors import FileContentError, FileReadingError, FileWritingError
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class CsvStorage(Generic[T]):
    """
    Flat-file store for one kind of record, one CSV row per record.

    Subclasses declare `COLUMNS` and convert between records and rows. All
    cells are read back as strings so nothing is reinterpreted by pandas.
    """

    COLUMNS: Sequence[str] = ()

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def to_row(self, record: T) -> Dict[str, Any]:
        raise NotImplementedError

    def from_row(self, row: Dict[str, str]) -> T:
        raise NotImplementedError

    def read_all(self) -> List[T]:
        """
        Load every record from the file.

        Raises:
            FileReadingError: If the file is missing or unreadable.
            FileContentError: If the columns or any value is not as expected.
        """
        if not self.path.exists():
            raise FileReadingError(f"Data file not found: {self.path}")

        try:
            df = pd.read_csv(self.path, dtype=str, keep_default_na=False)
        except Exception as e:
            raise FileReadingError(f"Error loading {self.path.name}: {e}")

        missing = [col for col in self.COLUMNS if col not in df.columns]
        if missing:
            raise FileContentError(
                f"Missing expected columns in {self.path.name}: {', '.join(missing)}"
            )

        records = []
        for line_no, row in enumerate(df.to_dict(orient="records"), start=2):
            try:
                records.append(self.from_row(row))
            except ValueError as e:
                raise FileContentError(f"Invalid record on line {line_no} of {self.path.name}: {e}")

        logger.info(f"Loaded {len(records)} records from {self.path}")
        return records

    def overwrite(self, records: Sequence[T]) -> None:
        """
        Replace the file content with `records`.

        The data is written to a temporary file next to the target and then
        moved over it, so readers never see a half-written file.

        Raises:
            FileWritingError: If the file cannot be written.
        """
        df = pd.DataFrame([self.to_row(r) for r in records], columns=list(self.COLUMNS))
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(tmp_path, index=False, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise FileWritingError(f"Error saving {self.path.name}: {e}")

        logger.info(f"Saved {len(records)} records to {self.path}")
