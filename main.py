"""
NurseSched: command-line scheduling assistant for nurses.

Usage:
    python main.py [--data-dir DIR]

Commands:
    shift add s/HH:MM e/HH:MM d/YYYY-MM-DD st/TASK
    shift del id/INDEX
    shift mark id/INDEX | shift unmark id/INDEX
    shift edit id/INDEX [s/HH:MM] [e/HH:MM] [d/YYYY-MM-DD] [st/TASK]
    shift logot id/INDEX h/HOURS
    shift list | shift sort
    test add id/PATIENT_ID t/TEST_NAME r/RESULT
    test del id/PATIENT_ID | test list id/PATIENT_ID
    bye
"""
import argparse
from datetime import date
from pathlib import Path
from typing import Callable, Optional
from config.paths import DATA_DIR
from core.medical_test_registry import MedicalTestRegistry
from core.shift_registry import ShiftRegistry
from exceptions.custom_errors import ErrorKind, error_message
from parsers.medical_test_parser import parse_medical_test_command
from parsers.shift_parser import parse_shift_command
from parsers.tokenizer import normalize, split_head
from storage.medical_test_storage import MedicalTestStorage
from storage.shift_storage import ShiftStorage
from utils.constants import EXIT_COMMANDS, MEDICAL_TEST_FILE, PROMPT, SHIFT_FILE
from utils.logger import get_logger

logger = get_logger(__name__)

GOODBYE = "Goodbye! See you next shift."


class NurseSched:
    """Routes each command line to the parser and registry for its group."""

    def __init__(self, data_dir: Path = DATA_DIR, today: Callable[[], date] = date.today):
        data_dir = Path(data_dir)
        self.shifts = ShiftRegistry(ShiftStorage(data_dir / SHIFT_FILE), today=today)
        self.tests = MedicalTestRegistry(MedicalTestStorage(data_dir / MEDICAL_TEST_FILE))

    def start(self) -> None:
        self.shifts.load()
        self.tests.load()

    def handle(self, line: str) -> Optional[str]:
        """
        Run one command line and return the response to show.

        Returns None when the line asks to exit.
        """
        group, _ = split_head(normalize(line))
        if group in EXIT_COMMANDS:
            return None

        match group:
            case "":
                return error_message(ErrorKind.EMPTY_INPUT)
            case "shift":
                parsed = parse_shift_command(line)
                registry = self.shifts
            case "test":
                parsed = parse_medical_test_command(line)
                registry = self.tests
            case _:
                logger.warning(f"Unknown command group: {group}")
                return error_message(ErrorKind.INVALID_COMMAND)

        if not parsed.ok:
            return parsed.message
        return registry.apply(parsed.intent).message


def run(app: NurseSched, read: Callable[[str], str] = input, write: Callable[[str], None] = print):
    """Read-eval-print loop; stops on an exit command or end of input."""
    write("Hello from NurseSched! What can I do for you?")
    while True:
        try:
            line = read(PROMPT)
        except EOFError:
            break
        response = app.handle(line)
        if response is None:
            break
        write(response)
    write(GOODBYE)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Scheduling assistant for nurses")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help=f"Directory holding the shift and medical test files (default: {DATA_DIR})",
    )
    args = parser.parse_args(argv)

    app = NurseSched(data_dir=args.data_dir)
    app.start()
    logger.info(f"Session started with data in {args.data_dir}")
    run(app)
    logger.info("Session ended")


if __name__ == "__main__":
    main()
