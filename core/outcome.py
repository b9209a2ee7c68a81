from dataclasses import dataclass
from typing import Any, Optional
from exceptions.custom_errors import ErrorKind, error_message


@dataclass(frozen=True)
class Outcome:
    """
    Result of applying one command to a registry.

    `ok` is False only for rejected commands, which never change state.
    `changed` tells whether the stored data was modified (and persisted).
    """

    ok: bool
    message: str
    changed: bool = False
    error: Optional[ErrorKind] = None
    record: Any = None

    @classmethod
    def success(cls, message: str, record: Any = None) -> "Outcome":
        return cls(ok=True, message=message, changed=True, record=record)

    @classmethod
    def unchanged(cls, message: str, record: Any = None) -> "Outcome":
        return cls(ok=True, message=message, changed=False, record=record)

    @classmethod
    def failure(cls, kind: ErrorKind, message: Optional[str] = None) -> "Outcome":
        return cls(ok=False, message=message or error_message(kind), error=kind)


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed intent or the kind of error that stopped parsing."""

    intent: Any = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        return None if self.error is None else error_message(self.error)
