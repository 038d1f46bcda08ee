"""Value types shared by the generator, the translation client and the service."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from toolshed.common.errors import ValidationError

MIN_LENGTH = 6
MAX_LENGTH = 32


@dataclass(frozen=True)
class GenerationConfig:
    """Settings for one random string generation.

    Lowercase letters are always part of the alphabet; the flags add the
    other character classes.
    """
    length: int = 16
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValidationError(f"length must be an integer, got {self.length!r}", field="length")
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise ValidationError(
                f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {self.length}",
                field="length",
            )


@dataclass(frozen=True)
class TranslationRequest:
    source_text: str
    target_language: str


class ResultKind(str, Enum):
    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    MISSING_CREDENTIAL = "missing_credential"
    REMOTE_ERROR = "remote_error"
    INVALID_RESPONSE = "invalid_response"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of a translation call: either the translated text or an error kind with a message."""
    kind: ResultKind
    text: str = ""
    message: str = ""
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    @classmethod
    def success(cls, text: str) -> "TranslationResult":
        return cls(kind=ResultKind.SUCCESS, text=text)

    @classmethod
    def failure(cls, kind: ResultKind, message: str, status_code: int | None = None) -> "TranslationResult":
        if kind is ResultKind.SUCCESS:
            raise ValueError("failure() needs an error kind")
        return cls(kind=kind, message=message, status_code=status_code)
