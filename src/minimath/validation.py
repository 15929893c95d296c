"""Input validation ahead of compilation."""

from dataclasses import dataclass
from typing import Optional

EMPTY_INPUT_MESSAGE = "Please enter a valid expression to compile"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None


def is_empty_or_whitespace(text: str) -> bool:
    return len(text.strip()) == 0


def validate_input(text: str) -> ValidationResult:
    if is_empty_or_whitespace(text):
        return ValidationResult(is_valid=False, message=EMPTY_INPUT_MESSAGE)
    return ValidationResult(is_valid=True)
