"""Error taxonomy for script validation.

Rule violations are NOT errors: they come back as ``ValidationResult.invalid``.
Everything here signals an infrastructure problem, except ``ScriptInvalidError``
which is only raised on request by ``ValidationResult.raise_for_errors()``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jscheck.validators.models import ValidationError


class JsCheckError(Exception):
    """Base class for every jscheck failure."""


class InvalidOptionFormat(JsCheckError, ValueError):
    """A raw option string could not be parsed into a rule option."""

    def __init__(self, option: str, detail: str = "expected 'name' or 'name=value'"):
        self.option = option
        super().__init__(f"Invalid option provided: {option!r} ({detail})")


class EngineInitializationError(JsCheckError):
    """The rule program could not be read or evaluated."""


class EngineExecutionError(JsCheckError):
    """The engine failed while running a check."""

    def __init__(self, message: str, diagnostic: str = ""):
        self.diagnostic = diagnostic or message
        super().__init__(message)


class ErrorListMalformed(JsCheckError):
    """The engine's error list could not be turned into typed records."""

    def __init__(self, message: str, payload: str = ""):
        self.payload = payload
        super().__init__(message)


class ScriptInvalidError(JsCheckError):
    """The script violates the configured rules."""

    def __init__(self, errors: "list[ValidationError]"):
        self.errors = list(errors)
        first = self.errors[0] if self.errors else None
        location = f" (first: line {first.line}, character {first.character}: {first.reason})" if first else ""
        super().__init__(f"Script has {len(self.errors)} rule violation(s){location}")
