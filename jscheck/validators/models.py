"""Validation models — rule options, violations, and the tagged validation result.

All models are short-lived: they are created and consumed within a single
``validate()`` call.
"""

from collections import Counter
from typing import Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jscheck.validators.exceptions import ScriptInvalidError


class RuleOption(BaseModel):
    """A single named rule option, e.g. ``undef`` or ``maxlen=80``."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: Union[bool, str] = True

    @field_validator("name")
    @classmethod
    def _strip_name(cls, name: str) -> str:
        name = name.strip()
        if not name:
            raise ValueError("option name must not be empty")
        return name


class RuleConfiguration(BaseModel):
    """Ordered rule options as consumed by the rule engine.

    Duplicate names are kept in emission order; the engine decides which wins.
    """

    options: list[RuleOption] = Field(default_factory=list)

    def __iter__(self) -> Iterator[RuleOption]:  # type: ignore[override]
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def names(self) -> list[str]:
        return [option.name for option in self.options]

    def as_dict(self) -> dict[str, Union[bool, str]]:
        """Collapse to a plain mapping (later options win). For inspection only."""
        return {option.name: option.value for option in self.options}


class ValidationError(BaseModel):
    """A single rule violation reported by the engine.

    Field names mirror the engine's native error records; anything else the
    engine attaches (``a``, ``b``, ``scope``...) is ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    line: int
    character: int
    reason: str
    evidence: Optional[str] = None  # Source line the violation was found on
    code: Optional[str] = None      # Rule code, e.g. "W117"
    raw: Optional[str] = None       # Message template before substitution
    id: Optional[str] = None


class ValidationResult(BaseModel):
    """Outcome of one validation: *Valid* (no errors) or *Invalid(errors)*."""

    passed: bool
    errors: list[ValidationError] = Field(default_factory=list)

    @model_validator(mode="after")
    def _valid_has_no_errors(self) -> "ValidationResult":
        if self.passed and self.errors:
            raise ValueError("a passed result cannot carry errors")
        return self

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(passed=True)

    @classmethod
    def invalid(cls, errors: list[ValidationError]) -> "ValidationResult":
        return cls(passed=False, errors=list(errors))

    def __bool__(self) -> bool:
        return self.passed

    def summary(self) -> dict[str, int]:
        """Count of errors by rule code (``"unknown"`` when the engine gave none)."""
        return dict(Counter(error.code or "unknown" for error in self.errors))

    def raise_for_errors(self) -> None:
        """Raise ``ScriptInvalidError`` if the script has violations."""
        if not self.passed:
            raise ScriptInvalidError(self.errors)
