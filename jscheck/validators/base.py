"""Base script engine — abstract class implementing the Strategy Pattern.

The validator only talks to this interface, so the embedded interpreter can be
swapped (a different JS runtime, or a native reimplementation of the rules)
without touching the orchestration code.
"""

from abc import ABC, abstractmethod
from typing import Any


class ScriptEngine(ABC):
    """A stateful script scope the rule program is loaded into.

    Contract:
        - load() evaluates a program into this scope; globals it defines stay
          visible to later evaluate() calls
        - evaluate() returns plain Python values (bool, str, numbers, None)
        - failures raise EngineExecutionError, never engine-specific exceptions
        - not thread safe; EngineContext serializes access
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable engine name for logging."""
        ...

    @abstractmethod
    def load(self, program: str, filename: str) -> None:
        """Evaluate a program in this scope.

        Args:
            program: Program source text
            filename: Name used in diagnostics
        """
        ...

    @abstractmethod
    def evaluate(self, script: str, label: str) -> Any:
        """Evaluate an expression in this scope and return its value.

        Args:
            script: Expression or statements to run
            label: Short name of the step, used in diagnostics
        """
        ...

    def has_global(self, name: str) -> bool:
        """Check whether the scope defines a global with this name."""
        return self.evaluate(f"typeof {name} !== 'undefined'", f"has_global:{name}") is True
