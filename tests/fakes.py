import json
from typing import Any, Optional

from jscheck.validators.base import ScriptEngine
from jscheck.validators.exceptions import EngineExecutionError


class FakeEngine(ScriptEngine):
    """In-memory engine: records what it is asked to run and answers from presets."""

    def __init__(self, verdict: Any = True, errors: Optional[list] = None, payload: Any = None,
                 fail_on: Optional[str] = None):
        self.verdict = verdict
        self.errors = errors or []
        self.payload = payload
        self.fail_on = fail_on
        self.programs: list[tuple[str, str]] = []
        self.scripts: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return "fake"

    def load(self, program: str, filename: str) -> None:
        if self.fail_on == "load":
            raise EngineExecutionError(f"{filename}: SyntaxError: Unexpected token")
        self.programs.append((program, filename))

    def evaluate(self, script: str, label: str) -> Any:
        self.scripts.append((script, label))
        if self.fail_on == label:
            raise EngineExecutionError(f"{label}: ReferenceError: boom is not defined")
        if script.startswith("typeof "):
            return bool(self.programs)
        if script.startswith("JSON.stringify"):
            return self.payload if self.payload is not None else json.dumps(self.errors)
        return self.verdict
