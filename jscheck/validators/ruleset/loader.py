"""Rule program loader — reads the bundled (or configured) rule program.

Programs are cached per path so several engine contexts can be built without
re-reading from disk.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from jscheck.validators.exceptions import EngineInitializationError

RULESET_DIR = Path(__file__).parent
DEFAULT_RULESET = RULESET_DIR / "jshint.js"


@dataclass(frozen=True)
class Ruleset:
    """A rule program ready to be evaluated."""

    name: str
    path: Path
    source: str


@lru_cache(maxsize=8)
def _read(path: Path) -> Ruleset:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EngineInitializationError(f"Failed reading rule program '{path}': {e}") from e
    if not text.strip():
        raise EngineInitializationError(f"Rule program '{path}' is empty")
    # sourceURL names the program in V8 stack traces
    return Ruleset(name=path.name, path=path, source=f"{text}\n//# sourceURL={path.name}\n")


def load_ruleset(path: Optional[Union[str, Path]] = None) -> Ruleset:
    """Load a rule program.

    Args:
        path: Program file; None or empty means the bundled jshint.js

    Raises:
        EngineInitializationError: the file is missing, unreadable or empty
    """
    resolved = Path(path).expanduser().resolve() if path else DEFAULT_RULESET
    return _read(resolved)


def clear_cache() -> None:
    """Forget cached programs (e.g. after replacing a file on disk)."""
    _read.cache_clear()
