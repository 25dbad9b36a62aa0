"""Rule programs — the bundled JSHint-compatible checker and its loader."""

from jscheck.validators.ruleset.loader import DEFAULT_RULESET, Ruleset, clear_cache, load_ruleset

__all__ = ["DEFAULT_RULESET", "Ruleset", "clear_cache", "load_ruleset"]
