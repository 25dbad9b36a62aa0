"""Error Model — deserializes the engine's JSON error list into typed records."""

from typing import Optional

import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from jscheck.validators.exceptions import ErrorListMalformed
from jscheck.validators.models import ValidationError

logger = structlog.get_logger()

# The engine may terminate its list with null entries; they carry no record.
_ERROR_LIST = TypeAdapter(list[Optional[ValidationError]])


def deserialize_errors(raw: str) -> list[ValidationError]:
    """Parse a JSON error list, all or nothing.

    Raises:
        ErrorListMalformed: invalid JSON, a non-list payload, or any record
            missing line/character/reason.
    """
    try:
        records = _ERROR_LIST.validate_json(raw)
    except PydanticValidationError as e:
        logger.error("error_list_malformed", error_count=e.error_count(), payload_length=len(raw or ""))
        raise ErrorListMalformed(f"Cannot parse engine error list: {e}", payload=raw) from e

    return [record for record in records if record is not None]
