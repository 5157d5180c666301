"""
Validators
"""
from typing import Any, Dict, List, Union
from uuid import UUID

from app.core.exceptions import InvalidIdentifierError


def is_missing(value: Any) -> bool:
    """Absent, null, empty string or zero count as missing"""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def find_missing_fields(payload: Dict[str, Any], required: List[str]) -> List[str]:
    """Required field names whose value is missing, in declaration order"""
    return [name for name in required if is_missing(payload.get(name))]


def normalize_qualifications(value: Union[str, List[str]]) -> List[str]:
    """Split a newline-separated string, dropping blank lines; lists pass through"""
    if isinstance(value, list):
        return value
    return [line for line in value.split("\n") if line.strip()]


def parse_job_id(raw_id: str) -> UUID:
    """Parse a path identifier, raising InvalidIdentifierError if malformed"""
    try:
        return UUID(raw_id)
    except (ValueError, AttributeError, TypeError):
        raise InvalidIdentifierError(raw_id)
