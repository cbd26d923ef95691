from typing import Optional

from skilldrill.exceptions import ValidationError


def require_text(value: Optional[str], field: str) -> str:
    """Return the stripped value or raise when it is missing/blank."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} is required")
    return cleaned


def require_limit(limit: Optional[int]) -> Optional[int]:
    if limit is None:
        return None
    # bool is an int subclass; True must not read as limit=1
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValidationError("limit must be a positive integer")
    return limit
