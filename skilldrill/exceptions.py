"""
Error taxonomy shared by the crud, service and API layers.

Every error derives from ValueError so existing ``except ValueError`` call
sites keep treating them as validation-style failures.
"""

from typing import Optional


class SkillDrillError(ValueError):
    """Base exception for SkillDrill domain failures."""

    status_code = 400
    error_type = "skilldrill_error"

    def __init__(self, message: str, resource: Optional[str] = None):
        self.message = message
        self.resource = resource
        super().__init__(message)

    def to_dict(self) -> dict:
        payload = {"detail": self.message, "error_type": self.error_type}
        if self.resource:
            payload["resource"] = self.resource
        return payload


class NotFoundError(SkillDrillError):
    """Referenced skill, drill or user does not exist."""

    status_code = 404
    error_type = "not_found"


class InvalidCategoryError(SkillDrillError):
    """Category is not part of the skill's category set."""

    error_type = "invalid_category"


class ValidationError(SkillDrillError):
    """Malformed input (empty strings, out-of-range limits, unknown levels)."""

    error_type = "validation_error"


class UpstreamServiceError(SkillDrillError):
    """AI drafting provider unreachable or returned empty content."""

    status_code = 502
    error_type = "upstream_error"
