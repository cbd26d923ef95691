__all__ = [
    "require_text",
    "require_limit",
    "get_current_user_id",
]


def __getattr__(name):
    if name in {"require_text", "require_limit"}:
        from . import validation as _validation
        return getattr(_validation, name)
    if name == "get_current_user_id":
        from . import security as _security
        return getattr(_security, name)
    raise AttributeError(f"module 'skilldrill.utils' has no attribute '{name}'")
