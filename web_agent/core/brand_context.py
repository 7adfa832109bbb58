"""Brand context for tagging request-scoped work with the active brand."""

from contextvars import ContextVar
from typing import Optional

# Context variable for the resolved brand key
brand_var: ContextVar[Optional[str]] = ContextVar("brand", default=None)


def set_brand_context(brand: str | None) -> None:
    """Set the current brand context.

    Args:
        brand: Resolved brand key to set in context
    """
    brand_var.set(brand)


def get_brand_context() -> str | None:
    """Get the current brand context.

    Returns:
        Current brand key or None
    """
    return brand_var.get()


def clear_brand_context() -> None:
    """Clear the current brand context."""
    brand_var.set(None)
