"""Terminal rendering for the node-resolve CLI."""

from .error_display import display_resolver_error
from .error_display import format_error_message

__all__ = ["display_resolver_error", "format_error_message"]
