"""
Shared helpers for the API layer: error translation, structured logging,
HTTP Range handling and stored-file naming.
"""

from .error_handlers import handle_api_errors
from .logging_utils import log_operation

__all__ = ["handle_api_errors", "log_operation"]
