"""Exception classes for enlace.

Provides standardized exceptions for error handling throughout enlace.

A detector that finds no link is not an error: detectors return None and
scanning continues. Only invalid arguments and misbehaving callbacks raise.
"""

from __future__ import annotations

from typing import Any


class EnlaceError(Exception):
    """Base exception for all enlace errors.
    
    Subclass this for specific error categories.
    """

    pass


class InvalidModeError(EnlaceError, ValueError):
    """Unknown link mode requested.
    
    Raised before any scanning takes place.
    """

    def __init__(self, mode: Any) -> None:
        """Initialize invalid mode error.
        
        Args:
            mode: The rejected mode value
        """
        self.mode = mode
        super().__init__(
            f"Invalid linking mode {mode!r} "
            "(possible values are 'all', 'urls', 'email_addresses')"
        )


class InvalidCallbackResultError(EnlaceError, TypeError):
    """Link text callback returned something that is not text.
    
    The scan is aborted and no partial output is returned.
    """

    def __init__(self, result: Any) -> None:
        """Initialize callback result error.
        
        Args:
            result: The value returned by the callback
        """
        self.result = result
        super().__init__(
            f"Link text callback must return str or bytes, got {type(result).__name__}"
        )
