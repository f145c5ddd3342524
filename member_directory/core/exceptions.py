# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Portal failure signals. Raised inside the client, never past it."""

from typing import Optional


class PortalError(Exception):
    """The Portal API could not give a usable answer."""

    reason = "upstream_error"

    def __init__(self, operation: str, message: str,
                 status_code: Optional[int] = None, reason: Optional[str] = None):
        self.operation = operation
        self.status_code = status_code
        if reason:
            self.reason = reason
        super().__init__(f"Portal API error during {operation}: {message}")


class PortalNotConfigured(PortalError):
    """No base URL or API key. Not a fault, a fallback trigger."""

    reason = "not_configured"

    def __init__(self, operation: str):
        super().__init__(operation, "no portal URL or API key configured")
