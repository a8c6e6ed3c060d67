class HostelError(Exception):
    """Base class for errors raised by the booking console."""


class NetworkError(HostelError):
    """A resource store call failed at the transport or returned a non-success status."""

    def __init__(self, method, path, status=None, reason=None):
        self.method = method
        self.path = path
        self.status = status
        detail = f"status {status}" if status is not None else (reason or "transport error")
        super().__init__(f"API {method} failed: {path} ({detail})")


class ValidationError(HostelError):
    """Form input rejected before anything is sent to the backend."""
