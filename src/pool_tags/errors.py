import copy
from typing import List, Optional


class PoolTagsError(RuntimeError):
    """Base class for every failure that aborts a tag run."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def with_context(self, operation: str) -> "PoolTagsError":
        """Same error kind, message prefixed with the operation that failed."""
        wrapped = copy.copy(self)
        wrapped.message = f"{operation}: {self.message}"
        wrapped.args = (wrapped.message,)
        return wrapped


class UnsupportedNetwork(PoolTagsError):
    def __init__(self, message: str, network_id: Optional[str] = None, supported: Optional[List[str]] = None):
        super().__init__(message)
        self.network_id = network_id
        self.supported = supported or []


class TransportError(PoolTagsError):
    """Non-2xx response, or no response at all (status is None)."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class UpstreamQueryError(PoolTagsError):
    def __init__(self, message: str, messages: Optional[List[str]] = None):
        super().__init__(message)
        self.messages = messages or []


class MalformedResponseError(PoolTagsError):
    pass


class UnknownError(PoolTagsError):
    pass
