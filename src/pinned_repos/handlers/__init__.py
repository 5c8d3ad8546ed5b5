"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .pinned_handler import INCORRECT_REQUEST, PinnedHandler

__all__ = [
    "INCORRECT_REQUEST",
    "PinnedHandler",
]
