"""Exception hierarchy for the pinned projects pipeline.

Repositories raise these, services let them propagate, and handlers
translate them into HTTP responses.
"""


class PinnedReposError(Exception):
    """Base class for all pinned-repos errors."""


class InvalidRequestError(PinnedReposError):
    """The inbound request is missing the username or targets an unknown route."""


class UpstreamError(PinnedReposError):
    """An outbound call to GitHub did not produce usable data.

    Attributes:
        url: The upstream URL that failed
        page: Listing page number, when the failure happened inside the page loop
    """

    kind = "upstream_error"

    def __init__(self, message: str, url: str, page: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.page = page

    def to_dict(self) -> dict:
        return {
            "error": self.kind,
            "message": self.message,
            "url": self.url,
            "status_code": None,
            "page": self.page,
        }


class UpstreamStatusError(UpstreamError):
    """Upstream answered with a non-success status code."""

    kind = "upstream_status"

    def __init__(self, url: str, status_code: int, page: int | None = None) -> None:
        message = f"Upstream returned HTTP {status_code} for {url}"
        if page is not None:
            message += f" (page {page})"
        super().__init__(message, url=url, page=page)
        self.status_code = status_code

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["status_code"] = self.status_code
        return data


class UpstreamDecodeError(UpstreamError):
    """Upstream body was not valid JSON or did not have the expected shape."""

    kind = "upstream_decode"


class UpstreamTransportError(UpstreamError):
    """The request never produced a response (DNS, connect, timeout, ...)."""

    kind = "upstream_transport"
