"""Error taxonomy for the forwarding pipeline.

Every error maps to a fixed status code and a fixed plain-text body. None of
them is retried; the app turns them into responses with a single handler.
"""


class ProxyError(Exception):
    """Base class for errors surfaced directly as an HTTP response."""

    status_code: int = 500
    body: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.body)


class NoRouteMatch(ProxyError):
    """No configured prefix matches the request path."""

    status_code = 404
    body = "Not Found"


class GatewayTimeout(ProxyError):
    """The upstream did not answer within the configured timeout."""

    status_code = 504
    body = "Gateway Timeout"


class UpstreamUnreachable(ProxyError):
    """Any transport failure other than a timeout."""

    status_code = 500
    body = "Internal Server Error"
