"""Error taxonomy shared by services and routes."""


class ExtractorError(Exception):
    """Base error. ``status_code`` is what the HTTP layer answers with."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ExtractorError):
    """Missing or malformed URL supplied by the caller."""

    status_code = 400


class UpstreamFailure(ExtractorError):
    """Origin answered the proxied request with a non-success status."""

    status_code = 502

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class ExtractionFailure(ExtractorError):
    """Navigation, timeout or script error inside a browser session.

    Recovered by the browser stage as "no evidence found"; never reaches a caller.
    """


class TransportFailure(ExtractorError):
    """Network-level fault while talking to an origin."""

    status_code = 500
