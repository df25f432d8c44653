class RepoInfoError(Exception):
    """Base class for repoinfo errors."""


class NetworkError(RepoInfoError):
    """
    The HTTP exchange with `url` could not be completed.

    Raised for DNS failures, refused connections, timeouts and URLs the
    transport rejects. The underlying `requests` exception is kept as
    `__cause__`.
    """
    def __init__(self, url: str, message: str | None = None):
        self.url = url
        super().__init__(message or f"Request to {url} failed")
