import logging

import requests
from requests.exceptions import RequestException

from repoinfo.core.errors import NetworkError
from repoinfo.http.client.response import HttpResult
from repoinfo.settings import CLIENT_SETTINGS

log = logging.getLogger(__name__)


def fetch(url: str) -> HttpResult:
    """
    Issue a single blocking GET against `url`.

    Any status code is returned as-is; only a failed exchange is an error.
    There is no retry.

    Args:
        url: The URL to fetch. Not validated locally.

    Returns:
        HttpResult with the remote status code and the response text.

    Raises:
        NetworkError: When the request could not be completed (DNS failure,
            connection refused, timeout, malformed URL).
    """
    log.debug("fetching", extra={"url": url})

    try:
        response = requests.get(url, headers=dict(CLIENT_SETTINGS.headers))
    except RequestException as e:
        log.warning("request failed: %s", e, extra={"url": url})
        raise NetworkError(url, f"Request to {url} failed: {e}") from e

    log.debug("fetched", extra={"url": url, "status": response.status_code})
    return HttpResult(status=response.status_code, body=response.text)
