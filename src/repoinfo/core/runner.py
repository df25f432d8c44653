import logging
from typing import Optional

from repoinfo.core.printer import render
from repoinfo.http.client.downloader import fetch
from repoinfo.settings import RUNNER_SETTINGS

log = logging.getLogger(__name__)

DEFAULT_URL = RUNNER_SETTINGS.default_url


def resolve_url(url: Optional[str]) -> str:
    return DEFAULT_URL if url is None else url


def run(url: Optional[str] = None) -> None:
    """
    Fetch `url` (or DEFAULT_URL when absent) and print the
    status code followed by the body.

    NetworkError from the transport is not caught; nothing is printed
    when the fetch fails.
    """
    target = resolve_url(url)
    log.debug("running", extra={"url": target})

    result = fetch(target)
    render(result.status, result.body)
