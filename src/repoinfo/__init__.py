from .core.errors import NetworkError
from .core.printer import render
from .core.runner import DEFAULT_URL, run
from .http.client.downloader import fetch
from .http.client.response import HttpResult
from .util.logging import configure_logging

__all__ = [
    'DEFAULT_URL',
    'HttpResult',
    'NetworkError',
    'configure_logging',
    'fetch',
    'render',
    'run',
]
