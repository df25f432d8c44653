from repoinfo.core.errors import NetworkError, RepoInfoError
from repoinfo.core.printer import render
from repoinfo.core.runner import DEFAULT_URL, run

__all__ = [
    'DEFAULT_URL',
    'NetworkError',
    'RepoInfoError',
    'render',
    'run',
]
