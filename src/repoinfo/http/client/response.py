# repoinfo/http/client/response.py
from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResult:
    status: int
    body: str
