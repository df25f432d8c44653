import sys
from typing import TextIO, Optional


def render(status: int, body: str, file: Optional[TextIO] = None) -> None:
    """Write `status` and then `body` verbatim, one per line."""
    # Resolved at call time so redirected/captured stdout is honoured
    out = file if file is not None else sys.stdout
    out.write(f"{status}\n")
    out.write(f"{body}\n")
    out.flush()
