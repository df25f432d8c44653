import logging
from logging.config import dictConfig

# Attributes every LogRecord carries; anything else arrived through `extra`
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class KeyValueFormatter(logging.Formatter):
    """Append the record's `extra` fields as sorted key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = sorted(
            (k, v) for k, v in record.__dict__.items() if k not in _RECORD_ATTRS
        )
        if not extras:
            return line
        return line + " | " + " ".join(f"{k}={v}" for k, v in extras)


def configure_logging(level: str | int = "INFO") -> None:
    """
    Send repoinfo's log records to stderr at `level`.

    stdout carries only the fetched status and body, so logs never go there.
    """
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "kv": {
                "()": KeyValueFormatter,
                "format": "%(asctime)s [%(levelname).1s] %(name)s | %(message)s",
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "kv",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "repoinfo": {"level": level, "handlers": ["stderr"]},
        },
    })
