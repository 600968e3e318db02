from __future__ import annotations
import logging
from typing import Any, Protocol


class Logger(Protocol):
    """Anything with the four logging.Logger level methods."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


class NullLogger:
    """Discards every call."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass


def default_logger() -> logging.Logger:
    # Package logger carries a NullHandler, so output stays silent until the app configures logging.
    return logging.getLogger('helius_client')
