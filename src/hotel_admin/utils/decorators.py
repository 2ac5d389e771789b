"""Decorator utilities for cross-cutting concerns."""
import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar, cast

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def log_storage_call(operation: str, logger_name: Optional[str] = None) -> Callable[[F], F]:
    """Decorator to log how long a storage operation took and whether it succeeded.

    The wrapped function must return an object with a boolean ``success``
    attribute (``UploadResult``, ``RemoveResult``).

    Args:
        operation: Label used in the log line, e.g. "upload"
        logger_name: Optional logger name (defaults to module logger)

    Returns:
        Decorator function
    """
    call_logger = logging.getLogger(logger_name) if logger_name else logger

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            result = func(*args, **kwargs)
            duration = time.perf_counter() - start_time
            if getattr(result, "success", False):
                call_logger.info(f"Storage {operation} succeeded in {duration:.2f}s")
            else:
                call_logger.warning(f"Storage {operation} failed after {duration:.2f}s")
            return result
        return cast(F, wrapper)

    return decorator
