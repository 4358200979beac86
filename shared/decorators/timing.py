# shared/decorators/timing.py
import time
import functools
import logging
from typing import Callable


def time_execution(func: Callable) -> Callable:
    """Log how long each call takes, at debug level under the function's module logger"""
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(f"⏱️ {func.__qualname__} executed in {elapsed_ms:.3f} ms")

    return wrapper
