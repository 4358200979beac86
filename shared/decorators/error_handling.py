# shared/decorators/error_handling.py
import functools
import logging
import traceback
from typing import Any, Callable, Optional
from datetime import datetime, timezone

from core.exceptions import MetaConvertException

logger = logging.getLogger(__name__)

def handle_errors(
    default_return: Any = None,
    log_errors: bool = True,
    custom_handler: Optional[Callable] = None
):
    """
    Decorator that turns exceptions into a default return value

    Args:
        default_return: Value returned when the call fails
        log_errors: Whether to log the failure
        custom_handler: Called as handler(exception, func_name, args, kwargs)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return _handle_exception(
                    e, func.__name__, args, kwargs,
                    default_return, log_errors, custom_handler
                )

        return wrapper

    return decorator

def _handle_exception(
    exception: Exception,
    func_name: str,
    args: tuple,
    kwargs: dict,
    default_return: Any,
    log_errors: bool,
    custom_handler: Optional[Callable]
) -> Any:
    """Internal exception handling logic"""

    # Use custom handler if provided
    if custom_handler:
        try:
            return custom_handler(exception, func_name, args, kwargs)
        except Exception as handler_error:
            logger.error(f"💥 Custom error handler failed: {handler_error}")

    # Log the error
    if log_errors:
        error_info = {
            'function': func_name,
            'exception_type': type(exception).__name__,
            'exception_message': str(exception),
            'args_count': len(args),
            'kwargs_keys': list(kwargs.keys()),
            'timestamp': datetime.now(timezone.utc).isoformat()
        }

        logger.error(f"❌ Error in {func_name}: {exception}")
        logger.debug(f"📋 Error details: {error_info}")
        logger.debug(f"🔍 Traceback: {traceback.format_exc()}")

    return default_return

def handle_conversion_errors(default_return: Any = False):
    """Decorator for per-frame conversion: log the failure and report it once"""

    def custom_handler(exception, func_name, args, kwargs):
        if isinstance(exception, MetaConvertException):
            logger.error(f"🧾 Metadata error in {func_name}: {exception}")
        elif isinstance(exception, (TypeError, ValueError, OverflowError)):
            logger.error(f"🧩 Malformed metadata in {func_name}: {type(exception).__name__}: {exception}")
        else:
            logger.error(f"💥 Unexpected error in {func_name}: {type(exception).__name__}: {exception}")
        logger.debug(f"🔍 Traceback: {traceback.format_exc()}")

        return default_return

    return handle_errors(
        default_return=default_return,
        log_errors=True,
        custom_handler=custom_handler
    )
