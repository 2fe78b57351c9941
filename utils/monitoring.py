"""Performance monitoring and debugging utilities."""

import time
import logging
import functools
import psutil
import tracemalloc
from typing import Any, Callable
from core.config import AppConfig

logger = logging.getLogger(__name__)


def log_performance(func: Callable) -> Callable:
    """
    Decorator to log function performance.

    Args:
        func: Function to monitor

    Returns:
        Wrapped function with performance logging
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not AppConfig.PROFILE_PERFORMANCE:
            return func(*args, **kwargs)

        start_time = time.perf_counter()
        if AppConfig.MONITOR_MEMORY:
            tracemalloc.start()
            start_memory = psutil.Process().memory_info().rss

        try:
            result = func(*args, **kwargs)

            elapsed_time = time.perf_counter() - start_time
            logger.info(f"Function {func.__name__} took {elapsed_time:.3f} seconds")

            if AppConfig.MONITOR_MEMORY:
                end_memory = psutil.Process().memory_info().rss
                current, peak = tracemalloc.get_traced_memory()
                memory_diff = end_memory - start_memory
                logger.info(
                    f"Memory change: {memory_diff/1024/1024:.1f}MB, "
                    f"Peak: {peak/1024/1024:.1f}MB"
                )

            return result

        except Exception as e:
            logger.error(f"Error in {func.__name__}: {str(e)}")
            raise

        finally:
            if AppConfig.MONITOR_MEMORY and tracemalloc.is_tracing():
                tracemalloc.stop()

    return wrapper


def monitor_streamlit_state(key: str, value: Any) -> None:
    """
    Monitor changes to Streamlit session state.

    Args:
        key: State key being modified
        value: New value
    """
    if AppConfig.DEBUG_MODE:
        logger.debug(f"Session state update - {key}: {value}")

