"""
Shared thread pool for callable and async operations.
"""
import atexit
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from logger_config import get_logger

logger = get_logger(__name__)

_default_executor: Optional[ThreadPoolExecutor] = None
_lock = threading.Lock()


def get_default_executor(max_workers: int = 8) -> ThreadPoolExecutor:
    """
    Get the process-wide executor, creating it on first use.

    Args:
        max_workers: Pool size used when the executor is created; ignored afterwards

    Returns:
        The shared ThreadPoolExecutor
    """
    global _default_executor
    with _lock:
        if _default_executor is None:
            _default_executor = ThreadPoolExecutor(
                max_workers=max_workers,
                thread_name_prefix='service-client',
            )
            logger.debug(f'Created shared executor with {max_workers} workers')
        return _default_executor


def shutdown_default_executor(wait: bool = True) -> None:
    """Shut the shared executor down; the next caller gets a fresh one."""
    global _default_executor
    with _lock:
        executor, _default_executor = _default_executor, None
    if executor is not None:
        executor.shutdown(wait=wait)


atexit.register(shutdown_default_executor)
