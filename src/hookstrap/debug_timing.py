"""Debug timing helpers for bootstrap steps."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def timed_operation(description: str) -> Iterator[None]:
    """Log the start and the duration of an operation at DEBUG level.

    The completion record is emitted even when the operation raises.
    """
    logger.debug("Starting: %s", description)
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug("Completed in %.0fms: %s", elapsed_ms, description)
