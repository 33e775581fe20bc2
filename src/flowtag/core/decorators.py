"""Common decorators for error handling and performance logging."""

from __future__ import annotations

import time
import types
from functools import wraps
from typing import Callable, Type

from ..logging import get_logger
from ..exceptions import FlowTagError


logger = get_logger(__name__)

# Failures that mean a file could not be opened, read, decoded or written.
IO_FAILURES: tuple[Type[BaseException], ...] = (OSError, UnicodeError)


def _wrap_generator(gen, exc_cls, func_name):
    """Yield from ``gen`` while translating I/O failures to ``exc_cls``."""
    try:
        for item in gen:
            yield item
    except IO_FAILURES as exc:
        logger.error("%s failed: %s", func_name, exc)
        raise exc_cls(str(exc), context=func_name) from exc


def handle_io_errors(exc_cls: Type[FlowTagError]) -> Callable:
    """Translate I/O failures raised by the wrapped function into ``exc_cls``.

    Domain errors already derived from :class:`FlowTagError` pass through
    untouched. Generators are wrapped so failures raised while iterating are
    translated too.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                result = func(*args, **kwargs)
            except FlowTagError:
                raise
            except IO_FAILURES as exc:
                logger.error("I/O error in %s: %s", func.__name__, exc)
                raise exc_cls(str(exc), context=func.__name__) from exc
            if isinstance(result, types.GeneratorType):
                return _wrap_generator(result, exc_cls, func.__name__)
            return result

        return wrapper

    return decorator


def log_performance(func):
    """Log execution duration for ``func``."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            duration = time.perf_counter() - start_time
            logger.info("%s call failed after %.3f seconds", func.__name__, duration)
            raise

        duration = time.perf_counter() - start_time
        logger.info("%s executed in %.3f seconds", func.__name__, duration)
        return result

    return wrapper
