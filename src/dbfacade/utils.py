"""
Logging decorators for facade operations.
"""
import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from functools import wraps
from typing import Any, TypeVar

from dbfacade.row import Row, Rows

logger = logging.getLogger(__name__)

T = TypeVar('T')

__all__ = ['as_param_list', 'dumpsql', 'dumpsql_async', 'describe_result']


def as_param_list(params: Sequence[Any] | None) -> list[Any]:
    """Positional parameters as the list adapters receive.

    A list is passed on as is.
    """
    if params is None:
        return []
    if isinstance(params, list):
        return params
    return list(params)


def describe_result(result: Any) -> str:
    """Short description of an operation result for debug output.
    """
    if result is None:
        return 'no result'
    if isinstance(result, Rows):
        return f'{result.count()} row(s)'
    if isinstance(result, Row):
        return f'row of {len(result)} column(s)'
    return f'{type(result).__name__} result'


def dumpsql(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator for logging a statement, its parameters and elapsed time.

    Exceptions pass through untouched.
    """
    @wraps(func)
    def wrapper(self, statement: str, params: Sequence[Any] | None = None, *args: Any, **kwargs: Any) -> T:
        start = time.time()
        logger.debug(f'{func.__name__} SQL:\n{statement}\nparams: {len(params) if params is not None else 0}')
        try:
            result = func(self, statement, params, *args, **kwargs)
            logger.debug(f'{func.__name__} returned {describe_result(result)}')
            return result
        finally:
            logger.debug(f'{func.__name__} time: {time.time() - start:.4f}s')
    return wrapper


def dumpsql_async(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Coroutine version of `dumpsql`.
    """
    @wraps(func)
    async def wrapper(self, statement: str, params: Sequence[Any] | None = None, *args: Any, **kwargs: Any) -> T:
        start = time.time()
        logger.debug(f'{func.__name__} SQL:\n{statement}\nparams: {len(params) if params is not None else 0}')
        try:
            result = await func(self, statement, params, *args, **kwargs)
            logger.debug(f'{func.__name__} returned {describe_result(result)}')
            return result
        finally:
            logger.debug(f'{func.__name__} time: {time.time() - start:.4f}s')
    return wrapper
