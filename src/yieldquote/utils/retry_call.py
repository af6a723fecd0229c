"""Retry flaky reads from external providers."""

from __future__ import annotations

import logging
import time
from typing import Callable, ParamSpec, TypeVar

from web3.exceptions import BadFunctionCallOutput, ContractLogicError

P = ParamSpec("P")
R = TypeVar("R")

DEFAULT_READ_RETRY_COUNT = 5
DEFAULT_RETRY_DELAY = 0.1

# A revert or an undecodable return value gives the same answer at the same block every time
DETERMINISTIC_READ_ERRORS = (ContractLogicError, BadFunctionCallOutput)


def is_transient_read_error(exc: Exception) -> bool:
    """Return True if a failed contract read may succeed when repeated, e.g. a dropped connection."""
    return not isinstance(exc, DETERMINISTIC_READ_ERRORS)


def retry_call(
    retry_count: int,
    retry_exception_check: Callable[[Exception], bool] | None,
    func: Callable[P, R],
    *args: P.args,
    **kwargs: P.kwargs,
) -> R:
    """Call a function, retrying it when it raises.

    Only provider reads go through here; the pricing math is never retried.
    The wait between attempts grows linearly with the attempt number, and there
    is no wait after the final attempt.

    Arguments
    ---------
    retry_count: int
        The number of attempts. Must be > 0.
    retry_exception_check: Callable[[Exception], bool] | None
        Returns True for exceptions worth another attempt, e.g. `is_transient_read_error`.
        If None, every exception is retried.
    func: Callable[P, R]
        The function to call.
    *args: P.args
        The positional arguments to call func with
    **kwargs: P.kwargs
        The keyword arguments to call func with

    Returns
    -------
    R
        The value returned by the first successful call.
    """
    if retry_count <= 0:
        raise ValueError("retry_count must be greater than zero.")
    func_name = getattr(func, "__qualname__", repr(func))
    for attempt_number in range(1, retry_count + 1):
        try:
            return func(*args, **kwargs)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            if retry_exception_check is not None and not retry_exception_check(exc):
                logging.debug("Not retrying %s after %s", func_name, repr(exc))
                raise
            logging.warning(
                "Retry attempt %s out of %s: %s failed with %s", attempt_number, retry_count, func_name, repr(exc)
            )
            if attempt_number == retry_count:
                raise
            time.sleep(DEFAULT_RETRY_DELAY * attempt_number)
    raise AssertionError("unreachable: the loop either returns or raises")
