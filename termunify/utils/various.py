import logging
from contextlib import contextmanager
from time import perf_counter

__all__ = ["log_performance"]


@contextmanager
def log_performance(
    logger, init_message, init_args=None,
    end_message=None, end_args=None, level=logging.INFO
):
    """
    Log `init_message` when entering the context and the elapsed wall
    clock time when leaving it, also when leaving it through an
    exception.

    `end_message` is formatted with the elapsed time in seconds followed
    by `end_args`.

    Usage
    -----
    with log_performance(LOG, "Unifying pair of size %d", init_args=(n,)):
        unify(term1, term2)
    """
    if init_args is None:
        init_args = tuple()
    if end_args is None:
        end_args = tuple()
    if end_message is None:
        end_message = "\t%2.2fs"

    logger.log(level, init_message, *init_args)
    init_time = perf_counter()
    try:
        yield
    finally:
        elapsed = perf_counter() - init_time
        logger.log(level, end_message, elapsed, *end_args)
