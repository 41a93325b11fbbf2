import functools
import logging

from tasktracker.database import write_lock
from tasktracker.errors import Err, Error

logger = logging.getLogger(__name__)


def operation(mutating: bool = True):
    """Wrap a service method as a public operation.

    Mutating operations hold the process-wide write lock from their first
    check to their commit. Any unexpected exception is logged, the session
    is rolled back and the caller gets a generic InternalError.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                if mutating:
                    with write_lock:
                        return func(self, *args, **kwargs)
                return func(self, *args, **kwargs)
            except Exception:
                logger.exception("%s failed", func.__qualname__)
                try:
                    self.db.rollback()
                except Exception:
                    logger.exception("rollback after %s failed", func.__qualname__)
                return Err(Error.internal())

        return wrapper

    return decorator
