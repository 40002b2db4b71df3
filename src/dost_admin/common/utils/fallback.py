"""Uniform remote/fallback policy for service methods.

Both decorators expect to wrap a method of an object exposing ``settings``
(a :class:`SupabaseSettings`). Reads never raise: they degrade to fallback
data. Writes never raise: they return a :class:`Result` with the error slot set.
"""
import functools
import logging
from typing import Callable

from dost_admin.common.models.results import ErrorKind, Result, ServiceError
from dost_admin.common.utils.custom_exceptions import NotFoundException
from dost_admin.common.utils.supabase_client import describe_error

logger = logging.getLogger(__name__)


def remote_read(fallback: Callable):
    """Serve ``fallback(self, *args, **kwargs)`` when unconfigured or failing."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            if not self.settings.configured:
                logger.info(f"{func.__qualname__}: Supabase not configured, using fallback data")
                return fallback(self, *args, **kwargs)
            try:
                return func(self, *args, **kwargs)
            except Exception as err:
                logger.error(f"{func.__qualname__} failed, using fallback data: {describe_error(err)}")
                return fallback(self, *args, **kwargs)

        return wrapper

    return decorator


def remote_write(func):
    """Return a demo-mode error when unconfigured, a remote error on failure."""

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> Result:
        if not self.settings.configured:
            logger.info(f"{func.__qualname__}: rejected in demo mode")
            return Result(error=ServiceError.demo_mode())
        try:
            return func(self, *args, **kwargs)
        except NotFoundException as err:
            logger.info(f"{func.__qualname__}: {err}")
            return Result.failure(str(err), ErrorKind.NOT_FOUND)
        except Exception as err:
            message = describe_error(err)
            logger.error(f"{func.__qualname__} failed: {message}")
            return Result.failure(message)

    return wrapper
