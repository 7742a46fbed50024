"""
Effects
=======

FnAsyncEither - Reader поверх kungfu LazyCoroResult:
окружение (зависимости) -> ленивый асинхронный Result.
"""

from .fn_async_either import FnAsyncEither, fn_error, fn_ok

__all__ = (
    "FnAsyncEither",
    "fn_error",
    "fn_ok",
)
