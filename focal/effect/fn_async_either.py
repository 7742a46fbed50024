"""FnAsyncEither

Reader + Lazy + Coro + Result:

    FnAsyncEither[D, T, E] ~ (env: D) -> LazyCoroResult[T, E]

An async computation that needs an environment (dependencies, config,
clients) before it can run. Nothing executes until the environment is
supplied and the resulting LazyCoroResult is awaited.

Built on top of kungfu LazyCoroResult, Ok = success, Error = failure."""

from __future__ import annotations

import asyncio
import inspect
import logging
import typing
from collections.abc import Awaitable, Callable, Coroutine
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import identity

logger = logging.getLogger(__name__)

class FnAsyncEither[D, T, E]:
    """Environment-reading lazy async Result.

    Monadic laws (for every environment d):
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: Callable[[D], LazyCoroResult[T, E]], /) -> None:
        """Create FnAsyncEither from a fn taking the environment."""
        self._value = value

    # Constructors

    @staticmethod
    def ok[V](value: V) -> FnAsyncEither[typing.Any, V, typing.Never]:
        """Always succeed with value, ignoring the environment."""
        return FnAsyncEither.from_result(Ok(value))

    @staticmethod
    def error[Err](error: Err) -> FnAsyncEither[typing.Any, typing.Never, Err]:
        """Always fail with error, ignoring the environment."""
        return FnAsyncEither.from_result(Error(error))

    @staticmethod
    def pure[V](value: V) -> FnAsyncEither[typing.Any, V, typing.Never]:
        """Classic FP alias for ok()."""
        return FnAsyncEither.ok(value)

    @staticmethod
    def fail[Err](error: Err) -> FnAsyncEither[typing.Any, typing.Never, Err]:
        """Classic FP alias for error(). Dual of pure()."""
        return FnAsyncEither.error(error)

    @staticmethod
    def from_result[Env, V, Err](result: Result[V, Err]) -> FnAsyncEither[Env, V, Err]:
        """Lift an already computed Result."""

        def bound(env: Env) -> LazyCoroResult[V, Err]:
            _ = env

            async def run() -> Result[V, Err]:
                return result

            return LazyCoroResult(run)

        return FnAsyncEither(bound)

    @staticmethod
    def from_lazy_coro_result[Env, V, Err](lazy: LazyCoroResult[V, Err]) -> FnAsyncEither[Env, V, Err]:
        """Lift a LazyCoroResult that doesn't need the environment."""

        def bound(env: Env) -> LazyCoroResult[V, Err]:
            _ = env
            return lazy

        return FnAsyncEither(bound)

    @staticmethod
    def from_async[Env, V](thunk: Callable[[], Awaitable[V]]) -> FnAsyncEither[Env, V, typing.Never]:
        """Lift an always-succeeding async thunk."""

        def bound(env: Env) -> LazyCoroResult[V, typing.Never]:
            _ = env

            async def run() -> Result[V, typing.Never]:
                return Ok(await thunk())

            return LazyCoroResult(run)

        return FnAsyncEither(bound)

    @staticmethod
    def from_fn[Env, V](fn: Callable[[Env], V]) -> FnAsyncEither[Env, V, typing.Never]:
        """Lift an always-succeeding sync function of the environment."""

        def bound(env: Env) -> LazyCoroResult[V, typing.Never]:
            async def run() -> Result[V, typing.Never]:
                return Ok(fn(env))

            return LazyCoroResult(run)

        return FnAsyncEither(bound)

    @staticmethod
    def try_catch[Env, V, Err](
        fn: Callable[[Env], V | Awaitable[V]],
        on_error: Callable[[Exception, Env], Err],
    ) -> FnAsyncEither[Env, V, Err]:
        """
        Run fn(env), sync or async, catching exceptions into Error.

        Example:
            fetch = FnAsyncEither.try_catch(
                lambda client: client.get("/users"),
                lambda exc, client: FetchError(str(exc)),
            )
            result = await fetch(client)

        NOTE: Catches Exception subclasses only, like lift.catching.
        """

        def bound(env: Env) -> LazyCoroResult[V, Err]:
            async def run() -> Result[V, Err]:
                try:
                    value = fn(env)
                    if inspect.isawaitable(value):
                        value = await value
                    return Ok(typing.cast(V, value))
                except Exception as exc:
                    logger.debug("try_catch captured %r", exc)
                    return Error(on_error(exc, env))

            return LazyCoroResult(run)

        return FnAsyncEither(bound)

    @staticmethod
    def ask[Env]() -> FnAsyncEither[Env, Env, typing.Never]:
        """Succeed with the environment itself."""
        return FnAsyncEither.from_fn(identity)

    @staticmethod
    def asks[Env, V](fn: Callable[[Env], V]) -> FnAsyncEither[Env, V, typing.Never]:
        """Succeed with a projection of the environment. Alias for from_fn()."""
        return FnAsyncEither.from_fn(fn)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> FnAsyncEither[D, U, E]:
        """Functor fmap - apply function to success value."""

        def bound(env: D) -> LazyCoroResult[U, E]:
            return self(env).map(f)

        return FnAsyncEither(bound)

    def map_err[F](self, f: Callable[[E], F], /) -> FnAsyncEither[D, T, F]:
        """Map over error type."""

        def bound(env: D) -> LazyCoroResult[T, F]:
            return self(env).map_err(f)

        return FnAsyncEither(bound)

    def bimap[F, U](self, on_error: Callable[[E], F], on_ok: Callable[[T], U], /) -> FnAsyncEither[D, U, F]:
        """Map both branches at once."""
        return self.map(on_ok).map_err(on_error)

    # Monad operations

    def then[U](self, f: Callable[[T], FnAsyncEither[D, U, E]], /) -> FnAsyncEither[D, U, E]:
        """
        Monadic bind (>>=).

        - On Ok: runs f(value) in the same environment
        - On Error: short-circuit
        """

        def bound(env: D) -> LazyCoroResult[U, E]:
            async def run() -> Result[U, E]:
                result = await self(env)
                match result:
                    case Ok(value):
                        return await f(value)(env)
                    case Error(err):
                        return Error(err)
                    case _ as unreachable:
                        assert_never(unreachable)

            return LazyCoroResult(run)

        return FnAsyncEither(bound)

    def then_first[U](self, f: Callable[[T], FnAsyncEither[D, U, E]], /) -> FnAsyncEither[D, T, E]:
        """Run f for its effect and error only; keep the original value on success."""

        def bound(env: D) -> LazyCoroResult[T, E]:
            async def run() -> Result[T, E]:
                result = await self(env)
                match result:
                    case Ok(value):
                        match await f(value)(env):
                            case Ok(_):
                                return result
                            case Error(err):
                                return Error(err)
                            case _ as unreachable:
                                assert_never(unreachable)
                    case Error(err):
                        return Error(err)
                    case _ as unreachable:
                        assert_never(unreachable)

            return LazyCoroResult(run)

        return FnAsyncEither(bound)

    def join[U](self: FnAsyncEither[D, FnAsyncEither[D, U, E], E]) -> FnAsyncEither[D, U, E]:
        """Flatten a nested FnAsyncEither."""
        return self.then(identity)

    def recover[U, F](self, f: Callable[[E], FnAsyncEither[D, U, F]], /) -> FnAsyncEither[D, T | U, F]:
        """
        Bind on the error branch: turn a failure into another computation.

        Ok passes through untouched.
        """

        def bound(env: D) -> LazyCoroResult[T | U, F]:
            async def run() -> Result[T | U, F]:
                result = await self(env)
                match result:
                    case Ok(value):
                        return Ok(value)
                    case Error(err):
                        return await f(err)(env)
                    case _ as unreachable:
                        assert_never(unreachable)

            return LazyCoroResult(run)

        return FnAsyncEither(bound)

    def alt[U, F](self, other: FnAsyncEither[D, U, F], /) -> FnAsyncEither[D, T | U, F]:
        """On error, run `other` in the same environment instead."""

        def fallback(err: E) -> FnAsyncEither[D, U, F]:
            _ = err
            return other

        return self.recover(fallback)

    # Applicative operations

    def ap_sequential[A, U](
        self: FnAsyncEither[D, Callable[[A], U], E],
        arg: FnAsyncEither[D, A, E],
        /,
    ) -> FnAsyncEither[D, U, E]:
        """Apply the wrapped function to `arg`. Function first; an error there skips `arg`."""

        def bound(env: D) -> LazyCoroResult[U, E]:
            async def run() -> Result[U, E]:
                match await self(env):
                    case Ok(fn):
                        return (await arg(env)).map(fn)
                    case Error(err):
                        return Error(err)
                    case _ as unreachable:
                        assert_never(unreachable)

            return LazyCoroResult(run)

        return FnAsyncEither(bound)

    def ap_parallel[A, U](
        self: FnAsyncEither[D, Callable[[A], U], E],
        arg: FnAsyncEither[D, A, E],
        /,
    ) -> FnAsyncEither[D, U, E]:
        """
        Apply the wrapped function to `arg`, running both concurrently.

        If both fail, the function side's error wins. If either side raises,
        the other one is cancelled and the exception propagates.
        """

        def bound(env: D) -> LazyCoroResult[U, E]:
            async def run() -> Result[U, E]:
                tasks = (asyncio.create_task(self(env)()), asyncio.create_task(arg(env)()))
                try:
                    fn_result, arg_result = await asyncio.gather(*tasks)
                except BaseException:
                    for t in tasks:
                        t.cancel()
                    raise
                match fn_result:
                    case Ok(fn):
                        return arg_result.map(fn)
                    case Error(err):
                        return Error(err)
                    case _ as unreachable:
                        assert_never(unreachable)

            return LazyCoroResult(run)

        return FnAsyncEither(bound)

    # Reader operations

    def local[C](self, f: Callable[[C], D], /) -> FnAsyncEither[C, T, E]:
        """Run with an environment derived from the outer one."""

        def bound(env: C) -> LazyCoroResult[T, E]:
            return self(f(env))

        return FnAsyncEither(bound)

    # Elimination

    def fold[B](
        self,
        on_error: Callable[[E], B],
        on_ok: Callable[[T], B],
        /,
    ) -> Callable[[D], Coroutine[typing.Any, typing.Any, B]]:
        """Collapse both branches into one value, given the environment."""

        async def run(env: D) -> B:
            match await self(env):
                case Ok(value):
                    return on_ok(value)
                case Error(err):
                    return on_error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return run

    # Protocol methods

    def __call__(self, env: D, /) -> LazyCoroResult[T, E]:
        """Supply the environment, returning the lazy computation."""
        return self._value(env)

# Convenience Constructors
def fn_ok[T](value: T) -> FnAsyncEither[typing.Any, T, typing.Never]:
    """Create always-succeeding FnAsyncEither."""
    return FnAsyncEither.ok(value)

def fn_error[E](error: E) -> FnAsyncEither[typing.Any, typing.Never, E]:
    """Create always-failing FnAsyncEither."""
    return FnAsyncEither.error(error)

__all__ = (
    "FnAsyncEither",
    "fn_ok",
    "fn_error",
)
