"""Composition helpers for :class:`concurrent.futures.Future`.

Repository calls return futures produced by a thread pool. Command handlers
chain them with :func:`then` instead of blocking a worker on another
worker's result, so a small pool cannot deadlock on nested lookups.
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Callable, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def completed(value: T) -> Future[T]:
    """Return a future already resolved with ``value``."""
    future: Future[T] = Future()
    future.set_result(value)
    return future


def failed(exc: BaseException) -> Future[Any]:
    """Return a future already failed with ``exc``."""
    future: Future[Any] = Future()
    future.set_exception(exc)
    return future


def then(future: Future[T], fn: Callable[[T], U | Future[U]]) -> Future[U]:
    """Run ``fn`` on the result of ``future`` once it resolves.

    ``fn`` may return a plain value or another future; in the latter case
    the returned future follows it. If ``future`` fails, or ``fn`` raises,
    the returned future fails with the same exception and ``fn``'s
    continuation never runs.
    """
    outer: Future[U] = Future()

    def _on_done(done: Future[T]) -> None:
        try:
            value = fn(done.result())
        except Exception as exc:
            outer.set_exception(exc)
            return
        if isinstance(value, Future):
            value.add_done_callback(lambda inner: _transfer(inner, outer))
        else:
            outer.set_result(value)

    future.add_done_callback(_on_done)
    return outer


def _transfer(source: Future[U], target: Future[U]) -> None:
    try:
        result = source.result()
    except Exception as exc:
        target.set_exception(exc)
    else:
        target.set_result(result)
