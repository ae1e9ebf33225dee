"""Invoke helpers — call sync or async handlers uniformly.

Handlers can be ``def`` or ``async def``. Any code that calls a
user-provided handler from async code goes through these helpers so the
sync/async check lives in exactly one place.

Usage::

    from routebind._internal.invoke import invoke, invoke_in_thread

    result = await invoke(handler, *args, **kwargs)
    result = await invoke_in_thread(blocking_handler, *args, **kwargs)
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's a coroutine.

    Works with both sync and async callables::

        # sync — returns immediately, no await needed
        def show(user, post):
            return {"user": user, "post": post}

        # async — returns coroutine, awaited automatically
        async def show(user, post):
            return await load(user, post)
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


async def invoke_in_thread(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Like ``invoke()``, but run sync handlers in anyio's worker thread pool.

    Coroutine functions are awaited on the calling task as usual.
    """
    if inspect.iscoroutinefunction(handler):
        return await handler(*args, **kwargs)
    result = await anyio.to_thread.run_sync(functools.partial(handler, *args, **kwargs))
    if inspect.isawaitable(result):
        result = await result
    return result
