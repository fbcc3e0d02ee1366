"""Helpers for callbacks that may be plain or async callables."""

import inspect
from typing import Any


async def maybe_await(value: Any) -> Any:
    """Await value if it is awaitable, otherwise return it unchanged.

    Lets storage collaborators pass either sync or async callbacks to
    the core without the core caring which.
    """
    if inspect.isawaitable(value):
        return await value
    return value
