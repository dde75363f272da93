"""
Вызов callback, который может отсутствовать
"""

from typing import Any, Callable


def execute(action: Callable[..., Any] | None, *args: Any) -> None:
    """
    Вызов action(*args), если action не None.

    Examples:
        >>> execute(None, 1, 2)
        >>> execute(print, "hello")
        hello
    """
    if action is not None:
        action(*args)
