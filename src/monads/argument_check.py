"""
Argument Check — проверка аргументов

Проверки возвращают source, поэтому их удобно использовать прямо в
присваивании:

    self._client = check_null(client, "client")
"""

from typing import Callable, TypeVar

S = TypeVar("S")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArgumentNullError(ValueError):
    """
    Обязательный аргумент равен None.

    Attributes:
        argument_name: Имя аргумента в вызывающем коде
    """

    def __init__(self, argument_name: str):
        self.argument_name = argument_name
        super().__init__(f"{argument_name} must not be None")


# =============================================================================
# NULL CHECKS
# =============================================================================


def check_null(source: S | None, argument_name: str) -> S:
    """
    Raises:
        ArgumentNullError: Если source=None
    """
    if source is None:
        raise ArgumentNullError(argument_name)

    return source


def check_null_raise(source: S | None, error_factory: Callable[[], Exception]) -> S:
    """
    Проверка source на None с пользовательским исключением.

    Args:
        source: Проверяемое значение
        error_factory: Создаёт исключение (вызывается только при source=None)

    Raises:
        Исключение, созданное error_factory
    """
    if source is None:
        raise error_factory()

    return source


def check_null_with_default(source: S | None, default: S) -> S:
    if source is None:
        return default

    return source


# =============================================================================
# CONDITION CHECKS
# =============================================================================


def check(
    source: S,
    condition: Callable[[S], bool],
    error_factory: Callable[[S], Exception],
) -> S:
    """
    Проверка произвольного условия.

    В отличие от check_null, condition вызывается и для source=None.

    Raises:
        error_factory(source): Если condition(source) ложно
    """
    if not condition(source):
        raise error_factory(source)

    return source


def check_with_default(source: S, condition: Callable[[S], bool], default: S) -> S:
    """source если condition(source) истинно, иначе default."""
    if not condition(source):
        return default

    return source
