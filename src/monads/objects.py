"""
Null Propagation — операции над значениями, которые могут быть None

Модуль содержит свободные функции, первым аргументом принимающие source:
- do / do_select: побочное действие над source
- with_ / return_: конвертация source
- if_ / if_not / recover / of_type: фильтрация и восстановление
- try_do / try_with: то же самое внутри границы перехвата ошибок
- any_ / is_null / is_not_null: проверки присутствия

Отсутствующим считается только None. Пустые строки, 0, False и пустые
коллекции являются присутствующими значениями.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Callback вызывается 0 или 1 раз и никогда для source=None
2. Кроме try_do/try_with, операции не перехватывают исключения callback
3. try_do/try_with пробрасывают ошибку без изменений, если фильтр её отклонил
"""

import logging
from typing import Callable, TypeVar

from src.monads.outcome import (
    FailureFilter,
    Outcome,
    accepts_failure,
    validate_failure_filter,
)

logger = logging.getLogger(__name__)

S = TypeVar("S")
R = TypeVar("R")


# =============================================================================
# ДЕЙСТВИЯ
# =============================================================================


def do(
    source: S | None,
    action: Callable[[S], object],
    absent_action: Callable[[], object] | None = None,
) -> S | None:
    """
    Выполнение action над source, если source не None.

    Args:
        source: Исходное значение
        action: Действие над присутствующим source
        absent_action: Действие при source=None (например, запись в лог)

    Returns:
        source без изменений
    """
    if source is not None:
        action(source)
    elif absent_action is not None:
        absent_action()

    return source


def do_select(
    source: S | None,
    action: Callable[[S], R],
    absent_action: Callable[[], object] | None = None,
) -> R | None:
    """
    Выборка action(source), если source не None.

    При source=None вызывается absent_action (если задан) и
    возвращается None.
    """
    if source is not None:
        return action(source)

    if absent_action is not None:
        absent_action()

    return None


# =============================================================================
# КОНВЕРТАЦИЯ
# =============================================================================


def with_(source: S | None, convert: Callable[[S], R]) -> R | None:
    """
    Конвертация source, если он не None.

    Examples:
        >>> with_("x", lambda s: s + "y")
        'xy'
        >>> with_(None, lambda s: s + "y") is None
        True
    """
    if source is not None:
        return convert(source)

    return None


def return_(source: S | None, convert: Callable[[S], R], default: R) -> R:
    """
    Конвертация source или default, если source=None.

    Args:
        source: Исходное значение
        convert: Конвертер для присутствующего source
        default: Значение для отсутствующего source

    Returns:
        convert(source) или default
    """
    if source is not None:
        return convert(source)

    return default


# =============================================================================
# ФИЛЬТРАЦИЯ И ВОССТАНОВЛЕНИЕ
# =============================================================================


def if_(source: S | None, predicate: Callable[[S], bool]) -> S | None:
    """source, если он не None и predicate(source) истинен, иначе None."""
    if source is not None and predicate(source):
        return source

    return None


def if_not(source: S | None, predicate: Callable[[S], bool]) -> S | None:
    """source, если он не None и predicate(source) ложен, иначе None."""
    if source is not None and not predicate(source):
        return source

    return None


def recover(source: S | None, supplier: Callable[[], S]) -> S:
    """
    Восстановление отсутствующего значения.

    supplier вызывается только при source=None, поэтому дорогой
    default не создаётся без необходимости.

    Examples:
        >>> recover(None, lambda: 10)
        10
        >>> recover(5, lambda: 10)
        5
    """
    if source is not None:
        return source

    return supplier()


def of_type(source: object, kind: type[R]) -> R | None:
    """
    Приведение source к типу kind.

    Returns:
        source если isinstance(source, kind), иначе None
    """
    if isinstance(source, kind):
        return source

    return None


# =============================================================================
# ПРОВЕРКИ ПРИСУТСТВИЯ
# =============================================================================


def is_null(source: object) -> bool:
    return source is None


def is_not_null(source: object) -> bool:
    return source is not None


def any_(source: object) -> bool:
    """Синоним is_not_null."""
    return source is not None


# =============================================================================
# ПЕРЕХВАТ ОШИБОК
# =============================================================================


def try_do(
    source: S | None,
    action: Callable[[S], object],
    *expected: type[Exception],
    when: FailureFilter | None = None,
) -> Outcome[S]:
    """
    Выполнение action внутри границы перехвата ошибок.

    Режимы фильтрации:
    - try_do(x, f): перехватывается любая Exception
    - try_do(x, f, KeyError, ValueError): только перечисленные типы
    - try_do(x, f, when=pred): только если pred(error) истинен

    Args:
        source: Исходное значение
        action: Действие над присутствующим source
        *expected: Классы исключений для перехвата
        when: Предикат над исключением

    Returns:
        Outcome(source, error); error=None если source=None или action
        завершился без ошибки

    Raises:
        Исключение action, если оно не прошло фильтр (без изменений)
        ValueError: Если заданы одновременно expected и when
    """
    validate_failure_filter(expected, when)

    if source is not None:
        try:
            action(source)
        except Exception as e:
            if not accepts_failure(e, expected, when):
                raise
            logger.debug("try_do captured %s", type(e).__name__)
            return Outcome(source, e)

    return Outcome(source, None)


def try_with(
    source: S | None,
    convert: Callable[[S], R],
    *expected: type[Exception],
    when: FailureFilter | None = None,
) -> Outcome[R]:
    """
    Конвертация source внутри границы перехвата ошибок.

    Фильтрация ошибок такая же, как в try_do.

    Returns:
        Outcome(convert(source), None) при успехе,
        Outcome(None, error) при перехваченной ошибке,
        Outcome(None, None) если source=None
    """
    validate_failure_filter(expected, when)

    if source is not None:
        try:
            return Outcome(convert(source), None)
        except Exception as e:
            if not accepts_failure(e, expected, when):
                raise
            logger.debug("try_with captured %s", type(e).__name__)
            return Outcome(None, e)

    return Outcome(None, None)
