"""
Outcome — результат Try-операций

Пара (value, error), которую возвращают try_do/try_with:
- value: исходный source (try_do) или результат конвертации (try_with)
- error: перехваченное исключение или None

ИНВАРИАНТЫ:
1. Если source отсутствует, action не вызывается и error всегда None
2. Исключение, не прошедшее фильтр, не попадает в Outcome (пробрасывается)
3. catch() никогда не пробрасывает перехваченную ошибку повторно
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

FailureFilter = Callable[[Exception], bool]
FailureHandler = Callable[[Exception], None]


# =============================================================================
# OUTCOME
# =============================================================================


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Результат Try-операции."""

    value: T | None
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        """True если была перехвачена ошибка."""
        return self.error is not None

    def __iter__(self) -> Iterator[object]:
        # Позволяет распаковку: value, error = try_do(...)
        return iter((self.value, self.error))


# =============================================================================
# ФИЛЬТРАЦИЯ ОШИБОК
# =============================================================================


def validate_failure_filter(
    expected: tuple[type, ...],
    when: FailureFilter | None,
) -> None:
    """
    Проверка аргументов фильтра до вызова action.

    Args:
        expected: Классы исключений, которые нужно перехватывать
        when: Предикат над исключением

    Raises:
        ValueError: Если заданы одновременно expected и when
        TypeError: Если элемент expected не является классом исключения
    """
    if expected and when is not None:
        raise ValueError("expected exception types and when= cannot be combined")

    for kind in expected:
        if not (isinstance(kind, type) and issubclass(kind, BaseException)):
            raise TypeError(f"expected exception types, got {kind!r}")


def accepts_failure(
    error: Exception,
    expected: tuple[type, ...] = (),
    when: FailureFilter | None = None,
) -> bool:
    """
    Решение о перехвате ошибки.

    Правила:
    - Нет фильтров: перехватывается любая Exception
    - expected: isinstance(error, expected), подклассы включительно
    - when: результат предиката

    Args:
        error: Возникшее исключение
        expected: Классы исключений для перехвата
        when: Предикат над исключением

    Returns:
        True если ошибку нужно сохранить в Outcome
    """
    if expected:
        return isinstance(error, expected)

    if when is not None:
        return bool(when(error))

    return True


# =============================================================================
# CATCH
# =============================================================================


def catch(outcome: Outcome[T], handler: FailureHandler | None = None) -> T | None:
    """
    Извлечение значения из Outcome.

    Без handler ошибка молча игнорируется. С handler он вызывается
    один раз (только если ошибка была), после чего возвращается value.

    Examples:
        >>> catch(Outcome("x", None))
        'x'
    """
    if outcome.error is not None and handler is not None:
        handler(outcome.error)

    return outcome.value


def log_failure(logger: logging.Logger, level: int = logging.WARNING) -> FailureHandler:
    """
    Handler для catch(), пишущий ошибку в logger вместе с traceback.

    Args:
        logger: Целевой logger
        level: Уровень логирования (default: WARNING)

    Returns:
        Функция, пригодная как handler для catch()
    """

    def _handler(error: Exception) -> None:
        logger.log(
            level,
            "captured %s: %s",
            type(error).__name__,
            error,
            exc_info=(type(error), error, error.__traceback__),
        )

    return _handler
