"""
Nullable — значение с явным флагом присутствия

Nullable[T] нужен там, где None сам по себе является допустимым значением
и не может служить маркером отсутствия. Присутствующий Nullable может
содержать None (без "схлопывания" вложенной пустоты).

Функции nullable_* повторяют контракты модуля objects. Callback всегда
получает развёрнутое значение (value), а не сам Nullable.
"""

import logging
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel, field_validator

from src.monads.outcome import (
    FailureFilter,
    Outcome,
    accepts_failure,
    validate_failure_filter,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


# =============================================================================
# MODEL
# =============================================================================


class Nullable(BaseModel, Generic[T]):
    """
    Optional value с явным флагом присутствия.

    Invariants:
    - has_value=False => value is None
    """

    has_value: bool = False
    value: T | None = None

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_absent_has_no_value(cls, v: Any, info) -> Any:
        """Отсутствующий Nullable не может содержать значение"""
        if not info.data.get("has_value", False) and v is not None:
            raise ValueError(f"absent Nullable cannot carry a value, got {v!r}")
        return v

    @classmethod
    def present(cls, value: Any) -> "Nullable[Any]":
        return cls(has_value=True, value=value)

    @classmethod
    def absent(cls) -> "Nullable[Any]":
        return cls(has_value=False)

    @classmethod
    def of(cls, value: Any) -> "Nullable[Any]":
        """None -> absent, иначе present(value)."""
        if value is None:
            return cls.absent()
        return cls.present(value)

    def get_value_or_default(self, default: Any = None) -> Any:
        if self.has_value:
            return self.value
        return default


# =============================================================================
# ДЕЙСТВИЯ И КОНВЕРТАЦИЯ
# =============================================================================


def nullable_do(
    source: Nullable[T],
    action: Callable[[T], object],
    absent_action: Callable[[], object] | None = None,
) -> Nullable[T]:
    """action(source.value) если значение присутствует; возвращает source."""
    if source.has_value:
        action(source.value)
    elif absent_action is not None:
        absent_action()

    return source


def nullable_with(source: Nullable[T], convert: Callable[[T], R]) -> R | None:
    """convert(source.value) или None для отсутствующего значения."""
    if source.has_value:
        return convert(source.value)

    return None


def nullable_return(source: Nullable[T], convert: Callable[[T], R], default: R) -> R:
    """convert(source.value) или default для отсутствующего значения."""
    if source.has_value:
        return convert(source.value)

    return default


# =============================================================================
# ФИЛЬТРАЦИЯ И ВОССТАНОВЛЕНИЕ
# =============================================================================


def nullable_if(source: Nullable[T], predicate: Callable[[T], bool]) -> Nullable[T]:
    if source.has_value and predicate(source.value):
        return source

    return Nullable.absent()


def nullable_if_not(source: Nullable[T], predicate: Callable[[T], bool]) -> Nullable[T]:
    if source.has_value and not predicate(source.value):
        return source

    return Nullable.absent()


def nullable_recover(source: Nullable[T], supplier: Callable[[], T]) -> T:
    """
    Развёрнутое значение или supplier() для отсутствующего.

    Examples:
        >>> nullable_recover(Nullable.absent(), lambda: 10)
        10
    """
    if source.has_value:
        return source.value

    return supplier()


def nullable_is_null(source: Nullable[Any]) -> bool:
    return not source.has_value


def nullable_is_not_null(source: Nullable[Any]) -> bool:
    return source.has_value


# =============================================================================
# ПЕРЕХВАТ ОШИБОК
# =============================================================================


def nullable_try_do(
    source: Nullable[T],
    action: Callable[[T], object],
    *expected: type[Exception],
    when: FailureFilter | None = None,
) -> Outcome[Nullable[T]]:
    """
    Аналог objects.try_do для Nullable.

    Returns:
        Outcome(source, error), где source остаётся исходным Nullable
    """
    validate_failure_filter(expected, when)

    if source.has_value:
        try:
            action(source.value)
        except Exception as e:
            if not accepts_failure(e, expected, when):
                raise
            logger.debug("nullable_try_do captured %s", type(e).__name__)
            return Outcome(source, e)

    return Outcome(source, None)


def nullable_try_with(
    source: Nullable[T],
    convert: Callable[[T], R],
    *expected: type[Exception],
    when: FailureFilter | None = None,
) -> Outcome[R]:
    """Аналог objects.try_with для Nullable."""
    validate_failure_filter(expected, when)

    if source.has_value:
        try:
            return Outcome(convert(source.value), None)
        except Exception as e:
            if not accepts_failure(e, expected, when):
                raise
            logger.debug("nullable_try_with captured %s", type(e).__name__)
            return Outcome(None, e)

    return Outcome(None, None)
