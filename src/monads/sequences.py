"""
Null Propagation для индексируемых последовательностей
"""

from typing import Sequence, TypeVar

T = TypeVar("T")


def at(source: Sequence[T] | None, index: int) -> T | None:
    """
    Элемент source по индексу или None.

    Индекс должен удовлетворять 0 <= index < len(source). Отрицательные
    индексы считаются выходом за границы (без отсчёта с конца).

    Examples:
        >>> at(["a", "b"], 1)
        'b'
        >>> at(["a", "b"], 5) is None
        True
        >>> at([], 0) is None
        True
    """
    if source is not None and 0 <= index < len(source):
        return source[index]

    return None
