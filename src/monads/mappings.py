"""
Null Propagation для словарей

Отсутствующий словарь или отсутствующий ключ никогда не приводят к KeyError.
"""

from typing import Callable, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def do_items(source: Mapping[K, V] | None, action: Callable[[K, V], object]) -> Mapping[K, V] | None:
    """
    Выполнение action(key, value) для каждой записи source.

    Порядок обхода совпадает с порядком хранения в словаре.

    Returns:
        source без изменений
    """
    if source is not None:
        for key, value in source.items():
            action(key, value)

    return source


def with_key(source: Mapping[K, V] | None, key: K) -> V | None:
    """
    Значение по ключу или None.

    Examples:
        >>> with_key({1: "a", 2: "b"}, 2)
        'b'
        >>> with_key({1: "a"}, 5) is None
        True
    """
    return return_key(source, key, None)


def return_key(source: Mapping[K, V] | None, key: K, default: V) -> V:
    """
    Значение по ключу или default.

    Args:
        source: Словарь (может быть None)
        key: Искомый ключ
        default: Значение, если словарь отсутствует или ключ не найден

    Returns:
        source[key] или default
    """
    if source is not None and key in source:
        return source[key]

    return default
