"""
Null Propagation для последовательностей

Элементы None (и отсутствующие Nullable) пропускаются в do_each и
заменяются на None в with_each. Индекс в *_indexed вариантах считается
по всем элементам исходной последовательности, включая пропущенные.
"""

from typing import Any, Callable, Iterable, Iterator, TypeVar

from src.monads.nullable import Nullable

S = TypeVar("S")
R = TypeVar("R")


def _unwrap(item: Any) -> tuple[bool, Any]:
    # (присутствует, развёрнутое значение)
    if isinstance(item, Nullable):
        return item.has_value, item.value
    return item is not None, item


# =============================================================================
# DO
# =============================================================================


def do_each(source: Iterable[S] | None, action: Callable[[S], object]) -> Iterable[S] | None:
    """
    Выполнение action для каждого присутствующего элемента source.

    Returns:
        source без изменений
    """
    if source is not None:
        for item in source:
            present, value = _unwrap(item)
            if present:
                action(value)

    return source


def do_each_indexed(
    source: Iterable[S] | None,
    action: Callable[[S, int], object],
) -> Iterable[S] | None:
    """
    То же, что do_each, но action получает zero-based индекс элемента.

    Examples:
        >>> do_each_indexed(["a", None, "c"], lambda s, i: print(i, s))
        0 a
        2 c
        ['a', None, 'c']
    """
    if source is not None:
        for index, item in enumerate(source):
            present, value = _unwrap(item)
            if present:
                action(value, index)

    return source


# =============================================================================
# WITH
# =============================================================================


def with_each(source: Iterable[S] | None, convert: Callable[[S], R]) -> Iterator[R | None] | None:
    """
    Ленивая поэлементная конвертация source (один к одному).

    Длина результата равна длине source: на месте отсутствующих
    элементов стоит None. Для source=None возвращается None.

    Examples:
        >>> list(with_each(["a", None, "c"], str.upper))
        ['A', None, 'C']
    """
    if source is None:
        return None

    return (_convert(item, convert) for item in source)


def with_each_indexed(
    source: Iterable[S] | None,
    convert: Callable[[S, int], R],
) -> Iterator[R | None] | None:
    """То же, что with_each, но convert получает zero-based индекс элемента."""
    if source is None:
        return None

    return (_convert(item, convert, index) for index, item in enumerate(source))


def _convert(item: Any, convert: Callable[..., R], *index: int) -> R | None:
    present, value = _unwrap(item)
    if present:
        return convert(value, *index)
    return None


# =============================================================================
# EVENTS
# =============================================================================


def fire_event(
    handlers: Iterable[Callable[[Any, Any], object]] | None,
    sender: Any,
    event_args: Any,
) -> Iterable[Callable[[Any, Any], object]] | None:
    """
    Вызов всех подписчиков события, если список подписчиков не None.

    Подписчики вызываются по порядку; None в списке пропускается.
    Исключение подписчика прерывает рассылку и пробрасывается.

    Returns:
        handlers без изменений
    """
    return do_each(handlers, lambda handler: handler(sender, event_args))
