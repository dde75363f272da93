"""
Тесты для модуля Null Propagation (objects)

Проверяет:
1. do / do_select: побочные действия только для присутствующего source
2. with_ / return_: конвертация и default
3. if_ / if_not / recover / of_type
4. Проверки присутствия
5. Прозрачность для исключений callback
"""

import pytest

from src.monads.objects import (
    any_,
    do,
    do_select,
    if_,
    if_not,
    is_not_null,
    is_null,
    of_type,
    recover,
    return_,
    with_,
)


class CallCounter:
    """Callback-заглушка, считающая вызовы."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        return self.result

    @property
    def count(self) -> int:
        return len(self.calls)


def explode(*args):
    raise AssertionError("callback must not be invoked")


# =============================================================================
# DO
# =============================================================================


class TestDo:
    """Тесты для do"""

    def test_action_invoked_for_present_source(self) -> None:
        """action получает source"""
        action = CallCounter()
        assert do("value", action) == "value"
        assert action.calls == [("value",)]

    def test_action_skipped_for_none(self) -> None:
        """Для None action не вызывается"""
        assert do(None, explode) is None

    def test_absent_action_invoked_only_for_none(self) -> None:
        """absent_action вызывается только для None"""
        absent = CallCounter()
        do(None, explode, absent)
        assert absent.count == 1

        absent = CallCounter()
        do("value", CallCounter(), absent)
        assert absent.count == 0

    def test_falsy_values_are_present(self) -> None:
        """0, "" и [] считаются присутствующими"""
        action = CallCounter()
        for value in (0, "", [], False):
            do(value, action)
        assert action.count == 4

    def test_source_returned_unchanged(self) -> None:
        """Возвращается тот же объект"""
        source = ["a"]
        assert do(source, lambda s: s.append("b")) is source
        assert source == ["a", "b"]


class TestDoSelect:
    """Тесты для do_select"""

    def test_returns_action_result(self) -> None:
        assert do_select("abc", len) == 3

    def test_none_returns_none_and_calls_absent_action(self) -> None:
        absent = CallCounter()
        assert do_select(None, explode, absent) is None
        assert absent.count == 1

    def test_none_without_absent_action(self) -> None:
        """Без absent_action ничего не происходит"""
        assert do_select(None, explode) is None


# =============================================================================
# WITH / RETURN
# =============================================================================


class TestWith:
    """Тесты для with_"""

    def test_converts_present_source(self) -> None:
        assert with_("x", lambda s: s + "y") == "xy"

    def test_none_returns_none_without_invoking_convert(self) -> None:
        """convert, который бы упал, не вызывается"""
        assert with_(None, explode) is None

    def test_convert_may_return_none(self) -> None:
        assert with_("x", lambda s: None) is None

    def test_chained_conversion(self) -> None:
        """Цепочка with_ обрывается на первом None"""
        data = {"user": {"name": None}}
        name = with_(with_(data.get("user"), lambda u: u.get("name")), str.upper)
        assert name is None


class TestReturn:
    """Тесты для return_"""

    def test_present_returns_converted(self) -> None:
        assert return_(5, lambda x: x * 2, -1) == 10

    def test_none_returns_default(self) -> None:
        default = object()
        assert return_(None, explode, default) is default

    def test_converted_none_is_not_replaced_by_default(self) -> None:
        """default используется только для отсутствующего source"""
        assert return_("x", lambda s: None, "d") is None


# =============================================================================
# IF / IF_NOT
# =============================================================================


class TestIf:
    """Тесты для if_ и if_not"""

    def test_if_true_returns_source(self) -> None:
        assert if_(5, lambda x: x > 3) == 5

    def test_if_false_returns_none(self) -> None:
        assert if_(5, lambda x: x > 6) is None

    def test_if_none_never_evaluates_predicate(self) -> None:
        assert if_(None, explode) is None

    def test_if_not_false_returns_source(self) -> None:
        assert if_not(5, lambda x: x > 6) == 5

    def test_if_not_true_returns_none(self) -> None:
        assert if_not(5, lambda x: x > 3) is None

    def test_if_not_none_never_evaluates_predicate(self) -> None:
        assert if_not(None, explode) is None

    def test_predicate_called_once(self) -> None:
        predicate = CallCounter(result=True)
        if_("x", predicate)
        assert predicate.count == 1


# =============================================================================
# RECOVER / OF_TYPE
# =============================================================================


class TestRecover:
    """Тесты для recover"""

    def test_none_invokes_supplier_once(self) -> None:
        supplier = CallCounter(result=10)
        assert recover(None, supplier) == 10
        assert supplier.count == 1

    def test_present_never_invokes_supplier(self) -> None:
        assert recover("x", explode) == "x"

    def test_zero_is_not_recovered(self) -> None:
        assert recover(0, lambda: 10) == 0


class TestOfType:
    """Тесты для of_type"""

    def test_compatible_type(self) -> None:
        assert of_type("abc", str) == "abc"

    def test_incompatible_type_returns_none(self) -> None:
        assert of_type("abc", int) is None

    def test_subclass_is_compatible(self) -> None:
        """bool является подклассом int"""
        assert of_type(True, int) is True

    def test_none_returns_none(self) -> None:
        assert of_type(None, object) is None

    def test_tuple_of_types(self) -> None:
        assert of_type(1.5, (int, float)) == 1.5


# =============================================================================
# ПРОВЕРКИ ПРИСУТСТВИЯ
# =============================================================================


class TestPresence:
    """Тесты для is_null / is_not_null / any_"""

    @pytest.mark.parametrize("value", [0, "", [], False, object()])
    def test_present_values(self, value) -> None:
        assert is_not_null(value)
        assert any_(value)
        assert not is_null(value)

    def test_none(self) -> None:
        assert is_null(None)
        assert not is_not_null(None)
        assert not any_(None)


# =============================================================================
# ПРОЗРАЧНОСТЬ ДЛЯ ИСКЛЮЧЕНИЙ
# =============================================================================


class TestExceptionTransparency:
    """Операции без Try не перехватывают исключения callback"""

    def test_do_propagates(self) -> None:
        with pytest.raises(ZeroDivisionError):
            do(1, lambda x: x / 0)

    def test_with_propagates(self) -> None:
        with pytest.raises(KeyError):
            with_({}, lambda d: d["missing"])

    def test_if_propagates(self) -> None:
        with pytest.raises(TypeError):
            if_("x", lambda s: s > 1)

    def test_recover_propagates(self) -> None:
        def supplier():
            raise RuntimeError("no default")

        with pytest.raises(RuntimeError, match="no default"):
            recover(None, supplier)
