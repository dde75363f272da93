"""
Monads — безопасная работа со значениями, которые могут отсутствовать

Свободные функции null propagation: callback вызывается только для
присутствующего значения, а Try-варианты перехватывают ошибки выборочно.
"""

# Outcome
from src.monads.outcome import (
    Outcome,
    accepts_failure,
    catch,
    log_failure,
)

# Objects (None = отсутствие)
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
    try_do,
    try_with,
    with_,
)

# Nullable (явный флаг присутствия)
from src.monads.nullable import (
    Nullable,
    nullable_do,
    nullable_if,
    nullable_if_not,
    nullable_is_not_null,
    nullable_is_null,
    nullable_recover,
    nullable_return,
    nullable_try_do,
    nullable_try_with,
    nullable_with,
)

# Collections
from src.monads.iterables import (
    do_each,
    do_each_indexed,
    fire_event,
    with_each,
    with_each_indexed,
)
from src.monads.mappings import do_items, return_key, with_key
from src.monads.sequences import at

# Argument checks & actions
from src.monads.argument_check import (
    ArgumentNullError,
    check,
    check_null,
    check_null_raise,
    check_null_with_default,
    check_with_default,
)
from src.monads.actions import execute

__all__ = [
    # Outcome
    "Outcome",
    "accepts_failure",
    "catch",
    "log_failure",
    # Objects
    "any_",
    "do",
    "do_select",
    "if_",
    "if_not",
    "is_not_null",
    "is_null",
    "of_type",
    "recover",
    "return_",
    "try_do",
    "try_with",
    "with_",
    # Nullable
    "Nullable",
    "nullable_do",
    "nullable_if",
    "nullable_if_not",
    "nullable_is_not_null",
    "nullable_is_null",
    "nullable_recover",
    "nullable_return",
    "nullable_try_do",
    "nullable_try_with",
    "nullable_with",
    # Collections
    "do_each",
    "do_each_indexed",
    "fire_event",
    "with_each",
    "with_each_indexed",
    "do_items",
    "return_key",
    "with_key",
    "at",
    # Argument checks
    "ArgumentNullError",
    "check",
    "check_null",
    "check_null_raise",
    "check_null_with_default",
    "check_with_default",
    # Actions
    "execute",
]
