# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Combinators building new guards from existing ones.

Every combinator validates its arguments eagerly and returns a plain function.
The returned guard keeps references to its children and nothing else, so it
can be shared freely between threads and reused indefinitely::

    is_address = is_all_of(
        has_key("street", is_string),
        has_key("house_number", is_number),
    )
    is_person = is_all_of(
        has_key("first_name", is_string),
        has_optional_key("middle_name", is_string),
        has_key("addresses", is_array(is_address)),
    )

Composite guards are total even over misbehaving children: a child guard that
raises, or returns something other than a ``bool``, is reduced to a plain
``True``/``False`` by :func:`_accepts`. Composite guards are named after the
expression that built them, e.g. ``has_key('street', is_string)``, which keeps
reprs and log records readable.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Final, TypeGuard

from ._types import Guard, guard_name, named_guard
from .primitives import is_object

_ABSENT: Final[object] = object()
_LOOKUP_FAILED: Final[object] = object()


def _require_guard(guard: object, argument: str) -> None:
    if not callable(guard):
        msg = f"{argument} must be a guard callable, got {type(guard).__name__}"
        raise TypeError(msg)


def _require_key(key: object) -> None:
    if not isinstance(key, Hashable):
        msg = f"key must be hashable, got {type(key).__name__}"
        raise TypeError(msg)


def _accepts(guard: Callable[[object], object], value: object) -> bool:
    """Run a child guard, reducing a raise or a non-bool result to a bool."""

    try:
        return bool(guard(value))
    except Exception:  # noqa: BLE001 - composites are total
        return False


def _member(value: object, key: Hashable) -> object:
    """Return the member named ``key`` on ``value``.

    Mappings are searched by key only; other objects by attribute, which
    includes inherited and class-level attributes. Returns ``_ABSENT`` when
    the member does not exist and ``_LOOKUP_FAILED`` when looking it up raised.
    """

    try:
        if issubclass(type(value), Mapping):
            mapping: Mapping[Hashable, object] = value  # pyright: ignore[reportAssignmentType]
            if key in mapping:
                return mapping[key]
            return _ABSENT
        if isinstance(key, str):
            return getattr(value, key, _ABSENT)
    except Exception:  # noqa: BLE001 - guards are total
        return _LOOKUP_FAILED
    return _ABSENT


def has_key[V](key: Hashable, value_guard: Guard[V]) -> Guard[object]:
    """Guard for object-like values exposing ``key`` with a conforming value.

    The value must pass :func:`~shapeguards.is_object` (callables count, so a
    function with attached attributes qualifies), the member must be present
    and ``value_guard`` must accept it.

    The guard narrows only to ``object``: Python's type system cannot express
    "any object with member ``key`` of type ``V``". Read the member after the
    check, or wrap the payload in :func:`~shapeguards.ensure` with a guard for
    the member itself, to obtain a precise static type.

    Args:
        key: Mapping key, or attribute name when ``key`` is a string and the
            value is not a mapping.
        value_guard: Guard the member's value must satisfy.

    Returns:
        A guard over arbitrary values.

    Raises:
        TypeError: If ``key`` is unhashable or ``value_guard`` is not callable.

    Example::

        >>> has_key("a", is_number)({"a": 123})
        True
        >>> has_key("a", is_number)({})
        False
    """

    _require_key(key)
    _require_guard(value_guard, "value_guard")

    def check(value: object) -> TypeGuard[object]:
        if not is_object(value):
            return False
        member = _member(value, key)
        if member is _ABSENT or member is _LOOKUP_FAILED:
            return False
        return _accepts(value_guard, member)

    return named_guard(check, f"has_key({key!r}, {guard_name(value_guard)})")


def has_optional_key[V](key: Hashable, value_guard: Guard[V]) -> Guard[object]:
    """Guard for object-like values where ``key`` is absent or conforms.

    Optionality waives presence only: a member that exists, including one set
    to :data:`~shapeguards.UNDEFINED`, must still satisfy ``value_guard``.
    Like :func:`has_key`, the result narrows only to ``object``.
    """

    _require_key(key)
    _require_guard(value_guard, "value_guard")

    def check(value: object) -> TypeGuard[object]:
        if not is_object(value):
            return False
        member = _member(value, key)
        if member is _ABSENT:
            return True
        if member is _LOOKUP_FAILED:
            return False
        return _accepts(value_guard, member)

    return named_guard(check, f"has_optional_key({key!r}, {guard_name(value_guard)})")


def is_array[T](item_guard: Guard[T]) -> Guard[list[T] | tuple[T, ...]]:
    """Guard for lists and tuples whose items all satisfy ``item_guard``.

    Items are checked left to right and the scan stops at the first failure.
    Strings, mappings, sets and other iterables are not arrays. An empty
    array conforms to any ``item_guard``.

    Args:
        item_guard: Guard every item must satisfy.

    Returns:
        A guard narrowing to ``list[T] | tuple[T, ...]``.
    """

    _require_guard(item_guard, "item_guard")

    def check(value: object) -> TypeGuard[list[T] | tuple[T, ...]]:
        if not issubclass(type(value), list | tuple):
            return False
        items: list[object] | tuple[object, ...] = value  # pyright: ignore[reportAssignmentType]
        return all(_accepts(item_guard, item) for item in items)

    return named_guard(check, f"is_array({guard_name(item_guard)})")


def is_any_of[T](first: Guard[T], *rest: Guard[T]) -> Guard[T]:
    """Guard accepting values that satisfy at least one of the given guards.

    Guards run in argument order and evaluation stops at the first match.

    Args:
        first: The first alternative.
        *rest: Further alternatives, tried in order.

    Returns:
        A guard narrowing to the union of the alternatives.
    """

    guards = (first, *rest)
    for index, guard in enumerate(guards):
        _require_guard(guard, f"guards[{index}]")

    def check(value: object) -> TypeGuard[T]:
        return any(_accepts(guard, value) for guard in guards)

    names = ", ".join(guard_name(guard) for guard in guards)
    return named_guard(check, f"is_any_of({names})")


def is_either2[A, B](guard_a: Guard[A], guard_b: Guard[B]) -> Guard[A | B]:
    """Two-variant form of :func:`is_any_of`, narrowing to ``A | B``."""

    _require_guard(guard_a, "guard_a")
    _require_guard(guard_b, "guard_b")

    def check(value: object) -> TypeGuard[A | B]:
        return _accepts(guard_a, value) or _accepts(guard_b, value)

    return named_guard(
        check, f"is_either2({guard_name(guard_a)}, {guard_name(guard_b)})"
    )


def is_either3[A, B, C](
    guard_a: Guard[A], guard_b: Guard[B], guard_c: Guard[C]
) -> Guard[A | B | C]:
    """Three-variant form of :func:`is_any_of`, narrowing to ``A | B | C``."""

    _require_guard(guard_a, "guard_a")
    _require_guard(guard_b, "guard_b")
    _require_guard(guard_c, "guard_c")

    def check(value: object) -> TypeGuard[A | B | C]:
        return (
            _accepts(guard_a, value)
            or _accepts(guard_b, value)
            or _accepts(guard_c, value)
        )

    names = ", ".join(guard_name(guard) for guard in (guard_a, guard_b, guard_c))
    return named_guard(check, f"is_either3({names})")


def is_all_of[T](first: Guard[T], *rest: Guard[object]) -> Guard[T]:
    """Guard accepting values that satisfy every given guard.

    The result narrows to the type of ``first``; the remaining guards refine
    the shape without changing the static type. Evaluation stops at the first
    rejection.
    """

    guards = (first, *rest)
    for index, guard in enumerate(guards):
        _require_guard(guard, f"guards[{index}]")

    def check(value: object) -> TypeGuard[T]:
        return all(_accepts(guard, value) for guard in guards)

    names = ", ".join(guard_name(guard) for guard in guards)
    return named_guard(check, f"is_all_of({names})")


def is_instance_of[T](type_: type[T]) -> Guard[T]:
    """Guard for instances of ``type_`` or of any of its subclasses.

    Args:
        type_: The class to check against.

    Returns:
        A guard narrowing to ``T``.

    Raises:
        TypeError: If ``type_`` is not a class.

    Example::

        >>> class Base: ...
        >>> class Derived(Base): ...
        >>> is_instance_of(Base)(Derived())
        True
        >>> is_instance_of(Base)("text")
        False
    """

    if not isinstance(type_, type):
        msg = f"type_ must be a class, got {type(type_).__name__}"
        raise TypeError(msg)

    def check(value: object) -> TypeGuard[T]:
        try:
            return isinstance(value, type_)
        except Exception:  # noqa: BLE001 - __class__ or __instancecheck__ may raise
            return False

    return named_guard(check, f"is_instance_of({type_.__qualname__})")


__all__ = [
    "has_key",
    "has_optional_key",
    "is_all_of",
    "is_any_of",
    "is_array",
    "is_either2",
    "is_either3",
    "is_instance_of",
]
