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

"""Leaf guards testing a single runtime classification.

Each guard inspects exactly one intrinsic property of its argument and never
raises. Values that are merely *convertible* to a classification are rejected:
``b"text"`` is not a string, ``Decimal("1")`` is not a number and ``1`` is not
``True``.

Classification goes through ``type(value)`` rather than :func:`isinstance`.
``isinstance`` consults ``value.__class__``, which an arbitrary object may
override with a raising property; the real type cannot lie or raise.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal, TypeGuard

from ._types import PRIMITIVE_TYPES, UNDEFINED, Undefined


def is_string(value: object) -> TypeGuard[str]:
    """Type guard for :class:`str` values, subclasses included.

    Args:
        value: The value to check.

    Returns:
        True if value is a string, False for ``bytes`` and everything else.
    """

    return issubclass(type(value), str)


def is_number(value: object) -> TypeGuard[int | float]:
    """Type guard for ``int`` and ``float`` values other than booleans.

    ``bool`` subclasses ``int`` in Python but is classified separately, so
    ``is_number(True)`` is ``False``.

    Args:
        value: The value to check.

    Returns:
        True if value is an integer or a float, False otherwise.
    """

    value_type = type(value)
    return issubclass(value_type, int | float) and not issubclass(value_type, bool)


def is_boolean(value: object) -> TypeGuard[bool]:
    """Return ``True`` for ``True`` and ``False``."""

    return issubclass(type(value), bool)


def is_true(value: object) -> TypeGuard[Literal[True]]:
    """Return ``True`` only for the ``True`` singleton (``1`` is rejected)."""

    return value is True


def is_false(value: object) -> TypeGuard[Literal[False]]:
    """Return ``True`` only for the ``False`` singleton (``0`` is rejected)."""

    return value is False


def is_null(value: object) -> TypeGuard[None]:
    """Return ``True`` for ``None``."""

    return value is None


def is_undefined(value: object) -> TypeGuard[Undefined]:
    """Return ``True`` for :data:`~shapeguards.UNDEFINED` only."""

    return value is UNDEFINED


def is_nullish(value: object) -> TypeGuard[Undefined | None]:
    return value is None or value is UNDEFINED


def is_function(value: object) -> TypeGuard[Callable[..., object]]:
    """Return ``True`` for any callable, classes included."""

    return callable(value)


def is_object(value: object) -> TypeGuard[object]:
    """Type guard for composite values able to carry members.

    Nullish values and the scalar types in
    :data:`~shapeguards._types.PRIMITIVE_TYPES` are rejected; containers,
    instances, functions and classes are accepted.

    Args:
        value: The value to check.

    Returns:
        True if value is neither nullish nor a scalar, False otherwise.

    Example::

        >>> is_object({"a": 1}), is_object(len), is_object("text")
        (True, True, False)
    """

    if value is None or value is UNDEFINED:
        return False
    return not issubclass(type(value), PRIMITIVE_TYPES)


__all__ = [
    "is_boolean",
    "is_false",
    "is_function",
    "is_null",
    "is_nullish",
    "is_number",
    "is_object",
    "is_string",
    "is_true",
    "is_undefined",
]
