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

"""Bridges between guards and raising validators.

:func:`throwing` turns a "return or raise" validator into a guard, so nested
validators compose with :func:`~shapeguards.is_array` and friends.
:func:`assert_is` and :func:`ensure` go the other way and turn a guard into a
fail-fast check. They are the only functions in the package that raise on
non-conforming input.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeGuard

from ._types import Guard, guard_name, named_guard
from .errors import NonConformingValueError
from .logging import get_logger

logger = get_logger(__name__)


def throwing[T](
    validating_function: Callable[[object], T],
    *,
    catch: tuple[type[Exception], ...] = (Exception,),
) -> Guard[T]:
    """Adapt a function that returns on success and raises on failure.

    The guard reports ``True`` when ``validating_function`` returns, whatever
    it returns, and ``False`` when it raises one of ``catch``. The raised
    exception is discarded. Exceptions outside ``catch`` propagate, and so do
    ``KeyboardInterrupt`` and ``SystemExit`` because they never derive from
    :class:`Exception`.

    Pass ``catch=(NonConformingValueError,)`` to treat only failed assertions
    as non-conformance and let programming errors surface. Note that a
    composite guard wrapping the result still reduces such an error to
    ``False``.

    Args:
        validating_function: Callable that raises when its argument does not
            conform. Its return value is ignored.
        catch: Exception types converted to ``False``.

    Returns:
        A guard narrowing to the validator's return type.

    Raises:
        TypeError: If ``validating_function`` is not callable or ``catch`` is
            not a non-empty tuple of :class:`Exception` subclasses.

    Example::

        def address_or_raise(value: object) -> object:
            assert_is(value, has_key("street", is_string))
            assert_is(value, has_key("house_number", is_number))
            return value

        is_addresses = is_array(throwing(address_or_raise))
    """

    if not callable(validating_function):
        msg = f"validating_function must be callable, got {type(validating_function).__name__}"
        raise TypeError(msg)
    if not catch or not all(
        isinstance(kind, type) and issubclass(kind, Exception) for kind in catch
    ):
        msg = "catch must be a non-empty tuple of Exception subclasses"
        raise TypeError(msg)

    def check(value: object) -> TypeGuard[T]:
        try:
            validating_function(value)
        except catch:
            return False
        return True

    return named_guard(check, f"throwing({guard_name(validating_function)})")


def assert_is[T](value: object, guard: Guard[T]) -> None:
    """Raise :class:`NonConformingValueError` unless ``guard`` accepts ``value``.

    Returns ``None`` on success. Python has no "asserts value is T" return
    annotation, so use :func:`ensure` when the narrowed type is needed
    statically.

    Args:
        value: The value to check.
        guard: The guard describing the expected shape.

    Raises:
        NonConformingValueError: If ``guard`` rejects ``value``.
    """

    if not guard(value):
        _fail(value, guard)


def ensure[T](value: object, guard: Guard[T]) -> T:
    """Return ``value`` typed as the guard's shape, raising when it does not conform.

    Args:
        value: The value to check.
        guard: The guard describing the expected shape.

    Returns:
        ``value`` itself, typed as ``T``.

    Raises:
        NonConformingValueError: If ``guard`` rejects ``value``.

    Example::

        port = ensure(config.get("port"), is_number)
    """

    if guard(value):
        return value
    _fail(value, guard)


def _fail(value: object, guard: Callable[..., object]) -> NoReturn:
    logger.debug(
        "Value did not conform.",
        event="shapeguards.assert.failed",
        context={"guard": guard_name(guard), "value_type": type(value).__name__},
    )
    raise NonConformingValueError()


__all__ = [
    "assert_is",
    "ensure",
    "throwing",
]
