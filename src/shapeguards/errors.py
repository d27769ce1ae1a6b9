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

"""Base exception hierarchy for :mod:`shapeguards`."""

from __future__ import annotations


class ShapeGuardError(Exception):
    """Base class for all shapeguards exceptions.

    Guards themselves never raise; exceptions from this hierarchy come from the
    fail-fast entry points (:func:`shapeguards.assert_is` and
    :func:`shapeguards.ensure`).

    Example:
        Catch any shapeguards-specific error::

            try:
                config = ensure(payload, is_config)
            except ShapeGuardError:
                return default_config()
    """


class NonConformingValueError(ShapeGuardError, TypeError):
    """Raised when a value does not conform to the shape a guard describes.

    The error intentionally carries no field path or expected/actual detail.
    Callers needing to know *which* member failed should assert each member
    separately::

        def address_or_raise(value: object) -> None:
            assert_is(value, has_key("street", is_string))
            assert_is(value, has_key("house_number", is_number))

    Note:
        This exception also inherits from ``TypeError``, so it can be caught
        by handlers expecting standard type errors.
    """

    def __init__(self, message: str = "Value did not conform") -> None:
        super().__init__(message)


__all__ = [
    "NonConformingValueError",
    "ShapeGuardError",
]
