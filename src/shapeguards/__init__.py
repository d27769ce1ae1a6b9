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

"""Composable runtime type guards for data crossing a trust boundary.

A *guard* is a pure function ``(object) -> bool`` whose ``True`` result narrows
its argument to a more specific type (:class:`typing.TypeGuard`). Guards never
raise and never convert; they only classify.

Primitive guards
----------------
:func:`is_string`, :func:`is_number`, :func:`is_boolean`, :func:`is_true`,
:func:`is_false`, :func:`is_null`, :func:`is_undefined`, :func:`is_nullish`,
:func:`is_function` and :func:`is_object`.

Combinators
-----------
- :func:`has_key` / :func:`has_optional_key`: member presence and shape
- :func:`is_array`: lists and tuples of conforming items
- :func:`is_either2`, :func:`is_either3`, :func:`is_any_of`: unions
- :func:`is_all_of`: intersections
- :func:`is_instance_of`: nominal class membership
- :func:`throwing`: adapt a raising validator into a guard

Assertions
----------
:func:`assert_is` raises :class:`NonConformingValueError` when a guard rejects
its value; :func:`ensure` does the same and returns the narrowed value.

Example::

    from shapeguards import ensure, has_key, is_all_of, is_array, is_number, is_string

    is_point = is_all_of(has_key("x", is_number), has_key("y", is_number))
    is_polyline = is_all_of(
        has_key("label", is_string),
        has_key("points", is_array(is_point)),
    )

    polyline = ensure(json.loads(payload), is_polyline)
"""

from __future__ import annotations

from ._types import UNDEFINED, Guard, Undefined
from .assertions import assert_is, ensure, throwing
from .combinators import (
    has_key,
    has_optional_key,
    is_all_of,
    is_any_of,
    is_array,
    is_either2,
    is_either3,
    is_instance_of,
)
from .errors import NonConformingValueError, ShapeGuardError
from .primitives import (
    is_boolean,
    is_false,
    is_function,
    is_null,
    is_nullish,
    is_number,
    is_object,
    is_string,
    is_true,
    is_undefined,
)

__all__ = [
    "UNDEFINED",
    "Guard",
    "NonConformingValueError",
    "ShapeGuardError",
    "Undefined",
    "assert_is",
    "ensure",
    "has_key",
    "has_optional_key",
    "is_all_of",
    "is_any_of",
    "is_array",
    "is_boolean",
    "is_either2",
    "is_either3",
    "is_false",
    "is_function",
    "is_instance_of",
    "is_null",
    "is_nullish",
    "is_number",
    "is_object",
    "is_string",
    "is_true",
    "is_undefined",
    "throwing",
]
