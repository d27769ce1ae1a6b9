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

"""Shared typing helpers for :mod:`shapeguards`."""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar, Final, TypeGuard, final, override

type Guard[T] = Callable[[object], TypeGuard[T]]
"""A total, pure predicate that narrows its argument to ``T`` on success."""


@final
class Undefined:
    """Singleton marking a member that is present but explicitly undefined.

    ``None`` is a value in its own right (JSON ``null``); ``UNDEFINED`` models
    the separate "present, but without a value" state that some payloads carry.
    Only one instance ever exists, so identity comparison is sufficient::

        payload = {"middle_name": UNDEFINED}
        assert payload["middle_name"] is UNDEFINED
    """

    __slots__ = ()
    _instance: ClassVar[Undefined | None] = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @override
    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Undefined:
        return self

    @override
    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final[Undefined] = Undefined()

PRIMITIVE_TYPES: Final[tuple[type[object], ...]] = (
    str,
    bytes,
    bytearray,
    int,
    float,
    complex,
    bool,
)
"""Scalar types never treated as carriers of members."""


def guard_name(guard: Callable[..., object]) -> str:
    """Return a readable name for ``guard`` suitable for reprs and log context."""

    return getattr(guard, "__name__", None) or repr(guard)


def named_guard[F: Callable[..., object]](check: F, name: str) -> F:
    """Give ``check`` the readable ``name`` of the expression that built it."""

    check.__name__ = name
    check.__qualname__ = name
    return check


__all__ = [
    "PRIMITIVE_TYPES",
    "UNDEFINED",
    "Guard",
    "Undefined",
    "guard_name",
    "named_guard",
]
