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

from __future__ import annotations

from collections import OrderedDict
from decimal import Decimal
from types import MappingProxyType, SimpleNamespace

import pytest

from shapeguards import UNDEFINED


class ExplodingAttributes:
    """Object whose every attribute lookup raises a non-AttributeError."""

    def __getattr__(self, name: str) -> object:
        raise RuntimeError(f"lookup of {name!r} exploded")


class ExplodingMapping(dict[str, object]):
    """Mapping whose membership test raises."""

    def __contains__(self, key: object) -> bool:
        raise RuntimeError("membership exploded")


class LyingClass:
    """Object whose ``__class__`` attribute raises when read."""

    @property
    def __class__(self) -> type:  # type: ignore[override]
        raise RuntimeError("__class__ exploded")


def _cyclic_list() -> list[object]:
    items: list[object] = [1]
    items.append(items)
    return items


def _cyclic_dict() -> dict[str, object]:
    mapping: dict[str, object] = {"a": 1}
    mapping["self"] = mapping
    return mapping


def _function_with_attribute() -> object:
    def carrier() -> None:
        return None

    carrier.a = 123  # type: ignore[attr-defined]
    return carrier


@pytest.fixture
def adversarial_values() -> list[object]:
    """Values every guard must classify without raising."""

    return [
        None,
        UNDEFINED,
        True,
        False,
        0,
        1,
        -3.5,
        float("nan"),
        complex(1, 2),
        Decimal("1.5"),
        "",
        "text",
        b"bytes",
        bytearray(b"buf"),
        [],
        ["x", 1],
        (),
        (1, 2),
        {},
        {"a": 1},
        OrderedDict(a=1),
        MappingProxyType({"a": 1}),
        {1, 2},
        frozenset(),
        SimpleNamespace(a=1),
        object(),
        object,
        len,
        lambda value: value,
        _function_with_attribute(),
        iter([1, 2]),
        range(3),
        _cyclic_list(),
        _cyclic_dict(),
        ExplodingAttributes(),
        ExplodingMapping(a=1),
        LyingClass(),
    ]
