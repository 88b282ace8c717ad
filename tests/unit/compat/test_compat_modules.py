# Copyright 2025 CrownOps Engineering
#
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

"""Runtime tests for the ``nullseq.compat`` helpers."""

from __future__ import annotations

import datetime as _dt

import pytest

from nullseq.compat import UTC, StrEnum, TypedDict, override

pytestmark = pytest.mark.unit


class Colour(StrEnum):
    """Sample enum used to validate StrEnum behaviour."""

    RED = "red"
    BLUE = "blue"


class _Payload(TypedDict, total=False):
    name: str


class _Base:
    def describe(self) -> str:
        return "base"


class _Child(_Base):
    @override
    def describe(self) -> str:
        return "child"


def test_str_enum_behaves_like_string() -> None:
    assert str(Colour.RED) == "red"
    assert Colour("blue") is Colour.BLUE
    assert Colour.RED == "red"


def test_utc_is_zero_offset() -> None:
    assert UTC.utcoffset(None) == _dt.timedelta(0)


def test_typing_helpers_are_usable_at_runtime() -> None:
    payload: _Payload = {"name": "x"}
    assert payload["name"] == "x"
    assert _Child().describe() == "child"
