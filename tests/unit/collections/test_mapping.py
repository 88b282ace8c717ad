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

"""Unit tests for Collections Mapping."""

from __future__ import annotations

import pytest

from nullseq import collections as seq
from nullseq.collections import EMPTY_LIST

pytestmark = pytest.mark.unit


def test_map_preserves_length_and_order() -> None:
    assert seq.map([2, 4], lambda value: value * 10) == [20, 40]
    assert seq.map(["a", "bb", "ccc"], len) == [1, 2, 3]


def test_map_keeps_none_results() -> None:
    assert seq.map([1, 2], lambda _value: None) == [None, None]


def test_map_missing_input_returns_shared_empty() -> None:
    assert seq.map(None, str) is EMPTY_LIST
    assert seq.map([], str) is EMPTY_LIST


def test_map_returns_new_list() -> None:
    source = [1, 2, 3]
    result = seq.map(source, lambda value: value)
    assert result == source
    assert result is not source


def test_map_not_null_drops_none_results() -> None:
    result = seq.map_not_null([1, 2, 3], lambda value: None if value == 2 else value)
    assert result == [1, 3]


def test_map_not_null_all_none_results_is_empty() -> None:
    result = seq.map_not_null([1, 2, 3], lambda _value: None)
    assert result == []
    assert None not in result


def test_map_not_null_keeps_falsy_values() -> None:
    assert seq.map_not_null([0, 1, 2], lambda value: value - 1 if value else "") == ["", 0, 1]


def test_map_not_null_missing_input_returns_shared_empty() -> None:
    assert seq.map_not_null(None, str) is EMPTY_LIST
    assert seq.map_not_null([], str) is EMPTY_LIST


def test_map_not_null_calls_transform_once_per_element() -> None:
    calls: list[int] = []

    def _track(value: int) -> int | None:
        calls.append(value)
        return value if value > 1 else None

    assert seq.map_not_null([1, 2, 3], _track) == [2, 3]
    assert calls == [1, 2, 3]
