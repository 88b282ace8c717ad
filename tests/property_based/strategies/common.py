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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "int_lists",
    "mixed_objects",
    "nullable_int_lists",
    "thresholds",
]


def int_lists(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy that yields short lists of small integers.

    Small values keep duplicates frequent, which matters for ``remove``.
    """
    return st.lists(st.integers(min_value=-20, max_value=20), max_size=max_size)


def nullable_int_lists(max_size: int = 30) -> st.SearchStrategy[list[int] | None]:
    """Return a strategy that yields integer lists or ``None``."""
    return st.one_of(st.none(), int_lists(max_size=max_size))


def thresholds() -> st.SearchStrategy[int]:
    """Strategy for comparison pivots used to build predicates.

    Returns:
        Hypothesis strategy producing integers overlapping the list values.
    """
    return st.integers(min_value=-25, max_value=25)


def mixed_objects(max_size: int = 20) -> st.SearchStrategy[list[object]]:
    """Lists of heterogeneous values for type-filtering checks."""
    element = st.one_of(st.integers(), st.text(max_size=5), st.floats(allow_nan=False), st.none())
    return st.lists(element, max_size=max_size)
