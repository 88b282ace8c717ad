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

"""Public collections helpers (stable shim over internal implementations)."""

from __future__ import annotations

from nullseq._internal.collection_utils import (
    add,
    any,  # noqa: A004
    copy_of,
    empty_if_null,
    filter,  # noqa: A004
    filter_by_type,
    find,
    is_empty,
    map,  # noqa: A004
    map_not_null,
    remove,
    size,
)
from nullseq._internal.empty import EMPTY_LIST, EmptyList, is_shared_empty

__all__ = [
    "EMPTY_LIST",
    "EmptyList",
    "add",
    "any",
    "copy_of",
    "empty_if_null",
    "filter",
    "filter_by_type",
    "find",
    "is_empty",
    "is_shared_empty",
    "map",
    "map_not_null",
    "remove",
    "size",
]
