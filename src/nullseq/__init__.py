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

"""nullseq - null-tolerant helpers for ordered sequences.

Filtering, mapping, searching, in-place add/remove and defensive copying over
lists that may be ``None``. ``None`` is treated as an empty sequence, and
empty results share one immutable :data:`EMPTY_LIST` instead of allocating.

Typical use keeps the module qualifier, since ``filter``, ``map`` and ``any``
mirror builtin names::

    from nullseq import collections as seq

    evens = seq.filter(maybe_numbers, lambda n: n % 2 == 0)
"""

from __future__ import annotations

from nullseq._internal.logging_utils import configure_logging

from .collections import (
    EMPTY_LIST,
    EmptyList,
    add,
    any,  # noqa: A004
    copy_of,
    empty_if_null,
    filter,  # noqa: A004
    filter_by_type,
    find,
    is_empty,
    is_shared_empty,
    map,  # noqa: A004
    map_not_null,
    remove,
    size,
)
from .exceptions import (
    ImmutableSequenceError,
    NullseqError,
    NullseqTypeError,
    error_code_for,
)

__all__ = [
    "EMPTY_LIST",
    "EmptyList",
    "ImmutableSequenceError",
    "NullseqError",
    "NullseqTypeError",
    "__version__",
    "add",
    "any",
    "configure_logging",
    "copy_of",
    "empty_if_null",
    "error_code_for",
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

__version__ = "0.1.0"
