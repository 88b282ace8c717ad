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

"""Shared immutable empty list returned by the null-tolerant helpers.

Every helper that produces a logically empty result without allocating hands
back the same :data:`EMPTY_LIST` instance. It compares equal to ``[]`` and
supports all read operations of a ``list``, but every structural mutation
raises :class:`~nullseq._internal.exceptions.ImmutableSequenceError` and
leaves it untouched. Callers that need a mutable list go through
:func:`nullseq.collections.add` or take an explicit copy (``list(result)`` or
``result.copy()``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, NoReturn

from nullseq.compat import override

from .exceptions import ImmutableSequenceError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import SupportsIndex

_INSTANCE: EmptyList | None = None


def _reject(operation: str) -> NoReturn:
    message = f"EMPTY_LIST is immutable; '{operation}' is not supported"
    raise ImmutableSequenceError(message)


class EmptyList(list[Any]):
    """Immutable, process-wide empty ``list``.

    Only one instance ever exists; ``EmptyList()`` returns it. Copying and
    pickling preserve the identity.
    """

    __slots__ = ()

    def __new__(cls, *args: object) -> EmptyList:
        global _INSTANCE  # noqa: PLW0603
        if args:
            _reject("__init__")
        if _INSTANCE is None:
            _INSTANCE = super().__new__(cls)
        return _INSTANCE

    def __init__(self, *args: object) -> None:
        # list.__init__ would (re)populate the shared instance.
        if args:
            _reject("__init__")

    @override
    def __repr__(self) -> str:
        return "EmptyList()"

    def __copy__(self) -> EmptyList:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> EmptyList:
        return self

    @override
    def __reduce__(self) -> tuple[type[EmptyList], tuple[()]]:
        return (EmptyList, ())

    @override
    def append(self, value: object, /) -> NoReturn:
        _reject("append")

    @override
    def extend(self, values: Iterable[object], /) -> NoReturn:
        _reject("extend")

    @override
    def insert(self, index: SupportsIndex, value: object, /) -> NoReturn:
        _reject("insert")

    @override
    def remove(self, value: object, /) -> NoReturn:
        _reject("remove")

    @override
    def pop(self, index: SupportsIndex = -1, /) -> NoReturn:
        _reject("pop")

    @override
    def clear(self) -> NoReturn:
        _reject("clear")

    @override
    def __setitem__(self, index: Any, value: Any, /) -> NoReturn:  # type: ignore[override]
        _reject("__setitem__")

    @override
    def __delitem__(self, index: SupportsIndex | slice, /) -> NoReturn:
        _reject("__delitem__")

    @override
    def __iadd__(self, values: Iterable[object], /) -> NoReturn:  # type: ignore[misc]
        _reject("__iadd__")

    @override
    def __imul__(self, count: SupportsIndex, /) -> NoReturn:  # type: ignore[misc]
        _reject("__imul__")


EMPTY_LIST: Final[EmptyList] = EmptyList()


def is_shared_empty(value: object) -> bool:
    """Return whether ``value`` is the shared :data:`EMPTY_LIST` instance."""
    return value is EMPTY_LIST


__all__ = ["EMPTY_LIST", "EmptyList", "is_shared_empty"]
