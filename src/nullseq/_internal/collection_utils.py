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

"""Null-tolerant helper functions over ordered sequences.

Unless a function says otherwise, ``None`` in place of a sequence is treated
exactly like an empty sequence. Results that are logically empty and do not
need a fresh list are the shared :data:`~nullseq._internal.empty.EMPTY_LIST`,
which must not be mutated.

``filter``, ``map`` and ``any`` deliberately share their names with the
builtins they generalise; call them module-qualified
(``collections.filter(...)``) or import them under an alias.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar, cast

from nullseq.core.model_types import LogComponent

from .empty import EMPTY_LIST, is_shared_empty
from .exceptions import NullseqTypeError
from .logging_utils import structured_extra

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence, Sized
    from types import UnionType

T = TypeVar("T")
In = TypeVar("In")
Out = TypeVar("Out")

logger: logging.Logger = logging.getLogger("nullseq.collections")


def _empty() -> list[T]:
    return cast("list[T]", EMPTY_LIST)


def is_empty(items: Sized | None) -> bool:
    """Return ``True`` when ``items`` is ``None`` or has no elements."""
    return items is None or len(items) == 0


def size(items: Sized | None) -> int:
    """Return the number of elements in ``items``, or ``0`` when it is ``None``."""
    return len(items) if items is not None else 0


def empty_if_null(items: Sequence[T] | None) -> Sequence[T]:
    """Return ``items`` itself, or the shared empty list when it is ``None``.

    This guarantees a non-``None`` sequence without paying for an allocation.
    """
    return _empty() if items is None else items


def filter(  # noqa: A001
    items: Sequence[T] | None,
    predicate: Callable[[T], bool],
) -> list[T]:
    """Return the elements of ``items`` that satisfy ``predicate``.

    Elements keep their original relative order. The result list is only
    allocated once the first match is found.

    Args:
        items: Sequence to scan, or ``None``.
        predicate: Condition evaluated for every element in index order.

    Returns:
        A new list of the matching elements, or the shared empty list when
        nothing matches.
    """
    result: list[T] | None = None
    for item in empty_if_null(items):
        if predicate(item):
            if result is None:
                result = []
            result.append(item)
    return result if result is not None else _empty()


def filter_by_type(
    items: Sequence[object] | None,
    kind: type[T] | tuple[type[T], ...] | UnionType,
) -> list[T]:
    """Return the elements of ``items`` that are instances of ``kind``.

    Args:
        items: Sequence of arbitrary objects, or ``None``.
        kind: Anything ``isinstance`` accepts as its second argument: a class,
            a union such as ``int | str``, or a (nested) tuple of these.

    Returns:
        A new list of the matching elements, or the shared empty list when
        nothing matches.

    Raises:
        NullseqTypeError: If ``isinstance`` rejects ``kind``.
    """
    try:
        _ = isinstance(None, kind)
    except TypeError as exc:
        message = f"filter_by_type() expects a class, union or tuple of classes, got {type(kind).__name__}"
        raise NullseqTypeError(message) from exc
    if is_empty(items):
        return _empty()
    return cast("list[T]", filter(items, lambda item: isinstance(item, kind)))


def map(  # noqa: A001
    items: Sequence[In] | None,
    transform: Callable[[In], Out],
) -> list[Out]:
    """Return ``[transform(item) for item in items]``.

    The result has the same length and order as ``items``. ``None`` or an
    empty sequence yields the shared empty list.
    """
    if is_empty(items):
        return _empty()
    return [transform(item) for item in cast("Sequence[In]", items)]


def map_not_null(
    items: Sequence[In] | None,
    transform: Callable[[In], Out | None],
) -> list[Out]:
    """Apply ``transform`` to every element and keep the non-``None`` results.

    Equivalent to ``filter(map(items, transform), lambda v: v is not None)``
    without materialising the intermediate mapped list.

    Args:
        items: Sequence to transform, or ``None``.
        transform: Function applied to every element in index order.

    Returns:
        A list of the non-``None`` results in input order. ``None`` or an
        empty input yields the shared empty list.
    """
    if is_empty(items):
        return _empty()
    result: list[Out] = []
    for item in cast("Sequence[In]", items):
        transformed = transform(item)
        if transformed is not None:
            result.append(transformed)
    return result


def find(
    items: Sequence[T] | None,
    predicate: Callable[[T], bool],
) -> T | None:
    """Return the first element of ``items`` satisfying ``predicate``.

    Scanning stops at the first match. Returns ``None`` when no element
    matches or ``items`` is ``None``.
    """
    if is_empty(items):
        return None
    for item in cast("Sequence[T]", items):
        if predicate(item):
            return item
    return None


def any(  # noqa: A001
    items: Sequence[T] | None,
    predicate: Callable[[T], bool],
) -> bool:
    """Return whether some element of ``items`` satisfies ``predicate``.

    Defined as ``find(items, predicate) is not None``, so a matching ``None``
    element does not count.
    """
    return find(items, predicate) is not None


def add(items: list[T] | None, value: T) -> list[T]:
    """Append ``value`` to ``items`` and return the list.

    ``None`` and the shared empty list are replaced by a freshly allocated
    list first; any other list is mutated in place.

    Args:
        items: Destination list, ``None``, or the shared empty list.
        value: Element to append.

    Returns:
        The list that now ends with ``value``.
    """
    if items is None or is_shared_empty(items):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Allocating list for add()",
                extra=structured_extra(
                    component=LogComponent.COLLECTIONS,
                    operation="add",
                    details={"source": "none" if items is None else "shared_empty"},
                ),
            )
        items = []
    items.append(value)
    return items


def remove(items: list[T] | None, value: T) -> list[T]:
    """Remove the first element equal to ``value`` from ``items`` in place.

    Matching follows ``list.remove``: identity first, then ``==``, so the
    very same ``nan`` object is found even though it is unequal to itself.
    A missing value is not an error. ``None`` or an empty list is returned
    as ``empty_if_null(items)`` without any change.

    Args:
        items: List to modify, or ``None``.
        value: Element to remove.

    Returns:
        The same list (or the shared empty list for ``None``).
    """
    if is_empty(items):
        return cast("list[T]", empty_if_null(items))
    target = cast("list[T]", items)
    for index, item in enumerate(target):
        if item is value or item == value:
            del target[index]
            return target
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "remove() found no matching element",
            extra=structured_extra(
                component=LogComponent.COLLECTIONS,
                operation="remove",
                size=len(target),
            ),
        )
    return target


def copy_of(items: Sequence[T] | None) -> list[T]:
    """Return a list that is not affected by later mutations of ``items``.

    ``None`` or an empty input yields the shared empty list; anything else
    is copied into a new list with the same order.
    """
    if is_empty(items):
        return _empty()
    return list(cast("Sequence[T]", items))


__all__ = [
    "add",
    "any",
    "copy_of",
    "empty_if_null",
    "filter",
    "filter_by_type",
    "find",
    "is_empty",
    "map",
    "map_not_null",
    "remove",
    "size",
]
