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

"""Unit tests for Misc Internal Package."""

from __future__ import annotations

import importlib

import pytest

import nullseq
import nullseq._internal as internal
from nullseq import collections as public_collections

pytestmark = pytest.mark.unit


def test_internal_lazy_imports_collection_utils() -> None:
    module = internal.collection_utils
    assert module is internal.collection_utils
    assert importlib.import_module("nullseq._internal.collection_utils") is module


def test_internal_dir_and_invalid_attribute() -> None:
    listing = dir(internal)
    assert "empty" in listing
    assert "logging_utils" in listing
    with pytest.raises(AttributeError, match="has no attribute 'not_real'"):
        _ = internal.not_real


def test_public_shim_reexports_internal_functions() -> None:
    utils = importlib.import_module("nullseq._internal.collection_utils")
    for name in utils.__all__:
        assert getattr(public_collections, name) is getattr(utils, name)
        assert getattr(nullseq, name) is getattr(utils, name)


def test_package_exports_are_resolvable() -> None:
    for name in nullseq.__all__:
        assert hasattr(nullseq, name), name
    assert nullseq.__version__ == "0.1.0"
