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

"""Public exception types and error codes (stable shim over internal implementations)."""

from __future__ import annotations

from nullseq._internal.error_codes import ErrorCode, error_code_catalog, error_code_for
from nullseq._internal.exceptions import ImmutableSequenceError, NullseqError, NullseqTypeError

__all__ = [
    "ErrorCode",
    "ImmutableSequenceError",
    "NullseqError",
    "NullseqTypeError",
    "error_code_catalog",
    "error_code_for",
]
