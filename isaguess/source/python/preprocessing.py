# Copyright 2026 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Clean-up of the raw source code before it is split into tokens."""

import re

# A pair of double quotes and everything between them. Matching is done from
# left to right, so the first quote pairs with the second one, the third with
# the fourth, and so on. An unpaired trailing quote does not match.
_STRING_LITERAL_RE = re.compile(rb'"[^"]*"')


def truncate_at_nul(data: bytes) -> bytes:
  """Returns the part of `data` before the first NUL byte.

  The source code is treated as a NUL-terminated string; anything after the
  first NUL byte is ignored.
  """
  end = data.find(b'\0')
  if end < 0:
    return data
  return data[:end]


def strip_string_literals(data: bytes) -> bytes:
  """Removes double-quoted string literals, including the quotes.

  When the number of quotes is odd, the last quote and everything after it are
  left in the data.

  Args:
    data: The source code.

  Returns:
    The source code without the string literals.
  """
  return _STRING_LITERAL_RE.sub(b'', data)


def lowercase(data: bytes) -> bytes:
  """Converts ASCII letters in `data` to lowercase; other bytes are kept."""
  return data.lower()
