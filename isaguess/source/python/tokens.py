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
"""Tokens of the assembly source code and the vocabulary used to classify it.

All mnemonics and register names are lowercase; the source code is lowercased
before it is split into tokens.
"""

import re

# The characters that separate tokens. Runs of delimiters are treated as a
# single delimiter.
DELIMITERS = b' \t\r\n,()[]'

# The prefix of register names in the AT&T assembler syntax.
ATT_REGISTER_PREFIX = '%'

# ARM load/store instructions. VFP_LOAD_STORE_MNEMONICS are their variants from
# the VFP extension.
ARM_LOAD_STORE_MNEMONICS = ('ldr', 'str')
VFP_LOAD_STORE_MNEMONICS = ('vldr', 'vstr')

# x87 instructions.
X87_MNEMONICS = ('finit', 'fld', 'fst')

# 16-bit general-purpose registers. The 32-bit and 64-bit variants add the
# prefix 'e' and 'r', respectively.
X86_GENERAL_PURPOSE_REGISTERS = ('ax', 'bx', 'cx', 'dx', 'si', 'di', 'sp', 'bp')
X86_SEGMENT_REGISTERS = ('cs', 'ds', 'ss')
X86_DWORD_REGISTER_PREFIX = 'e'
X86_QWORD_REGISTER_PREFIX = 'r'

# Every input byte maps to exactly one character in this encoding, so tokens
# can be decoded without errors.
_TOKEN_ENCODING = 'latin-1'

_TOKEN_RE = re.compile(b'[^' + re.escape(DELIMITERS) + b']+')


def tokenize(data: bytes) -> tuple[str, ...]:
  """Splits `data` into tokens.

  Args:
    data: The preprocessed source code.

  Returns:
    The non-empty maximal runs of non-delimiter characters in `data`, in the
    order in which they appear.
  """
  return tuple(
      token.decode(_TOKEN_ENCODING) for token in _TOKEN_RE.findall(data)
  )
