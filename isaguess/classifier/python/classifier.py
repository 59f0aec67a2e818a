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
"""Heuristics that classify assembly code based on its tokens.

The classifier does not parse the code. It only looks for a small set of
mnemonics and register names:
  - ARM code is recognized by the load/store instructions ldr/str, and VFP by
    their variants vldr/vstr.
  - Anything that is not ARM is x86. The syntax is AT&T when register names
    are prefixed with '%', the operand width is given by the widest register
    name, and x87 is recognized by a handful of x87 instructions.
"""

from collections.abc import Sequence
from typing import Optional

from isaguess.classifier.python import classification
from isaguess.classifier.python import options
from isaguess.source.python import tokens as asm_tokens

_OperandWidth = options.OperandWidth

# Maps register name prefixes to the operand width of the registers.
_WIDE_REGISTER_PREFIXES = {
    asm_tokens.X86_DWORD_REGISTER_PREFIX: _OperandWidth.DWORD,
    asm_tokens.X86_QWORD_REGISTER_PREFIX: _OperandWidth.QWORD,
}


def is_x86_general_purpose_register(token: str) -> bool:
  """Returns True if `token` is the name of a 16-bit general-purpose register."""
  return token in asm_tokens.X86_GENERAL_PURPOSE_REGISTERS


def is_x86_segment_register(token: str) -> bool:
  """Returns True if `token` is the name of a segment register."""
  return token in asm_tokens.X86_SEGMENT_REGISTERS


def x86_register_width(token: str) -> Optional[options.OperandWidth]:
  """Returns the operand width implied by an x86 register name.

  Args:
    token: The token to check, without the AT&T register prefix.

  Returns:
    The width of the register, or None when `token` is not a known register.
  """
  if is_x86_segment_register(token) or is_x86_general_purpose_register(token):
    return _OperandWidth.WORD
  if is_x86_general_purpose_register(token[1:]):
    return _WIDE_REGISTER_PREFIXES.get(token[:1])
  return None


def check_arm_and_vfp_instructions(
    tokens: Sequence[str], result: classification.Classification
) -> bool:
  """Looks for ARM and ARM VFP instructions in `tokens`.

  Args:
    tokens: The tokens of the source code.
    result: The classification, updated in place.

  Returns:
    True when the code was classified as ARM.
  """
  for token in tokens:
    if token in asm_tokens.VFP_LOAD_STORE_MNEMONICS:
      result.isa = options.InstructionSetArchitecture.ARM
      result.has_vfp_instructions = True
      return True
    if token in asm_tokens.ARM_LOAD_STORE_MNEMONICS:
      # A VFP instruction may still follow.
      result.isa = options.InstructionSetArchitecture.ARM
  return result.isa == options.InstructionSetArchitecture.ARM


def check_x86_registers(
    tokens: Sequence[str], result: classification.Classification
) -> None:
  """Detects the x86 syntax flavor and operand width from register names."""
  prefix = asm_tokens.ATT_REGISTER_PREFIX
  for token in tokens:
    if token.startswith(prefix):
      width = x86_register_width(token[len(prefix):])
      if width is not None:
        result.x86_flavor = options.X86Flavor.ATT
        result.widen_operands(width)
        if result.x86_operand_width == _OperandWidth.QWORD:
          return
        continue
    width = x86_register_width(token)
    if width is not None:
      result.widen_operands(width)


def check_x87_instructions(
    tokens: Sequence[str], result: classification.Classification
) -> None:
  """Looks for x87 instructions in `tokens`."""
  for token in tokens:
    if token in asm_tokens.X87_MNEMONICS:
      result.has_x87_instructions = True
      return


def classify(tokens: Sequence[str]) -> classification.Classification:
  """Classifies assembly code.

  Args:
    tokens: The lowercase tokens of the source code, with string literals
      removed.

  Returns:
    The detected properties of the code.
  """
  result = classification.Classification()
  if not check_arm_and_vfp_instructions(tokens, result):
    check_x86_registers(tokens, result)
    check_x87_instructions(tokens, result)
  return result
