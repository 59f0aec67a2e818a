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
"""Contains the result of the classification of assembly code."""

import dataclasses

from isaguess.classifier.python import options


@dataclasses.dataclass
class Classification:
  """The properties of assembly code detected by the classifier.

  The x86-specific attributes are meaningful only when `isa` is X86, and
  `has_vfp_instructions` only when `isa` is ARM.

  Attributes:
    isa: The instruction set architecture of the code.
    has_vfp_instructions: True when the code uses ARM VFP instructions.
    x86_flavor: The assembler syntax of the x86 code.
    x86_operand_width: The widest operands used by the x86 code. Use
      widen_operands() to update it.
    has_x87_instructions: True when the code uses x87 instructions.
  """

  isa: options.InstructionSetArchitecture = (
      options.InstructionSetArchitecture.X86
  )
  has_vfp_instructions: bool = False
  x86_flavor: options.X86Flavor = options.X86Flavor.INTEL
  x86_operand_width: options.OperandWidth = options.OperandWidth.WORD
  has_x87_instructions: bool = False

  def widen_operands(self, width: options.OperandWidth) -> None:
    """Updates the operand width to `width` if it is wider than the current."""
    if width.value > self.x86_operand_width.value:
      self.x86_operand_width = width
