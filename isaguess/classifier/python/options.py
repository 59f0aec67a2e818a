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
"""Definitions of enum types used in the classification of assembly code."""

import enum


@enum.unique
class InstructionSetArchitecture(enum.Enum):
  """The instruction set architecture of the source code.

  Values:
    X86: The x86 family, including x86-64.
    ARM: The ARM family.
  """

  X86 = 0
  ARM = 1


@enum.unique
class X86Flavor(enum.Enum):
  """The syntax of x86 assembly code.

  Values:
    INTEL: The Intel syntax, where register names have no prefix.
    ATT: The AT&T syntax, where register names are prefixed with '%'.
  """

  INTEL = 0
  ATT = 1


@enum.unique
class OperandWidth(enum.Enum):
  """The width of x86 operands in bits, as implied by register names.

  Values:
    WORD: 16-bit registers, e.g. ax, and segment registers.
    DWORD: 32-bit registers, e.g. eax.
    QWORD: 64-bit registers, e.g. rax.
  """

  WORD = 16
  DWORD = 32
  QWORD = 64


# Possible values of the --isaguess_output_format command-line flag.
@enum.unique
class OutputFormat(enum.Enum):
  """Specifies how the classification is printed.

  Values:
    ANSWER: A single line with the classification encoded as numbers.
    REPORT: A human-readable report with one line per classified property.
  """

  ANSWER = 'answer'
  REPORT = 'report'
