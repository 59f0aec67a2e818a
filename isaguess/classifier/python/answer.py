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
"""Formats the classification for output."""

from collections.abc import Callable, Mapping

from isaguess.classifier.python import classification
from isaguess.classifier.python import options

_Isa = options.InstructionSetArchitecture

# The number that identifies x86 in the answer line. ARM is identified by 0.
_X86_ANSWER_ID = '86'
_ARM_ANSWER_ID = '0'

_ISA_NAMES = {_Isa.X86: 'x86', _Isa.ARM: 'ARM'}
_X86_FLAVOR_NAMES = {
    options.X86Flavor.INTEL: 'Intel',
    options.X86Flavor.ATT: 'AT&T',
}
_OPERAND_WIDTH_NAMES = {
    options.OperandWidth.WORD: 'word',
    options.OperandWidth.DWORD: 'dword',
    options.OperandWidth.QWORD: 'qword',
}


def _bit(value: bool) -> str:
  return '1' if value else '0'


def format_answer(result: classification.Classification) -> str:
  """Encodes the classification as a single line of numbers.

  For x86 code, the line is "86 <AT&T> <x87> <width>", where <AT&T> and <x87>
  are 1 when the syntax is AT&T and when x87 instructions are used, and <width>
  is the operand width in bits. For ARM code, the line is "0 <VFP>", where <VFP>
  is 1 when VFP instructions are used.

  Args:
    result: The classification to format.

  Returns:
    The answer line, without the trailing newline.
  """
  if result.isa == _Isa.ARM:
    return f'{_ARM_ANSWER_ID} {_bit(result.has_vfp_instructions)}'
  return ' '.join((
      _X86_ANSWER_ID,
      _bit(result.x86_flavor == options.X86Flavor.ATT),
      _bit(result.has_x87_instructions),
      str(result.x86_operand_width.value),
  ))


def format_report(result: classification.Classification) -> str:
  """Describes the classification in a human-readable form, one line per item."""
  lines = [f'ISA: {_ISA_NAMES[result.isa]}']
  if result.isa == _Isa.ARM:
    vfp = 'present' if result.has_vfp_instructions else 'absent'
    lines.append(f'ARM VFP: VFP {vfp}')
  else:
    fpu = 'present' if result.has_x87_instructions else 'absent'
    lines.extend((
        f'x86 flavor: {_X86_FLAVOR_NAMES[result.x86_flavor]}',
        'x86 max. operand size:'
        f' {_OPERAND_WIDTH_NAMES[result.x86_operand_width]}',
        f'x86 FPU: FPU {fpu}',
    ))
  return '\n'.join(lines)


# Mapping from OutputFormat values to the functions that implement them.
_FORMATTERS: Mapping[
    options.OutputFormat,
    Callable[[classification.Classification], str],
] = {
    options.OutputFormat.ANSWER: format_answer,
    options.OutputFormat.REPORT: format_report,
}


def format_classification(
    output_format: options.OutputFormat,
    result: classification.Classification,
) -> str:
  """Formats `result` in the given output format."""
  formatter = _FORMATTERS.get(output_format)
  if formatter is None:
    raise ValueError(f'Invalid output format: {output_format!r}')
  return formatter(result)
