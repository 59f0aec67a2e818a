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
r"""Guesses the instruction set and the dialect of assembly source code.

Reads assembly source code and prints a single line that describes it:
  - "86 <AT&T> <x87> <width>" for x86 code, where <AT&T> is 1 when the code uses
    the AT&T syntax, <x87> is 1 when it uses x87 instructions, and <width> is
    the widest operand size (16, 32 or 64) used by the code.
  - "0 <VFP>" for ARM code, where <VFP> is 1 when the code uses VFP
    instructions.

Usage:
  isaguess < program.s
  isaguess \
      --isaguess_input_file=/tmp/program.s \
      --isaguess_output_format=report
"""

from collections.abc import Sequence
import sys
from typing import BinaryIO, TextIO

from absl import app
from absl import flags
from absl import logging

from isaguess.classifier.python import answer
from isaguess.classifier.python import options
from isaguess.classifier.python import pipeline
from isaguess.source.python import reader
from isaguess.utils.python import flag_utils

_INPUT_FILE = flags.DEFINE_string(
    'isaguess_input_file',
    None,
    'The file to read the assembly source code from. When not set, the source'
    ' code is read from the standard input.',
)
_OUTPUT_FORMAT = flags.DEFINE_enum_class(
    'isaguess_output_format',
    options.OutputFormat.ANSWER,
    options.OutputFormat,
    'The format in which the classification is printed.',
    case_sensitive=False,
)
_READ_BLOCK_SIZE = flags.DEFINE_integer(
    'isaguess_read_block_size',
    reader.READ_BLOCK_SIZE,
    'The number of bytes requested from the input in a single read.',
)

flags.register_validator(
    _READ_BLOCK_SIZE.name,
    flag_utils.is_positive,
    flag_utils.MUST_BE_POSITIVE_ERROR,
)


def run(
    input_stream: BinaryIO,
    output_stream: TextIO,
    output_format: options.OutputFormat = options.OutputFormat.ANSWER,
    read_block_size: int = reader.READ_BLOCK_SIZE,
) -> None:
  """Reads source code from `input_stream` and prints its classification.

  Args:
    input_stream: The binary stream to read the source code from.
    output_stream: The text stream to which the classification is written.
    output_format: The format of the output.
    read_block_size: The number of bytes requested in a single read.
  """
  data = reader.read_all(input_stream, block_size=read_block_size)
  result = pipeline.classify_source(data)
  output_stream.write(answer.format_classification(output_format, result))
  output_stream.write('\n')


def main(argv: Sequence[str]) -> None:
  if len(argv) > 1:
    raise app.UsageError('Too many command-line arguments.')
  input_file = _INPUT_FILE.value
  if input_file is None:
    run(
        sys.stdin.buffer,
        sys.stdout,
        output_format=_OUTPUT_FORMAT.value,
        read_block_size=_READ_BLOCK_SIZE.value,
    )
    return
  logging.info('Reading the source code from %s', input_file)
  with open(input_file, 'rb') as input_stream:
    run(
        input_stream,
        sys.stdout,
        output_format=_OUTPUT_FORMAT.value,
        read_block_size=_READ_BLOCK_SIZE.value,
    )


def run_main() -> None:
  """The entry point of the isaguess console script."""
  app.run(main)


if __name__ == '__main__':
  run_main()
