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
"""Reads the assembly source code from a binary stream."""

from typing import BinaryIO

from absl import logging

# The number of bytes requested from the stream by a single read call.
READ_BLOCK_SIZE = 4096


def read_all(stream: BinaryIO, block_size: int = READ_BLOCK_SIZE) -> bytes:
  """Reads all data from `stream` until the end of the stream.

  An error while reading from the stream ends the reading the same way as the
  end of the stream does; the data read before the error are returned.

  Args:
    stream: The binary stream to read from.
    block_size: The number of bytes requested from the stream in one read call.

  Returns:
    The contents of the stream.

  Raises:
    ValueError: When `block_size` is not positive.
  """
  if block_size <= 0:
    raise ValueError(f'block_size must be positive, got {block_size}')
  data = bytearray()
  while True:
    try:
      block = stream.read(block_size)
    except OSError:
      logging.warning(
          'Reading the input failed after %d bytes, using the data read so'
          ' far.',
          len(data),
          exc_info=True,
      )
      break
    if not block:
      break
    data += block
  logging.vlog(1, 'Read %d bytes of input.', len(data))
  return bytes(data)
