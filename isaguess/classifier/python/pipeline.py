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
"""Runs the whole classification pipeline on raw source code."""

from absl import logging

from isaguess.classifier.python import classification
from isaguess.classifier.python import classifier
from isaguess.source.python import preprocessing
from isaguess.source.python import tokens


def preprocess(data: bytes) -> bytes:
  """Prepares raw source code for tokenization.

  Cuts the data at the first NUL byte, removes string literals, and converts the
  code to lowercase.
  """
  data = preprocessing.truncate_at_nul(data)
  data = preprocessing.strip_string_literals(data)
  return preprocessing.lowercase(data)


def classify_source(data: bytes) -> classification.Classification:
  """Classifies raw assembly source code.

  Args:
    data: The source code, as read from the input.

  Returns:
    The detected properties of the code.
  """
  data = preprocess(data)
  logging.vlog(1, 'Preprocessed source code:\n%s', data.decode('latin-1'))
  source_tokens = tokens.tokenize(data)
  logging.vlog(1, 'Found %d tokens.', len(source_tokens))
  result = classifier.classify(source_tokens)
  logging.vlog(1, 'Classification: %r', result)
  return result
