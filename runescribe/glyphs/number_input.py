# Copyright 2025 The Runescribe Authors.
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

"""Parsing and validation of textual number input."""

import re

from runescribe.glyphs import runic_encoder as encoder_lib

# Leading integer of the input. Anything following it (e.g. a fractional
# part) is ignored, so that `56.8` reads as 56 and `007` as 7.
_INTEGER_PREFIX_REGEX = re.compile(r"^\s*([+-]?\d+)")

PARSE_ERROR_MESSAGE = "Please enter a valid number"
TOO_SMALL_ERROR_MESSAGE = (
    f"Number must be greater than or equal to {encoder_lib.MIN_NUMBER}"
)
TOO_LARGE_ERROR_MESSAGE = (
    f"Number must be less than or equal to {encoder_lib.MAX_NUMBER}"
)


class InvalidNumberError(ValueError):
  """Input can not be converted to a runic numeral."""


class NumberParseError(InvalidNumberError):
  """Input is not a number."""


class NumberRangeError(InvalidNumberError, encoder_lib.NumberRangeError):
  """Input is a number outside of the supported range."""


def parse_number(text: str) -> int:
  """Parses the textual input into a number accepted by the encoder.

  Args:
    text: User input.

  Returns:
    Number in [0, 9999].

  Raises:
    NumberParseError: if the input does not start with an integer.
    NumberRangeError: if the number is out of range.
  """
  match = _INTEGER_PREFIX_REGEX.match(text or "")
  if not match:
    raise NumberParseError(PARSE_ERROR_MESSAGE)
  value = int(match.group(1))
  if value < encoder_lib.MIN_NUMBER:
    raise NumberRangeError(TOO_SMALL_ERROR_MESSAGE)
  if value > encoder_lib.MAX_NUMBER:
    raise NumberRangeError(TOO_LARGE_ERROR_MESSAGE)
  return value
