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

"""Maps the decimal digits of a number to runic stroke templates.

Each of the four decimal positions (thousands, hundreds, tens and units)
owns a quadrant of the glyph with five stroke templates. A digit selects a
fixed subset of these templates via the lookup table below. The table is
shared by all positions, the quadrant geometry takes care of the mirroring.
"""

import dataclasses
import enum

MIN_NUMBER = 0
MAX_NUMBER = 9999

# Number of decimal positions (and glyph quadrants).
NUM_POSITIONS = 4

# Number of stroke templates per position.
NUM_TEMPLATES = 5

# Activation class present on every glyph, including zero.
BASE_CLASS = "z0000"


class NumberRangeError(ValueError):
  """Number lies outside of the supported range."""


class Position(enum.Enum):
  """Decimal position along with its glyph quadrant.

  The value is a tuple of the tag prefix used by the stroke templates, the
  zero suffix used by the activation classes and the quadrant name.
  """

  THOUSANDS = ("d", "000", "bottom-left")
  HUNDREDS = ("h", "00", "bottom-right")
  TENS = ("t", "0", "top-left")
  UNITS = ("c", "", "top-right")

  @property
  def tag_prefix(self) -> str:
    return self.value[0]

  @property
  def class_suffix(self) -> str:
    return self.value[1]

  @property
  def quadrant(self) -> str:
    return self.value[2]


# Positions in the order in which the digits are read from the number.
POSITIONS = (
    Position.THOUSANDS, Position.HUNDREDS, Position.TENS, Position.UNITS
)

# Template indices (in the quadrant's own orientation):
#   0: outer horizontal bar,
#   1: inner horizontal bar,
#   2: diagonal from the outer bar to the inner corner,
#   3: diagonal from the inner bar to the outer corner,
#   4: outer vertical bar.
DIGIT_TEMPLATES: dict[int, frozenset[int]] = {
    0: frozenset(),
    1: frozenset({0}),
    2: frozenset({1}),
    3: frozenset({2}),
    4: frozenset({3}),
    5: frozenset({0, 3}),
    6: frozenset({4}),
    7: frozenset({0, 4}),
    8: frozenset({1, 4}),
    9: frozenset({0, 1, 4}),
}


@dataclasses.dataclass(frozen=True)
class SegmentActivation:
  """Templates activated by a single digit at its position."""

  position: Position
  digit: int
  templates: frozenset[int]

  @property
  def tags(self) -> frozenset[str]:
    """Per-stroke tag tokens, e.g. `t4` for digit four in the tens."""
    if not self.templates:
      return frozenset()
    return frozenset([f"{self.position.tag_prefix}{self.digit}"])


def template_tags(template_index: int) -> tuple[int, ...]:
  """Returns the digits activating the given template, in ascending order."""
  if not 0 <= template_index < NUM_TEMPLATES:
    raise ValueError(f"Invalid template index {template_index}!")
  return tuple(
      digit for digit, templates in sorted(DIGIT_TEMPLATES.items())
      if template_index in templates
  )


def check_number(value: int) -> int:
  """Checks that the value is an integer in the supported range.

  Args:
    value: Candidate number.

  Returns:
    The number itself.

  Raises:
    NumberRangeError: if the value is not an integer or is out of range.
  """
  if isinstance(value, bool) or not isinstance(value, int):
    raise NumberRangeError(f"Expected an integer, got {value!r}")
  if value < MIN_NUMBER or value > MAX_NUMBER:
    raise NumberRangeError(
        f"Number must be between {MIN_NUMBER} and {MAX_NUMBER}"
    )
  return value


def decompose(value: int) -> tuple[int, int, int, int]:
  """Splits number into (thousands, hundreds, tens, units) digits."""
  check_number(value)
  digits = [int(d) for d in str(value).zfill(NUM_POSITIONS)]
  return digits[0], digits[1], digits[2], digits[3]


def encode(value: int) -> list[SegmentActivation]:
  """Encodes number as activated stroke templates for every position.

  Args:
    value: Number in [0, 9999].

  Returns:
    Four activations in thousands, hundreds, tens and units order. Zero digits
    activate no templates.
  """
  return [
      SegmentActivation(
          position=position, digit=digit, templates=DIGIT_TEMPLATES[digit]
      )
      for position, digit in zip(POSITIONS, decompose(value))
  ]


def spine_active(value: int) -> bool:
  """The central vertical stroke is only drawn for non-zero numbers."""
  return check_number(value) != 0


def activation_classes(value: int) -> str:
  """Returns space-separated activation classes for the glyph root.

  The base class is always present. Each non-zero digit contributes the digit
  followed by the zeros of its position, e.g. 42 yields `z0000 z40 z2`.

  Args:
    value: Number in [0, 9999].

  Returns:
    Activation class string.
  """
  classes = [BASE_CLASS]
  for segment in encode(value):
    if segment.digit:
      classes.append(f"z{segment.digit}{segment.position.class_suffix}")
  return " ".join(classes)


def activation_tags(value: int) -> frozenset[str]:
  """Returns the stroke tag tokens activated by the number."""
  tags = set()
  for segment in encode(value):
    tags.update(segment.tags)
  return frozenset(tags)
