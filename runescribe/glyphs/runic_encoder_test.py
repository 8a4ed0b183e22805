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

from absl.testing import absltest
from absl.testing import parameterized
from runescribe.glyphs import runic_encoder as lib


class RunicEncoderTest(parameterized.TestCase):

  def test_decompose_recombines(self) -> None:
    for value in range(lib.MIN_NUMBER, lib.MAX_NUMBER + 1):
      thousands, hundreds, tens, units = lib.decompose(value)
      self.assertEqual(
          value, thousands * 1000 + hundreds * 100 + tens * 10 + units
      )

  def test_decompose(self) -> None:
    self.assertEqual(lib.decompose(0), (0, 0, 0, 0))
    self.assertEqual(lib.decompose(7), (0, 0, 0, 7))
    self.assertEqual(lib.decompose(42), (0, 0, 4, 2))
    self.assertEqual(lib.decompose(1984), (1, 9, 8, 4))

  def test_encode_zero(self) -> None:
    segments = lib.encode(0)
    self.assertLen(segments, lib.NUM_POSITIONS)
    for segment in segments:
      self.assertEmpty(segment.templates)
      self.assertEmpty(segment.tags)
    self.assertFalse(lib.spine_active(0))

  def test_spine_active_for_non_zero(self) -> None:
    for value in range(1, lib.MAX_NUMBER + 1):
      self.assertTrue(lib.spine_active(value))

  def test_encode_positions(self) -> None:
    segments = lib.encode(1234)
    self.assertEqual(
        [s.position for s in segments], list(lib.POSITIONS)
    )
    self.assertEqual([s.digit for s in segments], [1, 2, 3, 4])
    self.assertEqual(segments[0].templates, frozenset({0}))
    self.assertEqual(segments[1].templates, frozenset({1}))
    self.assertEqual(segments[2].templates, frozenset({2}))
    self.assertEqual(segments[3].templates, frozenset({3}))
    self.assertEqual(segments[0].tags, frozenset({"d1"}))
    self.assertEqual(segments[3].tags, frozenset({"c4"}))

  def test_template_counts_match_across_positions(self) -> None:
    expected_counts = {
        0: 0, 1: 1, 2: 1, 3: 1, 4: 1, 5: 2, 6: 1, 7: 2, 8: 2, 9: 3,
    }
    for digit, count in expected_counts.items():
      value = int(str(digit) * lib.NUM_POSITIONS)
      counts = [len(s.templates) for s in lib.encode(value)]
      self.assertEqual(counts, [count] * lib.NUM_POSITIONS)

  def test_composite_digits(self) -> None:
    table = lib.DIGIT_TEMPLATES
    self.assertEqual(table[5], table[1] | table[4])
    self.assertEqual(table[7], table[1] | table[6])
    self.assertEqual(table[8], table[2] | table[6])
    self.assertEqual(table[9], table[1] | table[2] | table[6])

  def test_template_tags(self) -> None:
    self.assertEqual(lib.template_tags(0), (1, 5, 7, 9))
    self.assertEqual(lib.template_tags(1), (2, 8, 9))
    self.assertEqual(lib.template_tags(2), (3,))
    self.assertEqual(lib.template_tags(3), (4, 5))
    self.assertEqual(lib.template_tags(4), (6, 7, 8, 9))
    with self.assertRaises(ValueError):
      lib.template_tags(lib.NUM_TEMPLATES)

  @parameterized.parameters(
      (0, "z0000"),
      (5, "z0000 z5"),
      (42, "z0000 z40 z2"),
      (123, "z0000 z100 z20 z3"),
      (1005, "z0000 z1000 z5"),
      (9999, "z0000 z9000 z900 z90 z9"),
  )
  def test_activation_classes(self, value: int, classes: str) -> None:
    self.assertEqual(lib.activation_classes(value), classes)

  def test_activation_tags(self) -> None:
    self.assertEmpty(lib.activation_tags(0))
    self.assertEqual(lib.activation_tags(42), frozenset({"t4", "c2"}))
    self.assertEqual(
        lib.activation_tags(9999), frozenset({"d9", "h9", "t9", "c9"})
    )

  def test_deterministic(self) -> None:
    self.assertEqual(lib.encode(4711), lib.encode(4711))

  @parameterized.parameters(-1, 10000, 1.5, "42", True, None)
  def test_invalid_numbers(self, value) -> None:
    with self.assertRaises(lib.NumberRangeError):
      lib.encode(value)
    with self.assertRaises(ValueError):
      lib.activation_classes(value)


if __name__ == "__main__":
  absltest.main()
