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
from runescribe.glyphs import number_input as lib
from runescribe.glyphs import runic_encoder as encoder_lib


class NumberInputTest(parameterized.TestCase):

  @parameterized.parameters(
      ("0", 0),
      ("5", 5),
      ("007", 7),
      ("56.8", 56),
      (" 42", 42),
      ("+12", 12),
      ("9999", 9999),
  )
  def test_parse_number(self, text: str, value: int) -> None:
    self.assertEqual(lib.parse_number(text), value)

  @parameterized.parameters("", "abc", "-", ".5", None)
  def test_not_a_number(self, text) -> None:
    with self.assertRaisesRegex(lib.NumberParseError, lib.PARSE_ERROR_MESSAGE):
      lib.parse_number(text)

  def test_out_of_range(self) -> None:
    with self.assertRaises(lib.NumberRangeError) as e:
      lib.parse_number("-5")
    self.assertEqual(
        str(e.exception), "Number must be greater than or equal to 0"
    )
    with self.assertRaises(lib.NumberRangeError) as e:
      lib.parse_number("10000")
    self.assertEqual(
        str(e.exception), "Number must be less than or equal to 9999"
    )

  def test_error_hierarchy(self) -> None:
    self.assertTrue(issubclass(lib.NumberParseError, ValueError))
    self.assertTrue(
        issubclass(lib.NumberRangeError, encoder_lib.NumberRangeError)
    )
    self.assertTrue(issubclass(lib.NumberRangeError, lib.InvalidNumberError))

  def test_leading_zeros_convert_identically(self) -> None:
    self.assertEqual(
        encoder_lib.activation_classes(lib.parse_number("007")),
        encoder_lib.activation_classes(7),
    )


if __name__ == "__main__":
  absltest.main()
