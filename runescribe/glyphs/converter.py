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

"""Number to runic numeral conversion session.

Keeps the currently rendered number and its glyph. Every successful
conversion replaces the glyph as a whole, failed conversions keep the
previous glyph and record the error until the input changes.
"""

import dataclasses
from typing import Optional

from absl import logging
from runescribe.glyphs import number_input
from runescribe.glyphs import runic_composer as composer_lib
from runescribe.glyphs import svg_export


@dataclasses.dataclass
class RunicConverter:
  """Conversion state container."""

  value: int = 0
  glyph: Optional[composer_lib.GlyphDocument] = None
  error: str = ""
  convert_enabled: bool = True

  def __post_init__(self):
    if self.glyph is None:
      self.glyph = composer_lib.compose_number(self.value)

  def convert(self, text: str) -> bool:
    """Converts textual input and renders the new glyph.

    Args:
      text: User input.

    Returns:
      True if the conversion succeeded.
    """
    try:
      value = number_input.parse_number(text)
    except number_input.InvalidNumberError as e:
      logging.warning("Rejecting input `%s`: %s", text, e)
      self.error = str(e)
      self.convert_enabled = False
      return False

    self.value = value
    self.glyph = composer_lib.compose_number(value)
    self.error = ""
    self.convert_enabled = True
    logging.info("Converted %d: %s", value, self.glyph.activation_classes)
    return True

  def on_input_changed(self) -> None:
    """Clears the error as soon as the user edits the input."""
    self.error = ""
    self.convert_enabled = True

  def render(self) -> Optional[str]:
    """Returns the interactive view of the current glyph."""
    if self.glyph is None:
      return None
    return composer_lib.glyph_to_svg_string(self.glyph)

  def export(self) -> Optional[svg_export.ExportArtifact]:
    """Exports the current glyph, `None` if nothing is rendered."""
    return svg_export.export_glyph(self.glyph, self.value)

  def export_to(self, output_dir: str) -> Optional[str]:
    """Exports the current glyph and saves it in the directory.

    Args:
      output_dir: Target directory.

    Returns:
      Path of the saved file or `None` if nothing was exported.
    """
    artifact = self.export()
    if artifact is None:
      return None
    return artifact.save(output_dir)
