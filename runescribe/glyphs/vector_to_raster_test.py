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

"""Very basic tests for conversion from vector graphics to raster format."""

import os

from absl import flags
from absl.testing import absltest
from absl.testing import flagsaver
import numpy as np
import PIL.Image
from runescribe.glyphs import runic_composer as composer_lib
from runescribe.glyphs import svg_export
from runescribe.glyphs import vector_to_raster as lib

FLAGS = flags.FLAGS


def _num_colors(image: PIL.Image.Image) -> int:
  return len(image.getcolors(maxcolors=image.width * image.height))


class VectorToRasterTest(absltest.TestCase):

  def test_path_points(self):
    np.testing.assert_allclose(
        lib.path_points("M19.8 0h18.7"), [[19.8, 0.], [38.5, 0.]]
    )
    np.testing.assert_allclose(
        lib.path_points("M38.5 58.8V39.4"), [[38.5, 58.8], [38.5, 39.4]]
    )

  def test_artifact_paths(self):
    artifact = svg_export.export_glyph(composer_lib.compose_number(42), 42)
    self.assertEqual(
        lib.artifact_paths(artifact),
        [composer_lib.SPINE_PATH, "M38.5 19.4H19.8", "M19.8 19.4L1.1 0"],
    )

  @flagsaver.flagsaver(raster_scale=2.0)
  def test_glyph_to_raster(self):
    image = lib.glyph_to_raster(composer_lib.compose_number(1984))
    self.assertEqual(image.size, (87, 150))
    self.assertEqual(image.mode, "RGBA")
    self.assertGreater(_num_colors(image), 1)

  @flagsaver.flagsaver(raster_scale=2.0)
  def test_zero_is_background_only(self):
    image = lib.glyph_to_raster(composer_lib.compose_number(0))
    self.assertEqual(_num_colors(image), 1)

  @flagsaver.flagsaver(raster_scale=1.0)
  def test_save_raster(self):
    path = os.path.join(self.create_tempdir().full_path, "png", "runic-7.png")
    lib.save_raster(lib.glyph_to_raster(composer_lib.compose_number(7)), path)
    with PIL.Image.open(path) as image:
      self.assertEqual(image.format, "PNG")
      self.assertEqual(image.size, (44, 75))


if __name__ == "__main__":
  absltest.main()
