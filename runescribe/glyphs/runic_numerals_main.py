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

r"""Converts a number to a runic numeral and exports it.

Example:
--------
python runescribe/glyphs/runic_numerals_main.py \
  --number 1984 \
  --output_dir /tmp/runes \
  --output_live_svg_file /tmp/runes/live-1984.svg \
  --output_raster_file /tmp/runes/runic-1984.png \
  --logtostderr
"""

from absl import app
from absl import flags
from absl import logging
from runescribe.glyphs import converter as converter_lib
from runescribe.glyphs import vector_to_raster as raster_lib
from runescribe.utils import file_utils

_NUMBER = flags.DEFINE_string(
    "number", None,
    "Number between 0 and 9999 to convert. Leading zeros are accepted and "
    "anything following the leading integer is ignored.",
    required=True
)

_OUTPUT_DIR = flags.DEFINE_string(
    "output_dir", None,
    "Directory for the exported `runic-<number>.svg` file.",
    required=True
)

_OUTPUT_LIVE_SVG_FILE = flags.DEFINE_string(
    "output_live_svg_file", None,
    "Optional path for the interactive view of the glyph."
)

_OUTPUT_RASTER_FILE = flags.DEFINE_string(
    "output_raster_file", None,
    "Optional path for the raster image in PNG format."
)


def main(argv):
  if len(argv) > 1:
    raise app.UsageError("Too many command-line arguments.")

  converter = converter_lib.RunicConverter()
  if not converter.convert(_NUMBER.value):
    raise app.UsageError(converter.error)

  if _OUTPUT_LIVE_SVG_FILE.value:
    logging.info("Saving live view to %s ...", _OUTPUT_LIVE_SVG_FILE.value)
    file_utils.write_text_file(
        _OUTPUT_LIVE_SVG_FILE.value, converter.render()
    )

  svg_path = converter.export_to(_OUTPUT_DIR.value)
  logging.info("Exported %d to %s.", converter.value, svg_path)

  if _OUTPUT_RASTER_FILE.value:
    image = raster_lib.glyph_to_raster(converter.glyph)
    raster_lib.save_raster(image, _OUTPUT_RASTER_FILE.value)


if __name__ == "__main__":
  app.run(main)
