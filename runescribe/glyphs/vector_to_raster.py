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

"""Conversion of exported glyphs to raster images."""

import math
import os
import xml.etree.ElementTree as ET

from absl import flags
from absl import logging
import cairo
import numpy as np
import PIL.Image
import PIL.ImageColor
from runescribe.glyphs import runic_composer as composer_lib
from runescribe.glyphs import svg_export
from runescribe.utils import file_utils
from svgpathtools import Line
from svgpathtools import parse_path

_RASTER_SCALE = flags.DEFINE_float(
    "raster_scale", 8.0,
    "Number of pixels per glyph unit in the raster image."
)

_RASTER_BACKGROUND_COLOR = flags.DEFINE_string(
    "raster_background_color", "ivory",
    "Background color for rastered image."
)

_ALPHA_CHANNEL = flags.DEFINE_boolean(
    "raster_alpha_channel", False,
    "Keep the background transparent instead of painting it."
)

# Stroke width in glyph units, same as the exported SVG.
_LINE_WIDTH = 2.0

# Number of points sampled along curved segments.
_POINTS_PER_CURVE = 16


def _cairo_bgra_rgba(surface: cairo.ImageSurface) -> PIL.Image.Image:
  """Converts a Cairo surface from default BGRA format to a RBGA string."""
  image = PIL.Image.frombuffer(
      "RGBA",
      (surface.get_width(), surface.get_height()),
      surface.get_data().tobytes(), "raw", "BGRA", 0, 1
  )
  return image


def path_points(d: str) -> np.ndarray:
  """Converts SVG path description to an array of (x, y) points.

  Straight segments contribute their end points only, other segments are
  sampled.

  Args:
    d: Path description.

  Returns:
    Array of shape (N, 2).
  """
  path = parse_path(d)
  points = []
  for segment in path:
    if not points:
      points.append(segment.start)
    if isinstance(segment, Line):
      points.append(segment.end)
    else:
      for t in np.linspace(0., 1., _POINTS_PER_CURVE)[1:]:
        points.append(segment.point(t))
  return np.array([[p.real, p.imag] for p in points], dtype=np.float64)


def artifact_paths(artifact: svg_export.ExportArtifact) -> list[str]:
  """Returns path descriptions of the exported document."""
  root = ET.fromstring(artifact.content)
  return [
      path.attrib["d"]
      for path in root.iter(f"{{{composer_lib.XML_SVG_NAMESPACE}}}path")
  ]


def paths_to_raster(paths: list[str]) -> PIL.Image.Image:
  """Draws the paths within the export framing.

  Args:
    paths: Path descriptions in glyph units.

  Returns:
    RGBA image.
  """
  min_x, min_y, width, height = svg_export.EXPORT_VIEW_BOX
  scale = _RASTER_SCALE.value
  target_width = int(math.ceil(width * scale))
  target_height = int(math.ceil(height * scale))
  surface = cairo.ImageSurface(
      cairo.FORMAT_ARGB32, target_width, target_height
  )
  ctx = cairo.Context(surface)
  ctx.set_antialias(cairo.ANTIALIAS_BEST)
  ctx.set_line_cap(cairo.LINE_CAP_ROUND)
  ctx.set_line_join(cairo.LINE_JOIN_ROUND)
  ctx.scale(scale, scale)
  ctx.set_line_width(_LINE_WIDTH)

  # Clear background.
  if _ALPHA_CHANNEL.value:
    ctx.set_source_rgba(1., 1., 1., 0.)
  else:
    r, g, b = PIL.ImageColor.getrgb(_RASTER_BACKGROUND_COLOR.value)[:3]
    ctx.set_source_rgb(r / 255., g / 255., b / 255.)
  ctx.set_operator(cairo.OPERATOR_SOURCE)
  ctx.paint()
  ctx.set_operator(cairo.OPERATOR_OVER)

  ctx.set_source_rgb(0., 0., 0.)
  offset = np.array([min_x, min_y])
  for d in paths:
    points = path_points(d) - offset
    ctx.move_to(points[0][0], points[0][1])
    for x, y in points[1:]:
      ctx.line_to(x, y)
    ctx.stroke()
  logging.debug(
      "Rasterized %d paths into %dx%d image.",
      len(paths), target_width, target_height
  )
  return _cairo_bgra_rgba(surface)


def artifact_to_raster(
    artifact: svg_export.ExportArtifact,
) -> PIL.Image.Image:
  """Rasterizes the exported document."""
  return paths_to_raster(artifact_paths(artifact))


def glyph_to_raster(glyph: composer_lib.GlyphDocument) -> PIL.Image.Image:
  """Rasterizes the visible strokes of the glyph."""
  return artifact_to_raster(svg_export.export_glyph(glyph, glyph.value))


def save_raster(image: PIL.Image.Image, output_file: str) -> None:
  """Saves the image in PNG format."""
  file_utils.ensure_dir(os.path.dirname(output_file))
  logging.info("Saving raster image to %s ...", output_file)
  image.save(output_file, format="PNG")
