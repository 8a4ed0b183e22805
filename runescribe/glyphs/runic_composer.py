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

"""Composes runic numeral glyphs from the stroke templates.

The glyph always contains all twenty templates (five per quadrant) and, for
non-zero numbers, the central spine. Which of the templates are drawn is
recorded in the `active` flag of each stroke that is computed from the
encoding table. The live (interactive) rendering additionally carries the
activation classes on its root which reveal the strokes through style rules.
"""

import dataclasses
from typing import Optional, Sequence
import xml.etree.ElementTree as ET

from absl import logging
from runescribe.glyphs import runic_encoder as encoder_lib
from svgpathtools import parse_path
from svgpathtools import paths2svg

# XML namespace of SVG documents.
XML_SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Canvas of the glyph in user units.
CANVAS_WIDTH = 39.5
CANVAS_HEIGHT = 58.8

# Size of the interactive view.
VIEW_WIDTH = 400
VIEW_HEIGHT = 150

# The central vertical stroke.
SPINE_PATH = "M19.8 0v58.8"
SPINE_CLASS = "centralLine"

# Root class of the interactive view.
VIEW_CLASS = "runic-svg"

# Names of the groups in the interactive view.
_GROUP_IDS = {
    encoder_lib.Position.UNITS: "Ones",
    encoder_lib.Position.TENS: "Tens",
    encoder_lib.Position.HUNDREDS: "Hundreds",
    encoder_lib.Position.THOUSANDS: "Thousands",
}

# Order in which the groups are rendered.
_RENDER_ORDER = (
    encoder_lib.Position.UNITS,
    encoder_lib.Position.TENS,
    encoder_lib.Position.HUNDREDS,
    encoder_lib.Position.THOUSANDS,
)

# Path descriptions indexed by template (see `runic_encoder.DIGIT_TEMPLATES`).
# Tens and thousands mirror units and hundreds about the spine.
_TEMPLATE_PATHS = {
    encoder_lib.Position.UNITS: (
        "M19.8 0h18.7",
        "M38.5 19.4H19.8",
        "M19.8 0l18.7 19.4",
        "M19.8 19.4l18.7-19.4",
        "M38.5 0v19.4",
    ),
    encoder_lib.Position.TENS: (
        "M19.8 0H1.1",
        "M1.1 19.4h18.7",
        "M19.8 0L1.1 19.4",
        "M19.8 19.4L1.1 0",
        "M1.1 0v19.4",
    ),
    encoder_lib.Position.HUNDREDS: (
        "M19.8 58.8h18.7",
        "M38.5 39.4H19.8",
        "M19.8 58.8l18.7-19.4",
        "M19.8 39.4l18.7 19.4",
        "M38.5 58.8V39.4",
    ),
    encoder_lib.Position.THOUSANDS: (
        "M19.8 58.8H1.1",
        "M1.1 39.4h18.7",
        "M19.8 58.8L1.1 39.4",
        "M19.8 39.4L1.1 58.8",
        "M1.1 58.8V39.4",
    ),
}


@dataclasses.dataclass(frozen=True)
class StrokeTemplate:
  """Fixed stroke geometry along with the digits activating it."""

  position: encoder_lib.Position
  index: int
  d: str
  tags: tuple[int, ...]

  @property
  def tag_tokens(self) -> tuple[str, ...]:
    """Tags as style tokens, e.g. `c1 c5 c7 c9` for the top units bar."""
    return tuple(f"{self.position.tag_prefix}{tag}" for tag in self.tags)


@dataclasses.dataclass(frozen=True)
class GlyphStroke:
  """A single stroke of the composed glyph.

  Attributes:
    d: SVG path description.
    position: Decimal position of the stroke, `None` for the spine.
    template_index: Index of the template within the position.
    tags: Style tokens matched against the activation classes.
    active: Whether the encoding activates this stroke.
    color: Optional presentation override of the stroke color.
  """

  d: str
  position: Optional[encoder_lib.Position]
  template_index: Optional[int]
  tags: tuple[str, ...]
  active: bool
  color: Optional[str] = None

  @property
  def is_spine(self) -> bool:
    return self.position is None

  @property
  def class_name(self) -> str:
    return SPINE_CLASS if self.is_spine else " ".join(self.tags)


@dataclasses.dataclass(frozen=True)
class GlyphDocument:
  """Declarative description of a runic numeral glyph."""

  value: int
  strokes: tuple[GlyphStroke, ...]
  activation_classes: str

  @property
  def active_strokes(self) -> tuple[GlyphStroke, ...]:
    return tuple(stroke for stroke in self.strokes if stroke.active)

  def position_strokes(
      self, position: encoder_lib.Position
  ) -> tuple[GlyphStroke, ...]:
    return tuple(
        stroke for stroke in self.strokes if stroke.position == position
    )


def stroke_templates(
    position: Optional[encoder_lib.Position] = None,
) -> list[StrokeTemplate]:
  """Returns the stroke templates of one or all positions.

  Args:
    position: If given, only the templates of this position are returned.

  Returns:
    List of templates in rendering order.
  """
  positions = [position] if position else _RENDER_ORDER
  templates = []
  for pos in positions:
    for index, d in enumerate(_TEMPLATE_PATHS[pos]):
      templates.append(StrokeTemplate(
          position=pos,
          index=index,
          d=d,
          tags=encoder_lib.template_tags(index),
      ))
  return templates


def _segments_value(
    segments: Sequence[encoder_lib.SegmentActivation],
) -> int:
  """Recombines the digits of the segments into the number."""
  if [s.position for s in segments] != list(encoder_lib.POSITIONS):
    raise ValueError(
        "Expected segments in thousands, hundreds, tens and units order!"
    )
  value = 0
  for segment in segments:
    value = value * 10 + segment.digit
  return value


def compose(
    segments: Sequence[encoder_lib.SegmentActivation],
) -> GlyphDocument:
  """Composes the glyph from the encoded segments.

  Args:
    segments: Four segment activations as returned by `runic_encoder.encode`.

  Returns:
    Newly built glyph document.
  """
  value = _segments_value(segments)
  activated = {s.position: s.templates for s in segments}
  strokes = []
  if encoder_lib.spine_active(value):
    strokes.append(GlyphStroke(
        d=SPINE_PATH,
        position=None,
        template_index=None,
        tags=(),
        active=True,
    ))
  for template in stroke_templates():
    strokes.append(GlyphStroke(
        d=template.d,
        position=template.position,
        template_index=template.index,
        tags=template.tag_tokens,
        active=template.index in activated[template.position],
    ))
  logging.debug(
      "Composed glyph for %d with %d active strokes.",
      value, sum(stroke.active for stroke in strokes)
  )
  return GlyphDocument(
      value=value,
      strokes=tuple(strokes),
      activation_classes=encoder_lib.activation_classes(value),
  )


def compose_number(value: int) -> GlyphDocument:
  """Encodes and composes the glyph for the number."""
  return compose(encoder_lib.encode(value))


def highlight(
    glyph: GlyphDocument,
    position: encoder_lib.Position,
    color: str,
) -> GlyphDocument:
  """Returns a copy of the glyph with the strokes of a position recolored."""
  strokes = tuple(
      dataclasses.replace(stroke, color=color)
      if stroke.position == position else stroke
      for stroke in glyph.strokes
  )
  return dataclasses.replace(glyph, strokes=strokes)


def glyph_bbox(
    glyph: GlyphDocument,
) -> Optional[tuple[float, float, float, float]]:
  """Bounding box of the active strokes.

  Args:
    glyph: Composed glyph.

  Returns:
    Tuple (min_x, max_x, min_y, max_y) or `None` if nothing is drawn.
  """
  paths = [parse_path(stroke.d) for stroke in glyph.active_strokes]
  if not paths:
    return None
  return paths2svg.big_bounding_box(paths)


def _view_style() -> str:
  """Style rules revealing the strokes selected by the activation classes."""
  selectors = []
  for position in encoder_lib.POSITIONS:
    for digit in range(1, 10):
      selectors.append(
          f".z{digit}{position.class_suffix} .{position.tag_prefix}{digit}"
      )
  return (
      f".{VIEW_CLASS} path {{ stroke: transparent; stroke-width: 2; "
      "fill: none; stroke-linecap: round; stroke-linejoin: round; }\n"
      f".{VIEW_CLASS} .{SPINE_CLASS},\n" + ",\n".join(selectors) +
      " { stroke: currentColor; }\n"
  )


def _svg_element(
    parent: Optional[ET.Element], tag: str, **attrib: str
) -> ET.Element:
  """Creates namespaced SVG element."""
  tag = f"{{{XML_SVG_NAMESPACE}}}{tag}"
  if parent is None:
    return ET.Element(tag, attrib)
  return ET.SubElement(parent, tag, attrib)


def _path_attributes(stroke: GlyphStroke) -> dict[str, str]:
  attrib = {"class": stroke.class_name, "d": stroke.d}
  # Inline style overrides the view rules, inactive strokes stay hidden.
  if stroke.active and stroke.color:
    attrib["style"] = f"stroke: {stroke.color}"
  return attrib


def glyph_to_svg_tree(glyph: GlyphDocument) -> ET.ElementTree:
  """Renders the interactive view of the glyph.

  Visibility of the template strokes is resolved by the embedded style rules
  matching the activation classes of the root against the stroke tags.

  Args:
    glyph: Composed glyph.

  Returns:
    SVG element tree.
  """
  ET.register_namespace("", XML_SVG_NAMESPACE)
  root = _svg_element(
      None, "svg",
      width=str(VIEW_WIDTH),
      height=str(VIEW_HEIGHT),
      viewBox=f"0 0 {CANVAS_WIDTH} {CANVAS_HEIGHT}",
      role="img",
      focusable="false",
      overflow="visible",
  )
  root.attrib["class"] = f"{VIEW_CLASS} {glyph.activation_classes}"
  root.attrib["aria-labelledby"] = "runic-title"
  title = _svg_element(root, "title", id="runic-title")
  title.text = str(glyph.value)
  desc = _svg_element(root, "desc")
  desc.text = f"runic numeral representation of {glyph.value}"
  style = _svg_element(root, "style")
  style.text = _view_style()

  for stroke in glyph.strokes:
    if stroke.is_spine:
      _svg_element(root, "path", **_path_attributes(stroke))
  for position in _RENDER_ORDER:
    group = _svg_element(root, "g", id=_GROUP_IDS[position])
    for stroke in glyph.position_strokes(position):
      _svg_element(group, "path", **_path_attributes(stroke))
  return ET.ElementTree(root)


def glyph_to_svg_string(glyph: GlyphDocument) -> str:
  """Renders the interactive view of the glyph as a string."""
  tree = glyph_to_svg_tree(glyph)
  ET.indent(tree)
  return ET.tostring(tree.getroot(), encoding="unicode")
