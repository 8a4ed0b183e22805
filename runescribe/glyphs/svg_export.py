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

"""Exports runic glyphs as standalone, style-free SVG documents.

The exported document only keeps the strokes that are visible, each with
hardcoded presentation attributes instead of style classes, so that it
renders identically in any SVG consumer.
"""

import copy
import dataclasses
import os
import re
from typing import Optional
import xml.etree.ElementTree as ET

from absl import flags
from absl import logging
from runescribe.glyphs import runic_composer as composer_lib
from runescribe.glyphs import runic_encoder as encoder_lib
from runescribe.utils import file_utils

_EXPORT_BACKGROUND_COLOR = flags.DEFINE_string(
    "export_background_color", "none",
    "Fill color of the background rectangle framing the exported glyph."
)

_EXPORT_SVG_WIDTH = flags.DEFINE_integer(
    "export_svg_width", -1,
    "Width of the exported SVG. If not positive, the attribute is omitted and "
    "the consumer sizes the document from its viewbox."
)

_EXPORT_SVG_HEIGHT = flags.DEFINE_integer(
    "export_svg_height", -1,
    "Height of the exported SVG. If not positive, the attribute is omitted and "
    "the consumer sizes the document from its viewbox."
)

# Media type of the exported documents.
MEDIA_TYPE = "image/svg+xml"

# Framing of the exported glyph, independent of the interactive view.
EXPORT_VIEW_BOX = (-2, -8, 43.5, 74.8)

# Presentation attributes of every exported stroke.
EXPORT_STROKE_ATTRIBUTES = (
    ("stroke", "#000"),
    ("stroke-width", "2"),
    ("fill", "none"),
    ("stroke-linecap", "round"),
    ("stroke-linejoin", "round"),
)

_XML_HEADER = "<?xml version=\"1.0\" encoding=\"utf-8\"?>\n"

_SVG_TAG = "{%s}" % composer_lib.XML_SVG_NAMESPACE

_COLOR_FUNC_REGEX = re.compile(r"^(?:rgba?|hsla?)\((.*)\)$")
_ZERO_ALPHA_HEX_REGEX = re.compile(r"^#([0-9a-f]{3}0|[0-9a-f]{6}00)$")
_CSS_RULE_REGEX = re.compile(r"([^{}]+)\{([^{}]*)\}")


@dataclasses.dataclass(frozen=True)
class ExportArtifact:
  """Exported glyph ready to be saved."""

  filename: str
  media_type: str
  content: bytes

  @property
  def text(self) -> str:
    return self.content.decode("utf-8")

  @property
  def content_type(self) -> str:
    return f"{self.media_type};charset=utf-8"

  def save(self, output_dir: str) -> str:
    """Saves the artifact under its filename in the output directory.

    Args:
      output_dir: Target directory, created if missing.

    Returns:
      Path of the written file.
    """
    path = os.path.join(output_dir, self.filename)
    file_utils.write_file(path, self.content)
    return path


def export_filename(value: int) -> str:
  """Returns the name of the exported file, e.g. `runic-42.svg`."""
  return f"runic-{encoder_lib.check_number(value)}.svg"


def stroke_color_is_visible(color: Optional[str]) -> bool:
  """Checks whether the effective stroke color paints anything.

  Args:
    color: Stroke color, e.g. `#000`, `rgba(0, 0, 0, 0)` or `none`. Missing
      color is treated as `none`, which is the SVG default.

  Returns:
    False for `none`, `transparent` and colors with zero alpha.
  """
  if color is None:
    return False
  color = color.strip().lower()
  if color in ("", "none", "transparent"):
    return False
  if _ZERO_ALPHA_HEX_REGEX.match(color):
    return False
  match = _COLOR_FUNC_REGEX.match(color)
  if match:
    components = [c for c in re.split(r"[,/\s]+", match.group(1)) if c]
    if len(components) == 4:
      alpha = components[-1]
      try:
        return float(alpha.rstrip("%")) != 0.
      except ValueError:
        return True
  return True


def _effective_color(stroke: composer_lib.GlyphStroke) -> Optional[str]:
  if not stroke.active:
    return None
  return stroke.color if stroke.color else "currentColor"


def _export_tree(visible_paths: list[str]) -> ET.ElementTree:
  """Builds the standalone document from the visible path descriptions."""
  ET.register_namespace("", composer_lib.XML_SVG_NAMESPACE)
  min_x, min_y, width, height = EXPORT_VIEW_BOX
  root = ET.Element(f"{_SVG_TAG}svg")
  if _EXPORT_SVG_WIDTH.value > 0:
    root.attrib["width"] = str(_EXPORT_SVG_WIDTH.value)
  if _EXPORT_SVG_HEIGHT.value > 0:
    root.attrib["height"] = str(_EXPORT_SVG_HEIGHT.value)
  root.attrib["viewBox"] = f"{min_x} {min_y} {width} {height}"
  ET.SubElement(root, f"{_SVG_TAG}rect", {
      "x": str(min_x),
      "y": str(min_y),
      "width": str(width),
      "height": str(height),
      "fill": _EXPORT_BACKGROUND_COLOR.value,
  })
  for d in visible_paths:
    path = ET.SubElement(root, f"{_SVG_TAG}path", {"d": d})
    for name, value in EXPORT_STROKE_ATTRIBUTES:
      path.attrib[name] = value
  return ET.ElementTree(root)


def _serialize(tree: ET.ElementTree, value: int) -> ExportArtifact:
  ET.indent(tree)
  svg = _XML_HEADER + ET.tostring(tree.getroot(), encoding="unicode") + "\n"
  return ExportArtifact(
      filename=export_filename(value),
      media_type=MEDIA_TYPE,
      content=svg.encode("utf-8"),
  )


def export_glyph(
    glyph: Optional[composer_lib.GlyphDocument], value: int
) -> Optional[ExportArtifact]:
  """Exports the glyph keeping only its visible strokes.

  Visibility is taken from the activation computed by the encoder and from
  the effective color of the stroke (a highlighted stroke may have been
  recolored to transparent).

  Args:
    glyph: Currently rendered glyph, or `None` if nothing is rendered yet.
    value: Number used for naming the artifact.

  Returns:
    The artifact, or `None` if there is no glyph to export.
  """
  if glyph is None:
    logging.debug("No glyph rendered, nothing to export.")
    return None

  # Snapshot the visibility of all the strokes before building the copy.
  visible = [
      stroke_color_is_visible(_effective_color(stroke))
      for stroke in glyph.strokes
  ]
  visible_paths = [
      stroke.d for stroke, is_visible in zip(glyph.strokes, visible)
      if is_visible
  ]
  logging.info(
      "Exporting %d of %d strokes for %d.",
      len(visible_paths), len(glyph.strokes), value
  )
  return _serialize(_export_tree(visible_paths), value)


def _declared_stroke(declarations: str) -> Optional[str]:
  """Returns the stroke of a declaration block such as `stroke: red`."""
  for declaration in declarations.split(";"):
    name, _, prop = declaration.partition(":")
    if name.strip() == "stroke":
      return prop.strip()
  return None


@dataclasses.dataclass(frozen=True)
class _StrokeRule:
  """Style rule setting the stroke, e.g. `.z40 .t4 { stroke: currentColor }`.

  Only descendant combinations of tag and class selectors are supported.
  """

  selector: tuple[str, ...]
  specificity: tuple[int, int]
  stroke: str


def _style_rules(root: ET.Element) -> list[_StrokeRule]:
  """Collects the stroke rules of the embedded style sheets in order."""
  rules = []
  for style in root.iter(f"{_SVG_TAG}style"):
    for selectors, declarations in _CSS_RULE_REGEX.findall(style.text or ""):
      stroke = _declared_stroke(declarations)
      if stroke is None:
        continue
      for selector in selectors.split(","):
        parts = tuple(selector.split())
        if not parts:
          continue
        num_classes = sum(part.startswith(".") for part in parts)
        rules.append(_StrokeRule(
            selector=parts,
            specificity=(num_classes, len(parts) - num_classes),
            stroke=stroke,
        ))
  return rules


def _matches_simple(elt: ET.Element, selector: str) -> bool:
  if selector.startswith("."):
    return selector[1:] in elt.attrib.get("class", "").split()
  return selector == "*" or elt.tag == f"{_SVG_TAG}{selector}"


def _matches(
    rule: _StrokeRule, elt: ET.Element, ancestors: list[ET.Element]
) -> bool:
  if not _matches_simple(elt, rule.selector[-1]):
    return False
  remaining = list(rule.selector[:-1])
  for ancestor in reversed(ancestors):
    if not remaining:
      break
    if _matches_simple(ancestor, remaining[-1]):
      remaining.pop()
  return not remaining


def _element_stroke(
    elt: ET.Element, ancestors: list[ET.Element], rules: list[_StrokeRule]
) -> Optional[str]:
  """Returns the stroke set on the element itself.

  Inline style takes precedence over the style rules, which take precedence
  over the presentation attribute. Among the matching rules the most specific
  one wins, later rules winning ties.

  Args:
    elt: Element.
    ancestors: Ancestors of the element, root first.
    rules: Stroke rules of the document.

  Returns:
    Stroke color or `None` if the element does not set one.
  """
  inline = _declared_stroke(elt.attrib.get("style", ""))
  if inline is not None:
    return inline
  matched = [
      (rule.specificity, index, rule.stroke)
      for index, rule in enumerate(rules) if _matches(rule, elt, ancestors)
  ]
  if matched:
    return max(matched)[2]
  return elt.attrib.get("stroke")


def _resolved_strokes(root: ET.Element) -> dict[str, Optional[str]]:
  """Resolves the stroke color of every path, following inheritance."""
  rules = _style_rules(root)
  strokes = {}

  def _resolve(
      node: ET.Element, ancestors: list[ET.Element], inherited: Optional[str]
  ) -> None:
    stroke = _element_stroke(node, ancestors, rules)
    if stroke is None or stroke == "inherit":
      stroke = inherited
    if node.tag == f"{_SVG_TAG}path" and "d" in node.attrib:
      strokes[node.attrib["d"]] = stroke
    for child in node:
      _resolve(child, ancestors + [node], stroke)

  _resolve(root, [], None)
  return strokes


def export_svg_tree(
    tree: Optional[ET.ElementTree], value: int
) -> Optional[ExportArtifact]:
  """Exports an SVG tree keeping the paths with a visible stroke.

  The stroke of every path is resolved from its inline `style`, the rules of
  the embedded style sheets (such as the activation-class rules of the
  interactive view), its `stroke` attribute and those of its ancestors. Paths
  of the copy are matched against the original by their geometry.

  Args:
    tree: SVG tree, or `None` if nothing is rendered yet.
    value: Number used for naming the artifact.

  Returns:
    The artifact, or `None` if there is no tree to export.
  """
  if tree is None:
    logging.debug("No SVG rendered, nothing to export.")
    return None

  original = tree.getroot()
  strokes = _resolved_strokes(original)
  clone = copy.deepcopy(original)
  visible_paths = []
  for path in clone.iter(f"{_SVG_TAG}path"):
    d = path.attrib.get("d")
    if d is not None and stroke_color_is_visible(strokes.get(d)):
      visible_paths.append(d)
  logging.info("Exporting %d visible paths for %d.", len(visible_paths), value)
  return _serialize(_export_tree(visible_paths), value)
