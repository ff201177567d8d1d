"""Skin description: text colours, fonts, item layout and preview placement.

This module reads the XML form of a skin description (``skin.xml``).
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from pathlib import Path

from trafficstats.ini import FontInfo

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class DisplayItem(IntEnum):
    """The values a skin can show, in display order."""

    UP = 0
    DOWN = 1
    CPU = 2
    MEMORY = 3
    GPU_USAGE = 4
    CPU_TEMP = 5
    GPU_TEMP = 6
    HDD_TEMP = 7
    MAIN_BOARD_TEMP = 8


class Alignment(IntEnum):
    """Horizontal alignment of an item's text."""

    LEFT = 0
    RIGHT = 1
    CENTER = 2


_XML_NODE_NAMES = {
    DisplayItem.UP: "up",
    DisplayItem.DOWN: "down",
    DisplayItem.CPU: "cpu",
    DisplayItem.MEMORY: "memory",
    DisplayItem.GPU_USAGE: "gpu",
    DisplayItem.CPU_TEMP: "cpu_temperature",
    DisplayItem.GPU_TEMP: "gpu_temperature",
    DisplayItem.HDD_TEMP: "hdd_temperature",
    DisplayItem.MAIN_BOARD_TEMP: "main_board_temperature",
}
_ITEMS_BY_NODE_NAME = {name: item for item, name in _XML_NODE_NAMES.items()}


def xml_node_name(item: DisplayItem) -> str:
    """Element name that stands for ``item`` in a skin XML file."""
    return _XML_NODE_NAMES.get(item, "")


def _atoi(text: str | None) -> int:
    match = _INT_PREFIX.match(text or "")
    return int(match.group(1)) if match else 0


def _to_bool(text: str | None) -> bool:
    value = (text or "").strip()
    if value.lower() == "true":
        return True
    return _atoi(value) != 0


def _to_alignment(value: int) -> Alignment:
    try:
        return Alignment(value)
    except ValueError:
        return Alignment.LEFT


@dataclass
class LayoutItem:
    """Position, width, alignment and visibility of one item."""

    x: int = 0
    y: int = 0
    width: int = 0
    align: Alignment = Alignment.LEFT
    show: bool = False


@dataclass
class Layout:
    """Size of the window and the layout of each item in it."""

    width: int = 0
    height: int = 0
    layout_items: dict[DisplayItem, LayoutItem] = field(default_factory=dict)

    def get_item(self, item: DisplayItem) -> LayoutItem:
        """Layout of ``item``, or a hidden empty layout when it has none."""
        return self.layout_items.get(item, LayoutItem())


@dataclass
class LayoutInfo:
    """Layouts with ("l") and without ("s") the extra information shown."""

    text_height: int = 0
    no_label: bool = False
    layout_l: Layout = field(default_factory=Layout)
    layout_s: Layout = field(default_factory=Layout)


@dataclass
class PreviewPos:
    x: int = 0
    y: int = 0


@dataclass
class PreviewInfo:
    """Size of the preview picture and where each window sits in it."""

    width: int = 0
    height: int = 0
    l_pos: PreviewPos = field(default_factory=PreviewPos)
    s_pos: PreviewPos = field(default_factory=PreviewPos)


@dataclass
class SkinInfo:
    """Colours, font, author and label texts of a skin."""

    text_color: list[int] = field(default_factory=list)
    specify_each_item_color: bool = False
    skin_author: str = ""
    font_info: FontInfo = field(default_factory=FontInfo)
    display_text: dict[DisplayItem, str] = field(default_factory=dict)

    def text_color_at(self, index: int) -> int:
        """Colour of item ``index``; falls back to the first colour, then to 0."""
        if 0 <= index < len(self.text_color):
            return self.text_color[index]
        if self.text_color:
            return self.text_color[0]
        return 0


@dataclass
class SkinData:
    """Everything a skin description holds."""

    skin_info: SkinInfo = field(default_factory=SkinInfo)
    layout_info: LayoutInfo = field(default_factory=LayoutInfo)
    preview_info: PreviewInfo = field(default_factory=PreviewInfo)


def _dpi(value: int, scale: float) -> int:
    return int(value * scale)


def _attr(element: ET.Element, name: str) -> str:
    return element.get(name, "")


def _text(element: ET.Element) -> str:
    return element.text or ""


def _layout_item(element: ET.Element, scale: float) -> LayoutItem:
    return LayoutItem(
        x=_dpi(_atoi(_attr(element, "x")), scale),
        y=_dpi(_atoi(_attr(element, "y")), scale),
        width=_dpi(_atoi(_attr(element, "width")), scale),
        align=_to_alignment(_atoi(_attr(element, "align"))),
        show=_to_bool(_attr(element, "show")),
    )


def _layout(element: ET.Element, scale: float) -> Layout:
    layout = Layout(
        width=_dpi(_atoi(_attr(element, "width")), scale),
        height=_dpi(_atoi(_attr(element, "height")), scale),
    )
    for child in element:
        item = _ITEMS_BY_NODE_NAME.get(child.tag)
        if item is not None:
            layout.layout_items[item] = _layout_item(child, scale)
    return layout


def _read_skin_section(element: ET.Element, info: SkinInfo) -> None:
    item_count = len(DisplayItem)
    for child in element:
        name = child.tag
        if name == "text_color":
            info.text_color.extend(
                _atoi(part) for part in _text(child).split(",") if part
            )
        # Padding the colour list takes the place of the other branches
        # for the element where it happens.
        if len(info.text_color) < item_count:
            info.text_color.extend([0] * (item_count - len(info.text_color)))
        elif name == "specify_each_item_color":
            info.specify_each_item_color = _to_bool(_text(child))
        elif name == "skin_author":
            info.skin_author = _text(child)
        elif name == "font":
            style = _atoi(_attr(child, "style"))
            info.font_info = FontInfo(
                name=_attr(child, "name"),
                size=_atoi(_attr(child, "size")),
                bold=bool(style & 1),
                italic=bool(style >> 1 & 1),
                underline=bool(style >> 2 & 1),
                strike_out=bool(style >> 3 & 1),
            )
        elif name == "display_text":
            for text_item in child:
                item = _ITEMS_BY_NODE_NAME.get(text_item.tag)
                if item is not None:
                    info.display_text[item] = _text(text_item)


def _read_root(root: ET.Element, scale: float) -> SkinData:
    data = SkinData()
    for child in root:
        name = child.tag
        if name == "skin":
            _read_skin_section(child, data.skin_info)
        elif name == "layout":
            layout_info = data.layout_info
            layout_info.text_height = _dpi(_atoi(_attr(child, "text_height")), scale)
            layout_info.no_label = _to_bool(_attr(child, "no_label"))
            for sub in child:
                if sub.tag == "layout_l":
                    layout_info.layout_l = _layout(sub, scale)
                elif sub.tag == "layout_s":
                    layout_info.layout_s = _layout(sub, scale)
        elif name == "preview":
            preview = data.preview_info
            preview.width = _dpi(_atoi(_attr(child, "width")), scale)
            preview.height = _dpi(_atoi(_attr(child, "height")), scale)
            for sub in child:
                pos = PreviewPos(
                    _dpi(_atoi(_attr(sub, "x")), scale),
                    _dpi(_atoi(_attr(sub, "y")), scale),
                )
                if sub.tag == "l":
                    preview.l_pos = pos
                elif sub.tag == "s":
                    preview.s_pos = pos
    return data


def parse_skin_xml(text: str | bytes, scale: float = 1.0) -> SkinData:
    """Parse a skin XML document; sizes are multiplied by ``scale``.

    A document that cannot be parsed gives an empty skin.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError:
        return SkinData()
    return _read_root(root, scale)


def load_skin_xml(path: str | PathLike[str], scale: float = 1.0) -> SkinData:
    """Read a skin XML file; a missing or unreadable file gives an empty skin."""
    try:
        raw = Path(path).read_bytes()
    except OSError:
        return SkinData()
    return parse_skin_xml(raw, scale)