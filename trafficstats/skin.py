"""Loading a skin from either its XML description or the older INI form."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from trafficstats.ini import FontInfo, IniFile
from trafficstats.skin_layout import (
    Alignment,
    DisplayItem,
    Layout,
    LayoutInfo,
    LayoutItem,
    PreviewInfo,
    PreviewPos,
    SkinData,
    SkinInfo,
    load_skin_xml,
)

_SKIN = "skin"
_LAYOUT = "layout"
_MISSING = "\x00missing\x00"

# Key prefix and defaults (x, y, width) of each item in the INI layout.
_LARGE_DEFAULTS = {
    DisplayItem.UP: ("up", 6, 2, 108, True),
    DisplayItem.DOWN: ("down", 114, 2, 110, True),
    DisplayItem.CPU: ("cpu", 6, 21, 108, True),
    DisplayItem.MEMORY: ("memory", 114, 21, 110, True),
}
_SMALL_DEFAULTS = {
    DisplayItem.UP: ("up", 6, 4, 108, True),
    DisplayItem.DOWN: ("down", 114, 4, 110, True),
    DisplayItem.CPU: ("cpu", 0, 0, 0, False),
    DisplayItem.MEMORY: ("memory", 0, 0, 0, False),
}
_DISPLAY_TEXT_KEYS = {
    DisplayItem.UP: "up_string",
    DisplayItem.DOWN: "down_string",
    DisplayItem.CPU: "cpu_string",
    DisplayItem.MEMORY: "memory_string",
}


def _dpi(value: int, scale: float) -> int:
    return int(value * scale)


def _align(value: int) -> Alignment:
    try:
        return Alignment(value)
    except ValueError:
        return Alignment.LEFT


def _ini_layout(
    ini: IniFile,
    suffix: str,
    width: int,
    height: int,
    defaults: dict,
    scale: float,
) -> Layout:
    layout = Layout(
        width=_dpi(ini.get_int(_LAYOUT, f"width_{suffix}", width), scale),
        height=_dpi(ini.get_int(_LAYOUT, f"height_{suffix}", height), scale),
    )
    for item, (prefix, x, y, item_width, show) in defaults.items():
        layout.layout_items[item] = LayoutItem(
            x=_dpi(ini.get_int(_LAYOUT, f"{prefix}_x_{suffix}", x), scale),
            y=_dpi(ini.get_int(_LAYOUT, f"{prefix}_y_{suffix}", y), scale),
            width=_dpi(ini.get_int(_LAYOUT, f"{prefix}_width_{suffix}", item_width), scale),
            align=_align(ini.get_int(_LAYOUT, f"{prefix}_align_{suffix}", 0)),
            show=ini.get_bool(_LAYOUT, f"show_{prefix}_{suffix}", show),
        )
    return layout


def load_skin_ini(path: str | PathLike[str], scale: float = 1.0) -> SkinData:
    """Read a skin from the older INI form; sizes are multiplied by ``scale``."""
    ini = IniFile(path)

    info = SkinInfo()
    colors = ini.load_colors(_SKIN, "text_color", list(DisplayItem), 0)
    info.text_color = list(colors.values())
    info.specify_each_item_color = ini.get_bool(_SKIN, "specify_each_item_color", False)
    info.font_info = ini.load_font(_SKIN, FontInfo())
    info.skin_author = ini.get_string(_SKIN, "skin_author", "unknow")
    for item, key in _DISPLAY_TEXT_KEYS.items():
        text = ini.get_string(_SKIN, key, _MISSING)
        if text != _MISSING:
            info.display_text[item] = text

    preview = PreviewInfo(
        width=_dpi(ini.get_int(_LAYOUT, "preview_width", 238), scale),
        height=_dpi(ini.get_int(_LAYOUT, "preview_height", 105), scale),
        l_pos=PreviewPos(
            _dpi(ini.get_int(_LAYOUT, "preview_x_l", 0), scale),
            _dpi(ini.get_int(_LAYOUT, "preview_y_l", 47), scale),
        ),
        s_pos=PreviewPos(
            _dpi(ini.get_int(_LAYOUT, "preview_x_s", 0), scale),
            _dpi(ini.get_int(_LAYOUT, "preview_y_s", 0), scale),
        ),
    )

    layout_info = LayoutInfo(
        text_height=_dpi(ini.get_int(_LAYOUT, "text_height", 20), scale),
        no_label=ini.get_bool(_LAYOUT, "no_text", False),
        layout_l=_ini_layout(ini, "l", 220, 43, _LARGE_DEFAULTS, scale),
        layout_s=_ini_layout(ini, "s", 220, 28, _SMALL_DEFAULTS, scale),
    )
    return SkinData(skin_info=info, layout_info=layout_info, preview_info=preview)


class SkinFile:
    """A loaded skin: its description, layouts and preview placement."""

    def __init__(self, scale: float = 1.0):
        self.scale = scale
        self.skin_info = SkinInfo()
        self.layout_info = LayoutInfo()
        self.preview_info = PreviewInfo()
        self.path: Path | None = None

    def _apply(self, data: SkinData) -> None:
        self.skin_info = data.skin_info
        self.layout_info = data.layout_info
        self.preview_info = data.preview_info

    def load(self, path: str | PathLike[str]) -> None:
        """Load ``path``: INI when its extension is ``ini``, XML otherwise."""
        self.path = Path(path)
        if self.path.suffix[1:] == "ini":
            self.load_from_ini(path)
        else:
            self.load_from_xml(path)

    def load_from_xml(self, path: str | PathLike[str]) -> None:
        self._apply(load_skin_xml(path, self.scale))

    def load_from_ini(self, path: str | PathLike[str]) -> None:
        self._apply(load_skin_ini(path, self.scale))

    def item_colors(self) -> dict[DisplayItem, int]:
        """Text colour of each item as the skin gives it.

        With one colour per item, items past the colour list have none;
        otherwise every item takes the first colour.
        """
        colors = self.skin_info.text_color
        if self.skin_info.specify_each_item_color:
            return {item: color for item, color in zip(DisplayItem, colors)}
        if colors:
            return {item: colors[0] for item in DisplayItem}
        return {}