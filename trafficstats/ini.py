"""Reading and writing of the simple INI files used for settings and skins.

The file is kept as one block of text and edited in place, so comments,
ordering and unknown keys survive a write.
"""

from __future__ import annotations

import locale
import re
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Hashable, Iterable, Mapping, Sequence

UTF8_BOM = b"\xef\xbb\xbf"
QUOTE = '"'

_NPOS = sys.maxsize
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way: junk after it is ignored, none gives 0."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _find(text: str, sub: str, start: int) -> int:
    if start >= _NPOS:
        return _NPOS
    index = text.find(sub, start)
    return _NPOS if index < 0 else index


def _split_values(text: str) -> list[str]:
    return [part for part in text.split(",") if part]


def _ansi_encoding() -> str:
    return locale.getpreferredencoding(False) or "utf-8"


def _decode(raw: bytes) -> str:
    if raw.startswith(UTF8_BOM):
        text = raw[len(UTF8_BOM):].decode("utf-8", errors="replace")
    else:
        text = raw.decode(_ansi_encoding(), errors="replace")
    return _normalize(text)


def _normalize(text: str) -> str:
    text = text.replace("\r\n", "\n")
    if text and not text.endswith("\n"):
        text += "\n"
    return text


@dataclass
class FontInfo:
    """Font settings as stored in a settings section."""

    name: str = ""
    size: int = 0
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_out: bool = False


@dataclass
class TaskbarItemColor:
    """Label and value colours of one taskbar item."""

    label: int = 0
    value: int = 0


class IniFile:
    """An INI document loaded from ``path``; changes are written back by :meth:`save`."""

    def __init__(self, path: str | PathLike[str] | None):
        self.path = Path(path) if path is not None else None
        self.save_as_utf8 = True
        self._text = ""
        if self.path is not None:
            try:
                raw = self.path.read_bytes()
            except OSError:
                return
            self._text = _decode(raw)

    @classmethod
    def from_text(cls, text: str, path: str | PathLike[str] | None = None) -> "IniFile":
        """Build a document from text already in memory."""
        ini = cls(None)
        ini.path = Path(path) if path is not None else None
        ini._text = _normalize(text)
        return ini

    @property
    def text(self) -> str:
        return self._text

    # -- locating ---------------------------------------------------------

    def _locate(self, section: str, key: str) -> tuple[int, int, int]:
        text = self._text
        app_pos = _find(text, f"[{section}]", 0)
        if app_pos == _NPOS:
            return _NPOS, _NPOS, _NPOS
        app_end = _find(text, "\n[", app_pos + 2)
        if app_end != _NPOS:
            app_end += 1
        key_pos = _find(text, f"\n{key} ", app_pos)
        if key_pos >= app_end:
            key_pos = _find(text, f"\n{key}=", app_pos)
        return app_pos, app_end, key_pos

    def _value_start(self, key_pos: int) -> int | None:
        """Index just after the '=' on the key's line, or None if the line has none."""
        eq_pos = _find(self._text, "=", key_pos + 2)
        line_end = _find(self._text, "\n", key_pos + 2)
        if eq_pos == _NPOS or eq_pos > line_end:
            return None
        return eq_pos + 1

    def _write_raw(self, section: str, key: str, value: str) -> None:
        header = f"[{section}]"
        if header not in self._text:
            if self._text and not self._text.endswith("\n"):
                self._text += "\n"
            self._text += header + "\n"
        _, app_end, key_pos = self._locate(section, key)
        text = self._text
        if key_pos >= app_end:
            line = f"{key} = {value}\n"
            if app_end == _NPOS:
                text += line
            else:
                text = text[:app_end] + line + text[app_end:]
        else:
            start = self._value_start(key_pos)
            if start is None:
                insert_at = key_pos + len(key) + 1
                text = text[:insert_at] + " =" + text[insert_at:]
                start = insert_at + 2
            end = _find(text, "\n", start)
            text = text[:start] + " " + value + text[end:]
        self._text = text

    def _read_raw(self, section: str, key: str, default: str) -> str:
        app_pos, app_end, key_pos = self._locate(section, key)
        if app_pos == _NPOS or key_pos >= app_end:
            return default
        start = self._value_start(key_pos)
        if start is None:
            return default
        end = _find(self._text, "\n", start)
        return self._text[start:end].strip()

    # -- typed access -----------------------------------------------------

    def write_string(self, section: str, key: str, value: str) -> None:
        """Store a string, quoting it when it begins or ends with a space."""
        if value and (value[0] == " " or value[-1] == " "):
            value = QUOTE + value + QUOTE
        self._write_raw(section, key, value)

    def get_string(self, section: str, key: str, default: str) -> str:
        value = self._read_raw(section, key, default)
        if value and value[0] in ("$", QUOTE):
            value = value[1:]
        if value and value[-1] in ("$", QUOTE):
            value = value[:-1]
        return value

    def write_int(self, section: str, key: str, value: int) -> None:
        self._write_raw(section, key, str(int(value)))

    def get_int(self, section: str, key: str, default: int) -> int:
        return _atoi(self._read_raw(section, key, str(default)))

    def write_bool(self, section: str, key: str, value: bool) -> None:
        self._write_raw(section, key, "true" if value else "false")

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        value = self._read_raw(section, key, "true" if default else "false")
        if value == "true":
            return True
        if value == "false":
            return False
        return _atoi(value) != 0

    def write_int_array(self, section: str, key: str, values: Iterable[int]) -> None:
        self._write_raw(section, key, "".join(f"{int(v)}," for v in values))

    def get_int_array(self, section: str, key: str, size: int, default: int = 0) -> list[int]:
        """Read ``size`` integers; missing trailing entries repeat the last one read."""
        parts = _split_values(self._read_raw(section, key, str(default)))
        values: list[int] = []
        for i in range(size):
            if i < len(parts):
                values.append(_atoi(parts[i]))
            elif values:
                values.append(values[-1])
            else:
                values.append(default)
        return values

    def write_bool_array(self, section: str, key: str, values: Sequence[bool]) -> None:
        mask = sum(1 << i for i, flag in enumerate(values) if flag)
        self.write_int(section, key, mask)

    def get_bool_array(self, section: str, key: str, size: int) -> list[bool]:
        mask = self.get_int(section, key, 0)
        return [bool((mask >> i) & 1) for i in range(size)]

    def save_font(self, section: str, font: FontInfo) -> None:
        self.write_string(section, "font_name", font.name)
        self.write_int(section, "font_size", font.size)
        self.write_bool_array(
            section, "font_style", [font.bold, font.italic, font.underline, font.strike_out]
        )

    def load_font(self, section: str, default: FontInfo) -> FontInfo:
        bold, italic, underline, strike_out = self.get_bool_array(section, "font_style", 4)
        return FontInfo(
            name=self.get_string(section, "font_name", default.name),
            size=self.get_int(section, "font_size", default.size),
            bold=bold,
            italic=italic,
            underline=underline,
            strike_out=strike_out,
        )

    def load_colors(
        self, section: str, key: str, items: Iterable[Hashable], default: int
    ) -> dict:
        """Map each of ``items`` in order to a stored colour; items past the stored list are left out."""
        parts = _split_values(self._read_raw(section, key, str(default)))
        return {item: _atoi(part) for item, part in zip(items, parts)}

    def save_colors(self, section: str, key: str, colors: Mapping[Hashable, int]) -> None:
        self._write_raw(section, key, "".join(f"{int(c)}," for c in colors.values()))

    def load_taskbar_colors(
        self, section: str, key: str, items: Iterable[Hashable], default: int
    ) -> dict:
        """Map each of ``items`` to a label/value colour pair read two at a time."""
        parts = _split_values(self._read_raw(section, key, str(default)))
        result = {}
        for index, item in enumerate(items):
            i = index * 2
            if i + 1 < len(parts):
                result[item] = TaskbarItemColor(_atoi(parts[i]), _atoi(parts[i + 1]))
        return result

    def save_taskbar_colors(
        self, section: str, key: str, colors: Mapping[Hashable, TaskbarItemColor]
    ) -> None:
        value = "".join(f"{int(c.label)},{int(c.value)}," for c in colors.values())
        self._write_raw(section, key, value)

    def save(self) -> None:
        """Write the document to its path, UTF-8 with BOM unless ``save_as_utf8`` is off."""
        if self.path is None:
            raise ValueError("no file path to save to")
        if self.save_as_utf8:
            data = UTF8_BOM + self._text.encode("utf-8")
        else:
            data = self._text.encode(_ansi_encoding(), errors="replace")
        self.path.write_bytes(data)