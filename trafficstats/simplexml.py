"""A minimal tag extractor for small, well-known XML documents."""

from __future__ import annotations

import locale
from os import PathLike
from pathlib import Path

_UTF8_BOM = b"\xef\xbb\xbf"


def extract_node(node: str, content: str) -> str:
    """Return the text between the first ``<node>`` and the first ``</node>``, or ''."""
    start_tag = f"<{node}>"
    end_tag = f"</{node}>"
    start = content.find(start_tag)
    end = content.find(end_tag)
    if start < 0 or end < 0:
        return ""
    begin = start + len(start_tag)
    if end < begin:
        return content[begin:]
    return content[begin:end]


class SimpleXml:
    """Holds XML text and answers simple node lookups."""

    def __init__(self, content: str = ""):
        self.content = content

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> "SimpleXml":
        """Load a file; a missing or unreadable file gives an empty document."""
        try:
            raw = Path(path).read_bytes()
        except OSError:
            return cls()
        if raw.startswith(_UTF8_BOM):
            text = raw[len(_UTF8_BOM):].decode("utf-8", errors="replace")
        else:
            encoding = locale.getpreferredencoding(False) or "utf-8"
            text = raw.decode(encoding, errors="replace")
        text = text.replace("\r\n", "\n")
        if text and not text.endswith("\n"):
            text += "\n"
        return cls(text)

    def get_node(self, node: str, parent: str | None = None) -> str:
        """Text of ``node``, looked up inside ``parent`` when one is given."""
        content = self.content if parent is None else extract_node(parent, self.content)
        return extract_node(node, content)