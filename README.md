# trafficstats

`trafficstats` reads and writes the data files of a network traffic monitor. It covers the daily traffic history, INI settings and skin descriptions. It also works out the figures a history view shows: rows, bar lengths, bar colours and column widths.

It uses only the standard library.

## Modules

- `trafficstats.ini`: `IniFile` holds an INI document as text and edits it in place. Comments, ordering and unknown keys are kept.
  - Typed access: `get_string`/`write_string`, `get_int`/`write_int`, `get_bool`/`write_bool`, `get_int_array`/`write_int_array` and `get_bool_array`/`write_bool_array`.
  - Fonts: `load_font`/`save_font`, using `FontInfo`.
  - Colours: `load_colors`/`save_colors`, and `load_taskbar_colors`/`save_taskbar_colors`, using `TaskbarItemColor`.
  - Nothing reaches the disk until `save()` is called. The file is written as UTF-8 with a BOM. Set `save_as_utf8 = False` to write it in the locale's encoding instead.
  - `IniFile.from_text` builds a document from a string.
- `trafficstats.simplexml`: `extract_node(node, content)` returns the text between the first `<node>` and the first `</node>`. `SimpleXml.get_node(node, parent)` can look inside a parent node first. `SimpleXml.from_file` loads a file; a missing file gives an empty document.
- `trafficstats.history`: `HistoryTrafficFile` loads, sorts, merges and saves a daily traffic history, newest day first.
  - Each line is `YYYY/MM/DD up/down`, or `YYYY/MM/DD total` for a record that holds only a total.
  - `parse_line` reads one line into a `HistoryTraffic`.
  - After `load` or `merge`, records with the same date are added together and today's record is at the front. Today's upload and download, in bytes, are in `today_up_traffic` and `today_down_traffic`.
  - `load_size` reads only the count in the `lines: "N"` header.
- `trafficstats.scroll`: `ScrollState` models the vertical scroll bar of a page taller than its tab. Its moving methods return how far the content has to move.
- `trafficstats.history_view`: groups history records by day, month, quarter or year.
  - Grouping: `ViewType`, `build_rows` and `ListRow`.
  - Figures: `max_row_traffic`, `bar_range`, `bar_width` (linear or log scale), `traffic_color` (`TrafficColor`) and `column_widths`.
- `trafficstats.skin_layout`: the skin data classes and the XML reader.
  - Data classes: `SkinInfo`, `LayoutInfo`, `Layout`, `LayoutItem`, `PreviewInfo` and `SkinData`.
  - Enums: `DisplayItem` and `Alignment`.
  - Reading `skin.xml`: `parse_skin_xml` and `load_skin_xml`. Sizes are multiplied by a `scale` factor.
- `trafficstats.skin`: `load_skin_ini` reads the older `skin.ini` form. `SkinFile.load` picks the INI or the XML reader by the file extension. `SkinFile.item_colors` gives each item's text colour.

## Example

```python
import datetime
from trafficstats.history import HistoryTrafficFile

history = HistoryTrafficFile("history_traffic.dat")
history.load(today=datetime.date.today())
print(history.today_down_traffic)
history.save()
```

```python
from trafficstats.ini import IniFile

ini = IniFile("config.ini")
ini.write_int("histroy_traffic", "width", 640)
width = ini.get_int("histroy_traffic", "width", -1)
ini.save()
```

```python
from trafficstats.history_view import ViewType, build_rows, max_row_traffic

rows = build_rows(history.traffics, ViewType.MONTH)
peak = max_row_traffic(rows, ViewType.MONTH)
```

## What it does not do

- It does not measure network traffic, CPU, memory or temperatures.
- It has no windows, drawing or tray icon.
- It has no command-line program.
- Skin background images and fonts are not loaded. Only the description of a skin is read.

## Running the tests

```
pip install -e .[test]
pytest
```