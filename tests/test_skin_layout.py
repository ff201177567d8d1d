import pytest

from trafficstats.ini import FontInfo
from trafficstats.skin_layout import (
    Alignment,
    DisplayItem,
    Layout,
    LayoutItem,
    SkinData,
    SkinInfo,
    load_skin_xml,
    parse_skin_xml,
    xml_node_name,
)

SAMPLE = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <skin>
    <text_color>16777215,255,65280,16711680,1,2,3,4,5</text_color>
    <specify_each_item_color>true</specify_each_item_color>
    <skin_author>someone</skin_author>
    <font name="Segoe UI" size="10" style="5"/>
    <display_text>
      <up>UP: </up>
      <down>DN: </down>
      <cpu_temperature>T: </cpu_temperature>
      <bogus>X</bogus>
    </display_text>
  </skin>
  <layout text_height="20" no_label="false">
    <layout_l width="220" height="43">
      <up x="6" y="2" width="108" align="1" show="true"/>
      <down x="114" y="2" width="110" align="2" show="true"/>
      <cpu x="6" y="21" width="108" align="0" show="false"/>
      <unknown x="1" y="1"/>
    </layout_l>
    <layout_s width="220" height="28">
      <up x="6" y="4" width="108" align="0" show="true"/>
    </layout_s>
  </layout>
  <preview width="238" height="105">
    <l x="0" y="47"/>
    <s x="3" y="0"/>
  </preview>
</root>
"""


@pytest.mark.parametrize(
    "item, name",
    [
        (DisplayItem.UP, "up"),
        (DisplayItem.DOWN, "down"),
        (DisplayItem.CPU, "cpu"),
        (DisplayItem.MEMORY, "memory"),
        (DisplayItem.GPU_USAGE, "gpu"),
        (DisplayItem.CPU_TEMP, "cpu_temperature"),
        (DisplayItem.GPU_TEMP, "gpu_temperature"),
        (DisplayItem.HDD_TEMP, "hdd_temperature"),
        (DisplayItem.MAIN_BOARD_TEMP, "main_board_temperature"),
    ],
)
def test_xml_node_name(item, name):
    assert xml_node_name(item) == name


def test_xml_node_names_are_unique():
    names = [xml_node_name(item) for item in DisplayItem]
    assert len(set(names)) == len(DisplayItem)


def test_parse_skin_info():
    data = parse_skin_xml(SAMPLE)
    info = data.skin_info
    assert info.text_color == [16777215, 255, 65280, 16711680, 1, 2, 3, 4, 5]
    assert info.specify_each_item_color is True
    assert info.skin_author == "someone"
    assert info.font_info == FontInfo(
        name="Segoe UI", size=10, bold=True, italic=False, underline=True, strike_out=False
    )
    assert info.display_text == {
        DisplayItem.UP: "UP: ",
        DisplayItem.DOWN: "DN: ",
        DisplayItem.CPU_TEMP: "T: ",
    }


def test_parse_layout():
    layout_info = parse_skin_xml(SAMPLE).layout_info
    assert layout_info.text_height == 20
    assert layout_info.no_label is False
    layout_l = layout_info.layout_l
    assert (layout_l.width, layout_l.height) == (220, 43)
    assert layout_l.get_item(DisplayItem.UP) == LayoutItem(6, 2, 108, Alignment.RIGHT, True)
    assert layout_l.get_item(DisplayItem.DOWN).align is Alignment.CENTER
    assert layout_l.get_item(DisplayItem.CPU).show is False
    assert set(layout_l.layout_items) == {DisplayItem.UP, DisplayItem.DOWN, DisplayItem.CPU}
    assert layout_info.layout_s.get_item(DisplayItem.UP) == LayoutItem(6, 4, 108, Alignment.LEFT, True)


def test_parse_preview():
    preview = parse_skin_xml(SAMPLE).preview_info
    assert (preview.width, preview.height) == (238, 105)
    assert (preview.l_pos.x, preview.l_pos.y) == (0, 47)
    assert (preview.s_pos.x, preview.s_pos.y) == (3, 0)


def test_scale_multiplies_sizes_but_not_font():
    plain = parse_skin_xml(SAMPLE)
    scaled = parse_skin_xml(SAMPLE, scale=2)
    assert scaled.layout_info.text_height == plain.layout_info.text_height * 2
    assert scaled.layout_info.layout_l.width == plain.layout_info.layout_l.width * 2
    up_plain = plain.layout_info.layout_l.get_item(DisplayItem.UP)
    up_scaled = scaled.layout_info.layout_l.get_item(DisplayItem.UP)
    assert (up_scaled.x, up_scaled.y, up_scaled.width) == (
        up_plain.x * 2,
        up_plain.y * 2,
        up_plain.width * 2,
    )
    assert scaled.preview_info.l_pos.y == plain.preview_info.l_pos.y * 2
    assert scaled.skin_info.font_info.size == plain.skin_info.font_info.size


def test_short_color_list_is_padded_with_zeros():
    text = "<root><skin><text_color>7,8</text_color></skin></root>"
    info = parse_skin_xml(text).skin_info
    assert info.text_color == [7, 8] + [0] * (len(DisplayItem) - 2)


def test_missing_attributes_read_as_zero():
    text = '<root><layout><layout_l><memory/></layout_l></layout></root>'
    layout_info = parse_skin_xml(text).layout_info
    assert layout_info.text_height == 0
    assert layout_info.layout_l.get_item(DisplayItem.MEMORY) == LayoutItem()


def test_malformed_document_gives_empty_skin():
    assert parse_skin_xml("<root><skin>") == SkinData()


def test_load_skin_xml_round_trip(tmp_path):
    path = tmp_path / "skin.xml"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_skin_xml(path, 1.5) == parse_skin_xml(SAMPLE, 1.5)


def test_load_missing_file_gives_empty_skin(tmp_path):
    assert load_skin_xml(tmp_path / "absent.xml") == SkinData()


def test_get_item_missing_is_hidden_default():
    layout = Layout(width=10, height=5)
    item = layout.get_item(DisplayItem.HDD_TEMP)
    assert item == LayoutItem()
    assert item.show is False


def test_text_color_at():
    info = SkinInfo(text_color=[11, 22, 33])
    assert info.text_color_at(1) == 22
    assert info.text_color_at(10) == 11
    assert info.text_color_at(-1) == 11
    assert SkinInfo().text_color_at(0) == 0