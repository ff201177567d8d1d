from trafficstats.skin import SkinFile, load_skin_ini
from trafficstats.skin_layout import Alignment, DisplayItem


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_ini_gives_defaults(tmp_path):
    data = load_skin_ini(tmp_path / "absent.ini")
    assert data.preview_info.width == 238
    assert data.preview_info.height == 105
    assert data.preview_info.l_pos.y == 47
    assert data.layout_info.text_height == 20
    assert data.layout_info.layout_l.width == 220
    assert data.layout_info.layout_l.height == 43
    assert data.layout_info.layout_s.height == 28
    assert data.skin_info.skin_author == "unknow"
    assert data.skin_info.display_text == {}


def test_default_visibility(tmp_path):
    data = load_skin_ini(tmp_path / "absent.ini")
    small = data.layout_info.layout_s
    assert small.get_item(DisplayItem.UP).show is True
    assert small.get_item(DisplayItem.CPU).show is False
    assert data.layout_info.layout_l.get_item(DisplayItem.MEMORY).show is True
    assert data.layout_info.layout_l.get_item(DisplayItem.DOWN).x == 114


def test_scale_applies_to_sizes(tmp_path):
    plain = load_skin_ini(tmp_path / "absent.ini", 1.0)
    doubled = load_skin_ini(tmp_path / "absent.ini", 2.0)
    assert doubled.preview_info.width == 2 * plain.preview_info.width
    assert doubled.layout_info.text_height == 2 * plain.layout_info.text_height
    up_plain = plain.layout_info.layout_l.get_item(DisplayItem.UP)
    up_double = doubled.layout_info.layout_l.get_item(DisplayItem.UP)
    assert up_double.width == 2 * up_plain.width


def test_ini_values_are_read(tmp_path):
    path = _write(
        tmp_path,
        "skin.ini",
        "[skin]\n"
        "text_color = 10,20,30,\n"
        "specify_each_item_color = true\n"
        "skin_author = someone\n"
        "up_string = UP: \n"
        "font_name = Arial\n"
        "font_size = 9\n"
        "font_style = 1\n"
        "[layout]\n"
        "text_height = 18\n"
        "no_text = 1\n"
        "up_x_l = 7\n"
        "up_align_l = 2\n"
        "show_cpu_s = true\n",
    )
    data = load_skin_ini(path)
    assert data.skin_info.text_color == [10, 20, 30]
    assert data.skin_info.specify_each_item_color is True
    assert data.skin_info.skin_author == "someone"
    assert data.skin_info.display_text == {DisplayItem.UP: "UP:"}
    assert data.skin_info.font_info.name == "Arial"
    assert data.skin_info.font_info.size == 9
    assert data.skin_info.font_info.bold is True
    assert data.skin_info.font_info.italic is False
    assert data.layout_info.text_height == 18
    assert data.layout_info.no_label is True
    up = data.layout_info.layout_l.get_item(DisplayItem.UP)
    assert up.x == 7
    assert up.align is Alignment.CENTER
    assert data.layout_info.layout_s.get_item(DisplayItem.CPU).show is True


def test_load_dispatches_on_extension(tmp_path):
    ini_path = _write(tmp_path, "skin.ini", "[layout]\npreview_width = 300\n")
    xml_path = _write(
        tmp_path,
        "skin.xml",
        '<root><preview width="120" height="60"><l x="1" y="2"/></preview></root>',
    )
    skin = SkinFile()
    skin.load(ini_path)
    assert skin.preview_info.width == 300
    skin.load(xml_path)
    assert skin.preview_info.width == 120
    assert skin.preview_info.l_pos.y == 2


def test_load_from_xml_uses_scale(tmp_path):
    xml_path = _write(
        tmp_path, "skin.xml", '<root><layout text_height="10" no_label="true"/></root>'
    )
    skin = SkinFile(scale=2.0)
    skin.load_from_xml(xml_path)
    assert skin.layout_info.text_height == 20
    assert skin.layout_info.no_label is True


def test_item_colors_each_item(tmp_path):
    skin = SkinFile()
    skin.skin_info.specify_each_item_color = True
    skin.skin_info.text_color = [5, 6]
    assert skin.item_colors() == {DisplayItem.UP: 5, DisplayItem.DOWN: 6}


def test_item_colors_single_color():
    skin = SkinFile()
    skin.skin_info.text_color = [7, 8]
    colors = skin.item_colors()
    assert set(colors) == set(DisplayItem)
    assert set(colors.values()) == {7}


def test_item_colors_empty():
    skin = SkinFile()
    assert skin.item_colors() == {}


def test_missing_ini_color_defaults_to_one_entry(tmp_path):
    data = load_skin_ini(tmp_path / "absent.ini")
    assert data.skin_info.text_color == [0]