from pubquality.aggregate import aggregate
from pubquality.constants import DARK_TEXT_COLOR, LIGHT_TEXT_COLOR
from pubquality.storage import Record
from pubquality.ui import _section_header_html, quality_pie_chart, quality_text_color
from pubquality.ui_helpers import source_signature, toggle_expanded


class TestToggleExpanded:
    def test_opens_from_collapsed(self):
        assert toggle_expanded(None, "BIEN") == "BIEN"

    def test_switching_sections_keeps_single_open(self):
        state = toggle_expanded(None, "BIEN")
        state = toggle_expanded(state, "REGULAR")
        assert state == "REGULAR"

    def test_toggling_open_section_collapses(self):
        state = toggle_expanded(None, "BIEN")
        state = toggle_expanded(state, "REGULAR")
        state = toggle_expanded(state, "REGULAR")
        assert state is None


def test_source_signature_tracks_file_changes(tmp_path):
    path = tmp_path / "pubs.csv"
    assert source_signature(path) == (False, 0, 0)
    path.write_text("link,quality\n", encoding="utf-8")
    first = source_signature(path)
    assert first[0] is True
    path.write_text("link,quality\nhttp://a,BIEN\n", encoding="utf-8")
    assert source_signature(path) != first


def test_source_signature_for_url():
    assert source_signature("https://example.com/pubs.csv") == (True, 0, 0)


def test_quality_text_color():
    assert quality_text_color("MUY BIEN") == LIGHT_TEXT_COLOR
    assert quality_text_color("MUY MALA") == LIGHT_TEXT_COLOR
    assert quality_text_color("REGULAR") == DARK_TEXT_COLOR
    assert quality_text_color("MALA") == DARK_TEXT_COLOR


def test_section_header_colors_and_counts():
    html = _section_header_html("BIEN", 3)
    assert "(3 publicaciones)" in html
    assert "#4caf50" in html


def test_pie_chart_legend_follows_first_seen_order():
    view = aggregate(
        [Record("a", "REGULAR"), Record("b", "MUY BIEN"), Record("c", "REGULAR"), Record("d", "WEIRD")]
    )
    chart_dict = quality_pie_chart(view).to_dict()
    scale = chart_dict["encoding"]["color"]["scale"]
    assert scale["domain"] == ["REGULAR", "MUY BIEN", "WEIRD"]
    assert scale["range"] == ["#ffc107", "#1b5e20", "#e5e7eb"]
    mark = chart_dict["mark"]
    assert (mark["type"] if isinstance(mark, dict) else mark) == "arc"
