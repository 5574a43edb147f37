import pytest

from metro_network.adapters.rendering import FoliumMapRenderer
from metro_network.adapters.rendering.folium_adapter import _line_segments, line_color
from metro_network.config import RenderingConfig
from metro_network.domain.errors import RenderingError


@pytest.fixture
def renderer() -> FoliumMapRenderer:
    return FoliumMapRenderer(RenderingConfig())


def test_render_route_writes_html(renderer, triangle, tmp_path):
    stations = [triangle.get_station(name) for name in ("A", "B", "C")]
    output = tmp_path / "maps" / "route.html"

    result = renderer.render(stations, output)

    assert result == output
    html = output.read_text(encoding="utf-8")
    assert "leaflet" in html.lower()
    assert "A (Blue, zone 1)" in html
    assert "C (Red, zone 3)" in html


def test_render_single_station(renderer, triangle, tmp_path):
    output = tmp_path / "one.html"
    renderer.render([triangle.get_station("B")], output)
    assert output.exists()


def test_render_empty_route_raises(renderer, tmp_path):
    with pytest.raises(RenderingError) as excinfo:
        renderer.render([], tmp_path / "empty.html")

    assert excinfo.value.renderer_type == "folium"
    assert not (tmp_path / "empty.html").exists()


@pytest.mark.parametrize(
    "line, color",
    [("Blue", "blue"), (" red ", "red"), ("Magenta", "gray"), ("", "gray")],
)
def test_line_color(line, color):
    assert line_color(line) == color


def test_line_segments_share_transfer_station(triangle):
    route = [triangle.get_station(name) for name in ("A", "B", "C")]
    segments = _line_segments(route)

    assert [[s.name for s in segment] for segment in segments] == [
        ["A", "B"],
        ["B", "C"],
    ]
