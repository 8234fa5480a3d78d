"""
Tests for the HTML overlay renderer.
"""

import dataclasses

import pytest

from letterbox.layout import GlyphBox, reconcile
from letterbox.render import PageRenderer


@pytest.fixture(scope="module")
def renderer():
    return PageRenderer.from_package()


class TestPageRenderer:

    def test_characters_positioned_by_origin(self, renderer):
        doc = reconcile("a b", [GlyphBox("a", 5, 10), GlyphBox("b", 20, 11)], engine_version="5.3.0", image_name="page.png")
        html = renderer.render(doc, image_url="/files/page.png")

        assert "Tesseract version: 5.3.0" in html
        assert "Displaying image: page.png" in html
        assert '<img src="/files/page.png" />' in html
        assert 'class="character character-a" style="bottom: 10px; left: 5px;">a </div>' in html
        assert 'class="character character-b" style="bottom: 11px; left: 20px;">b</div>' in html

    def test_one_line_div_per_line(self, renderer):
        doc = reconcile("x\n\ny", [GlyphBox("x", 0, 0), GlyphBox("y", 0, 0)])
        html = renderer.render(doc, image_url="/files/x.png")
        assert html.count('<div class="line">') == 3

    def test_glyphs_are_escaped(self, renderer):
        doc = reconcile("<&", [GlyphBox("<", 0, 0), GlyphBox("&", 9, 0)])
        html = renderer.render(doc, image_url="/files/x.png")
        assert ">&lt;</div>" in html
        assert ">&amp;</div>" in html
        assert "><</div>" not in html

    def test_from_string(self):
        r = PageRenderer.from_string("{{ image_name }}:{% for ln in lines %}[{{ ln.text }}]{% endfor %}")
        doc = reconcile("a b\nc", [GlyphBox("a", 0, 0), GlyphBox("b", 0, 0), GlyphBox("c", 0, 0)], image_name="i.png")
        assert r.render(doc, image_url="") == "i.png:[a b][c]"

    def test_immutable(self, renderer):
        with pytest.raises(dataclasses.FrozenInstanceError):
            renderer.template = None
