"""Test the !> spoiler extension."""

import pytest
from bs4 import BeautifulSoup
from mdpreview.markdown_parser import MarkdownParser
from mdpreview.markdown_plugins.spoiler import recognize, spoiler


@pytest.fixture
def parser():
    return MarkdownParser()


def test_recognize_takes_rest_of_line():
    token = recognize("!>  the butler did it  \nnext line")
    assert token.type == "spoiler"
    assert token.text == "the butler did it"
    assert token.raw == "!>  the butler did it  "


def test_recognize_bare_marker():
    token = recognize("!>")
    assert token.raw == "!>"
    assert token.text == ""


@pytest.mark.parametrize("text", ["! >x", "x !>y", "![img](a.png)", ""])
def test_recognize_rejects(text):
    assert recognize(text) is None


def test_render_uses_inline_capability():
    token = recognize("!>secret")
    calls = []

    def fake_inline(text):
        calls.append(text)
        return f"[{text}]"

    html = spoiler.render(token, fake_inline)

    assert calls == ["secret"]
    assert html == "<details><summary>Spoiler</summary>[secret]</details>"


def test_renders_details(parser):
    html = parser.parse("!>rest of line with **bold**")
    assert html == (
        "<p><details><summary>Spoiler</summary>"
        "rest of line with <strong>bold</strong></details></p>\n"
    )


def test_content_is_reparsed(parser):
    html = parser.parse("!>==hl== and %red%hot%% and [a link](https://example.com)")
    soup = BeautifulSoup(html, "html.parser")
    details = soup.find("details")

    assert details.summary.get_text() == "Spoiler"
    assert details.find("span", style="background-color: yellow;").get_text() == "hl"
    assert details.find("span", style="color: red;").get_text() == "hot"
    assert details.find("a")["href"] == "https://example.com"


def test_stops_at_end_of_line(parser):
    html = parser.parse("Before !>hidden\nvisible")
    soup = BeautifulSoup(html, "html.parser")

    assert soup.find("details").get_text() == "Spoilerhidden"
    assert "visible" in soup.find("p").get_text()
    assert "visible" not in soup.find("details").get_text()


def test_reference_links_resolve_inside(parser):
    html = parser.parse("!>see [docs][1]\n\n[1]: https://example.com/docs")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("details").find("a")["href"] == "https://example.com/docs"


def test_image_is_not_a_spoiler(parser):
    html = parser.parse("![alt](pic.png)")
    assert "<details>" not in html
    assert '<img src="pic.png" alt="alt">' in html
