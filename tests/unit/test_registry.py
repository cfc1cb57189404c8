"""Test extension registration and precedence."""

import re
from dataclasses import dataclass

import pytest
from mdpreview.config import RendererConfig
from mdpreview.markdown_parser import MarkdownParser
from mdpreview.models import BLOCK, INLINE, ExtensionDefinition, ExtensionToken, find_probe
from mdpreview.registry import ExtensionRegistry, default_registry

AT_RE = re.compile(r"@@(.*?)@@")


@dataclass(frozen=True)
class AtToken(ExtensionToken):
    text: str = ""


def make_at_extension(name, tag, probe=find_probe("@@")):
    """Test-only extension; every instance claims the same ``@@x@@`` syntax."""

    def recognize(text):
        match = AT_RE.match(text)
        if not match:
            return None
        return AtToken(type=name, raw=match.group(0), text=match.group(1))

    def render(token, render_inline):
        return f'<{tag} class="{name}">{token.text}</{tag}>'

    return ExtensionDefinition(name=name, level=INLINE, probe=probe, recognize=recognize, render=render)


FIRST = make_at_extension("first", "b")
SECOND = make_at_extension("second", "i")


def test_default_registry_order():
    registry = default_registry()
    assert registry.names == ("coloredText", "highlight", "spoiler", "admonition")
    assert [d.name for d in registry.inline] == ["coloredText", "highlight", "spoiler"]
    assert [d.name for d in registry.block] == ["admonition"]


def test_lookup():
    registry = default_registry()
    assert "spoiler" in registry
    assert "missing" not in registry
    assert registry.get("highlight").level == INLINE
    assert registry.get("missing") is None
    assert len(registry) == 4
    assert [d.name for d in registry] == list(registry.names)


def test_duplicate_names_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        ExtensionRegistry([FIRST, FIRST])


def test_invalid_level_rejected():
    bad = ExtensionDefinition(name="bad", level="sideways", recognize=lambda text: None,
                              render=lambda token, render_inline: "")
    with pytest.raises(ValueError, match="invalid level"):
        ExtensionRegistry([bad])


def test_unknown_level_lookup():
    with pytest.raises(ValueError):
        default_registry().level("sideways")


def test_match_first_registered_wins():
    text = "@@x@@ rest"

    definition, token = ExtensionRegistry([FIRST, SECOND]).match(INLINE, text)
    assert definition is FIRST
    assert token.type == "first"

    definition, token = ExtensionRegistry([SECOND, FIRST]).match(INLINE, text)
    assert definition is SECOND
    assert token.type == "second"


def test_match_skips_failing_extensions():
    definition, token = default_registry().match(INLINE, "==x== tail")
    assert definition.name == "highlight"
    assert token.raw == "==x=="


def test_match_respects_level():
    assert default_registry().match(BLOCK, "==x==") is None
    definition, _ = default_registry().match(BLOCK, "!!! note\nbody")
    assert definition.name == "admonition"


def test_match_none():
    assert default_registry().match(INLINE, "plain text") is None


@pytest.mark.parametrize("order, expected", [
    ((FIRST, SECOND), '<b class="first">x</b>'),
    ((SECOND, FIRST), '<i class="second">x</i>'),
])
def test_render_order_sensitivity(order, expected):
    parser = MarkdownParser(RendererConfig(extensions=ExtensionRegistry(order)))
    assert parser.parse("a @@x@@ b") == f"<p>a {expected} b</p>\n"


def test_probe_is_only_a_hint():
    """Missing or over-eager probes give the same result as exact ones."""
    text = "start @@one@@ middle @@two@@ end"
    expected = MarkdownParser(RendererConfig(extensions=ExtensionRegistry([FIRST]))).parse(text)

    for probe in (None, lambda text: 0):
        registry = ExtensionRegistry([make_at_extension("first", "b", probe=probe)])
        assert MarkdownParser(RendererConfig(extensions=registry)).parse(text) == expected

    assert expected == '<p>start <b class="first">one</b> middle <b class="first">two</b> end</p>\n'


def test_empty_registry_leaves_syntax_alone():
    parser = MarkdownParser(RendererConfig(extensions=ExtensionRegistry()))
    assert parser.parse("==x== !>y") == "<p>==x== !&gt;y</p>\n"


def test_token_requires_raw():
    with pytest.raises(ValueError):
        ExtensionToken(type="empty", raw="")


def test_registry_is_read_only():
    registry = default_registry()
    with pytest.raises(AttributeError):
        registry.inline.append(FIRST)
    with pytest.raises(TypeError):
        registry._by_name["x"] = FIRST
