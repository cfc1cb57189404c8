"""Spoiler extension: ``!>`` hides the rest of the line behind a
``<details>`` disclosure widget.

Unlike highlight and colored text the hidden content is parsed as inline
markdown, so emphasis, links and the other extensions work inside it.
"""
import re
from typing import Optional

from ..models import INLINE, ExtensionDefinition, InlineRenderer, SpoilerToken, find_probe

SPOILER_RE = re.compile(r"!>(.*)")
SPOILER_LABEL = "Spoiler"


def recognize(text: str) -> Optional[SpoilerToken]:
    match = SPOILER_RE.match(text)
    if not match:
        return None
    return SpoilerToken(type="spoiler", raw=match.group(0), text=match.group(1).strip())


def render(token: SpoilerToken, render_inline: InlineRenderer) -> str:
    inner_html = render_inline(token.text)
    return f"<details><summary>{SPOILER_LABEL}</summary>{inner_html}</details>"


spoiler = ExtensionDefinition(
    name="spoiler",
    level=INLINE,
    probe=find_probe("!>"),
    recognize=recognize,
    render=render,
)
