"""Admonition call-out boxes.

Syntax::

    !!! warning Be careful
    This is risky.
    Still part of the body.

    Not part of the admonition.

The opening line carries the kind and an optional title. The body is every
following line up to the first blank line, the next ``!!!`` line, or the end
of the input.
"""
import re
from typing import Optional

from ..models import BLOCK, AdmonitionToken, ExtensionDefinition, InlineRenderer, find_probe

ADMONITION_ICONS = {
    "note": "📝",
    "info": "ℹ️",
    "warning": "⚠️",
    "danger": "🚨",
    "greentext": "💬",
}

MARKER = "!!!"

HEADER_RE = re.compile(
    r"!!![ \t]*(" + "|".join(ADMONITION_ICONS) + r")(?:[ \t]+([^\n]*))?[ \t]*(?=\n|$)"
)


def _ends_body(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith(MARKER)


def recognize(text: str) -> Optional[AdmonitionToken]:
    header = HEADER_RE.match(text)
    if not header:
        return None

    # Walk the body one line at a time; stop before a blank or '!!!' line.
    end = header.end()
    while end < len(text):
        line_start = end + 1
        line_end = text.find("\n", line_start)
        if line_end == -1:
            line_end = len(text)
        if _ends_body(text[line_start:line_end]):
            break
        end = line_end

    body = text[header.end():end]
    title = (header.group(2) or "").strip()
    return AdmonitionToken(
        type="admonition",
        raw=text[:end],
        admonition_type=header.group(1),
        title=title or None,
        text=body.strip(),
    )


def render(token: AdmonitionToken, render_inline: InlineRenderer) -> str:
    kind = token.admonition_type
    icon = ADMONITION_ICONS[kind]
    title_html = render_inline(token.display_title)

    parts = [
        f'<div class="admonition admonition-{kind}">',
        f'<p class="admonition-title">{icon} {title_html}</p>',
    ]
    if token.text:
        parts.append(f"<p>{render_inline(token.text)}</p>")
    parts.append("</div>")
    return "\n".join(parts) + "\n"


admonition = ExtensionDefinition(
    name="admonition",
    level=BLOCK,
    probe=find_probe(MARKER),
    recognize=recognize,
    render=render,
)
