import re
from typing import Optional

from markdown_it.common.utils import escapeHtml

from ..models import INLINE, ExtensionDefinition, HighlightToken, InlineRenderer, find_probe

# ==text==, shortest body on a single line. "====" matches with empty text.
HIGHLIGHT_RE = re.compile(r"==(.*?)==")


def recognize(text: str) -> Optional[HighlightToken]:
    match = HIGHLIGHT_RE.match(text)
    if not match:
        return None
    return HighlightToken(type="highlight", raw=match.group(0), text=match.group(1).strip())


def render(token: HighlightToken, render_inline: InlineRenderer) -> str:
    return f'<span style="background-color: yellow;">{escapeHtml(token.text)}</span>'


highlight = ExtensionDefinition(
    name="highlight",
    level=INLINE,
    probe=find_probe("=="),
    recognize=recognize,
    render=render,
)
