import re
from typing import Optional

from markdown_it.common.utils import escapeHtml

from ..models import INLINE, ColoredTextToken, ExtensionDefinition, InlineRenderer, find_probe

# %red%text%% or %#f00%text%%. The body may not contain '%' (there is no
# escape for it), so "%red%50% off%%" is left as plain text.
COLORED_TEXT_RE = re.compile(r"%([a-zA-Z]+|#(?:[0-9a-fA-F]{3}){1,2})%([^%\n]*?)%%")


def recognize(text: str) -> Optional[ColoredTextToken]:
    match = COLORED_TEXT_RE.match(text)
    if not match:
        return None
    return ColoredTextToken(
        type="coloredText",
        raw=match.group(0),
        color=match.group(1),
        text=match.group(2).strip(),
    )


def render(token: ColoredTextToken, render_inline: InlineRenderer) -> str:
    # Body is decoration only, never parsed as markdown.
    return f'<span style="color: {token.color};">{escapeHtml(token.text)}</span>'


colored_text = ExtensionDefinition(
    name="coloredText",
    level=INLINE,
    probe=find_probe("%"),
    recognize=recognize,
    render=render,
)
