"""
Data models for the markdown extensions.
"""
from dataclasses import dataclass
from typing import Callable, Optional

INLINE = "inline"
BLOCK = "block"
LEVELS = (INLINE, BLOCK)

# Callable handed to renderers: markdown text in, inline HTML out.
InlineRenderer = Callable[[str], str]


@dataclass(frozen=True)
class ExtensionToken:
    """
    Result of recognizing one custom syntax construct.

    ``raw`` is the exact prefix consumed from the scanned text; the scan
    cursor advances by ``len(raw)``, so it can never be empty.
    """
    type: str
    raw: str

    def __post_init__(self):
        if not self.raw:
            raise ValueError(f"{self.type} token consumed no input")


@dataclass(frozen=True)
class ColoredTextToken(ExtensionToken):
    color: str = ""
    text: str = ""


@dataclass(frozen=True)
class HighlightToken(ExtensionToken):
    text: str = ""


@dataclass(frozen=True)
class SpoilerToken(ExtensionToken):
    text: str = ""


@dataclass(frozen=True)
class AdmonitionToken(ExtensionToken):
    admonition_type: str = "note"
    title: Optional[str] = None
    text: str = ""

    @property
    def display_title(self) -> str:
        """Explicit title, or the capitalized admonition type."""
        if self.title:
            return self.title
        return self.admonition_type[:1].upper() + self.admonition_type[1:]


@dataclass(frozen=True)
class ExtensionDefinition:
    """
    One pluggable syntax extension.

    Attributes:
        name: Unique name, also used as the host token type.
        level: ``"inline"`` or ``"block"``.
        recognize: ``text -> ExtensionToken | None``, anchored at index 0.
            Must never raise.
        render: ``(token, render_inline) -> str`` HTML fragment.
        probe: Optional ``text -> int | None`` giving the earliest index at
            which the construct could start. Used only to skip work.
    """
    name: str
    level: str
    recognize: Callable[[str], Optional[ExtensionToken]]
    render: Callable[[ExtensionToken, InlineRenderer], str]
    probe: Optional[Callable[[str], Optional[int]]] = None

    def is_plausible(self, text: str) -> bool:
        """True if the construct could start at index 0 of *text*."""
        if self.probe is None:
            return True
        return self.probe(text) == 0

    def is_inline(self) -> bool:
        return self.level == INLINE

    def is_block(self) -> bool:
        return self.level == BLOCK


def find_probe(marker: str) -> Callable[[str], Optional[int]]:
    """Build a probe reporting the first occurrence of *marker*."""

    def _probe(text: str) -> Optional[int]:
        index = text.find(marker)
        return index if index >= 0 else None

    return _probe
