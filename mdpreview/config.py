"""Renderer configuration."""
from dataclasses import dataclass, field

from .registry import ExtensionRegistry, default_registry


@dataclass(frozen=True)
class RendererConfig:
    """
    Immutable settings for a :class:`~mdpreview.markdown_parser.MarkdownParser`.

    Build one at start-up and hand it to every parser that needs it; nothing
    in here changes afterwards.

    Attributes:
        extensions: Ordered extension registry. Order is precedence.
        breaks: Render a single newline inside a paragraph as ``<br>``.
        html: Pass raw HTML in the source through to the output.
        linkify: Turn bare URLs into links.
        typographer: Smart quotes and other typographic replacements.
        tasklists: Render GitHub style ``- [x]`` items as checkboxes.
        xhtml_out: Close void tags XHTML style (``<br />``).
    """
    extensions: ExtensionRegistry = field(default_factory=default_registry)
    breaks: bool = True
    html: bool = True
    linkify: bool = True
    typographer: bool = False
    tasklists: bool = True
    xhtml_out: bool = False

    def host_options(self) -> dict:
        """Options passed to the markdown-it-py constructor."""
        return {
            "breaks": self.breaks,
            "html": self.html,
            "linkify": self.linkify,
            "typographer": self.typographer,
            "xhtmlOut": self.xhtml_out,
        }
