"""
Markdown parser with the custom extensions installed, using markdown-it-py.
"""
import logging
from typing import Optional

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

from .config import RendererConfig
from .markdown_plugins import install_extensions

logger = logging.getLogger(__name__)


class MarkdownParser:
    """
    GitHub flavoured markdown to HTML, plus colored text, highlight,
    spoiler and admonition syntax.

    The markdown-it-py instance is built once in ``__init__`` and is not
    modified afterwards, so one parser can serve any number of parse calls.
    """

    def __init__(self, config: Optional[RendererConfig] = None):
        """
        Initialize the markdown parser.

        Args:
            config: Renderer settings; defaults to ``RendererConfig()``
        """
        self.config = config or RendererConfig()

        self.markdown_processor = MarkdownIt('commonmark', self.config.host_options())

        # GFM pieces that commonmark leaves out
        self.markdown_processor.enable(['table', 'strikethrough'])
        if self.config.linkify:
            self.markdown_processor.enable('linkify')

        # ------------------------------------------------------------------
        # Plugin registration chain
        # ------------------------------------------------------------------
        # Custom extensions go in first so their rules sit ahead of the
        # built-in ones.
        install_extensions(self.markdown_processor, self.config.extensions)
        if self.config.tasklists:
            self.markdown_processor.use(tasklists_plugin)

        logger.debug("Markdown parser ready with extensions: %s", ", ".join(self.extensions.names))

    @property
    def extensions(self):
        return self.config.extensions

    def parse(self, markdown_text: str) -> str:
        """
        Parse markdown text to HTML.

        Args:
            markdown_text: Raw markdown content

        Returns:
            HTML string
        """
        return self.markdown_processor.render(markdown_text, {})

    def parse_inline(self, markdown_text: str) -> str:
        """
        Parse markdown text as a single run of inline content, without the
        wrapping paragraph.

        Args:
            markdown_text: Raw markdown content

        Returns:
            HTML string
        """
        return self.markdown_processor.renderInline(markdown_text, {})


_default_parser: Optional[MarkdownParser] = None


def _get_default_parser() -> MarkdownParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = MarkdownParser()
    return _default_parser


def parse_markdown(markdown_text: str) -> str:
    """
    Convenience function to parse markdown text to HTML with the default
    configuration.
    """
    return _get_default_parser().parse(markdown_text)


def parse_markdown_inline(markdown_text: str) -> str:
    """
    Convenience function to parse inline markdown text to HTML with the
    default configuration.
    """
    return _get_default_parser().parse_inline(markdown_text)
