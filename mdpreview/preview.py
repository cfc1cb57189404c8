"""
Live preview driver.

Mirrors the editor page: a checkbox toggles between the raw text input and
the rendered preview, and every input change while the preview is shown
re-renders the whole text.
"""
import logging
from typing import Optional

from markdown_it.common.utils import escapeHtml

from .markdown_parser import MarkdownParser
from .theme_loader import get_css

logger = logging.getLogger(__name__)

TOGGLE_ID = "render_markdown"
INPUT_ID = "content-input"
PREVIEW_ID = "markdown-preview"

ERROR_NOTICE = "<p style='color: red;'>Error rendering markdown. Check the log for details.</p>"


class PreviewPane:
    """
    State of one editor's raw input / rendered preview pair.

    Rendering is synchronous and always covers the full text; there is no
    incremental parsing and nothing to cancel.
    """

    def __init__(self, parser: Optional[MarkdownParser], text: str = "", enabled: bool = False):
        """
        Args:
            parser: Parser used for the preview. ``None`` means no markdown
                engine is available; the pane still works but every render
                shows the error notice.
            text: Initial contents of the raw input
            enabled: Initial state of the preview toggle
        """
        if parser is None:
            logger.error("No markdown parser available; preview will not render")
        self.parser = parser
        self.text = text
        self.enabled = enabled
        self.html = ""
        self.input_visible = True
        self.preview_visible = False
        self.update()

    @classmethod
    def create(cls, config=None, **kwargs) -> "PreviewPane":
        """Build a pane with a fresh :class:`MarkdownParser`."""
        return cls(MarkdownParser(config), **kwargs)

    def set_enabled(self, enabled: bool) -> None:
        """Toggle changed."""
        self.enabled = enabled
        self.update()

    def set_text(self, text: str) -> None:
        """Raw input changed."""
        self.text = text
        self.update()

    def update(self) -> None:
        if not self.enabled:
            self.input_visible = True
            self.preview_visible = False
            return

        try:
            if self.parser is None:
                raise RuntimeError("markdown parser is not available")
            self.html = self.parser.parse(self.text)
        except Exception:
            # Raw text is left alone so nothing the user typed is lost.
            logger.exception("Error parsing markdown")
            self.html = ERROR_NOTICE

        self.input_visible = False
        self.preview_visible = True


def render_page(markdown_text: str, theme: str = "default", title: str = "Preview",
                parser: Optional[MarkdownParser] = None) -> str:
    """
    Render *markdown_text* as a standalone HTML page styled with *theme*.

    Args:
        markdown_text: Raw markdown content
        theme: Stylesheet name, see :func:`mdpreview.theme_loader.list_available_themes`
        title: Page title
        parser: Parser to use; a default one is built when omitted

    Returns:
        Complete HTML document
    """
    css = get_css(theme)
    parser = parser or MarkdownParser()
    body = parser.parse(markdown_text)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escapeHtml(title)}</title>\n"
        f"<style>\n{css}</style>\n"
        "</head>\n"
        f'<body>\n<div id="{PREVIEW_ID}">\n{body}</div>\n</body>\n'
        "</html>\n"
    )
