"""
mdpreview Package

Markdown to HTML with colored text, highlight, spoiler and admonition
extensions, plus a live preview driver.
"""

from .config import RendererConfig
from .markdown_parser import MarkdownParser, parse_markdown, parse_markdown_inline
from .models import ExtensionDefinition, ExtensionToken
from .preview import PreviewPane, render_page
from .registry import ExtensionRegistry, default_registry

__all__ = [
    'ExtensionDefinition',
    'ExtensionRegistry',
    'ExtensionToken',
    'MarkdownParser',
    'PreviewPane',
    'RendererConfig',
    'default_registry',
    'parse_markdown',
    'parse_markdown_inline',
    'render_page',
]
