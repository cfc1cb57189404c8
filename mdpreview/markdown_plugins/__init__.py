from .admonition import admonition
from .colored_text import colored_text
from .dispatch import extensions_plugin, install_extensions
from .highlight import highlight
from .spoiler import spoiler

# Registration order is precedence order.
DEFAULT_EXTENSIONS = (colored_text, highlight, spoiler, admonition)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "admonition",
    "colored_text",
    "extensions_plugin",
    "highlight",
    "install_extensions",
    "spoiler",
]
