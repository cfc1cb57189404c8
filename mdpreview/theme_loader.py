"""Stylesheets embedded by :func:`mdpreview.preview.render_page`."""
from pathlib import Path
from typing import List

THEMES_DIR = Path(__file__).parent / "themes"


def list_available_themes() -> List[str]:
    """Names of the bundled stylesheets, sorted."""
    return sorted(path.stem for path in THEMES_DIR.glob("*.css"))


def get_css(theme: str = "default") -> str:
    """
    Return the stylesheet for *theme*.

    Raises:
        ValueError: *theme* is not a bare name (letters, digits, ``-``, ``_``)
        FileNotFoundError: no stylesheet with that name is bundled
    """
    # The name becomes a file name under THEMES_DIR.
    if not theme.replace("_", "").replace("-", "").isalnum():
        raise ValueError(f"Invalid theme name: {theme}")

    path = THEMES_DIR / f"{theme}.css"
    if not path.is_file():
        raise FileNotFoundError(f"Unknown theme {theme!r}; choose from {list_available_themes()}")
    return path.read_text(encoding="utf-8")
