#!/usr/bin/env python3
"""
Example script: render the custom markdown syntax to a standalone preview page.
"""

import os
import sys
from pathlib import Path

# Add the project root to the path so we can import our modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from mdpreview.preview import PreviewPane, render_page


def main():
    """Run the example script."""
    os.makedirs("output", exist_ok=True)

    markdown_content = """# Preview Demo

Plain markdown still works: **bold**, *italic*, `code` and https://example.com.

Custom inline syntax: %red%red text%%, %#0a0%green hex%% and ==highlighted==.

!>The ending is a surprise with **bold** and ==highlight== inside.

!!! note
Notes have a default title.

!!! warning Mind the gap
Bodies end at a blank line.

!!! danger
Or at the next admonition.
!!! greentext
>be me
>write markdown
"""

    pane = PreviewPane.create(text=markdown_content)
    pane.set_enabled(True)
    print(pane.html)

    for theme in ("default", "dark"):
        output_path = Path("output") / f"preview_{theme}.html"
        output_path.write_text(render_page(markdown_content, theme=theme), encoding="utf-8")
        print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
