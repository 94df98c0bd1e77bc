"""I/O layer for iconfont.

This module handles everything that touches files or fonttools: reading SVG
icons, building font payloads, rendering templates and writing artifacts.

Key responsibilities:
- Read SVG icons into font-unit outlines
- Build TTF, WOFF, EOT and SVG fonts (default compositing engine)
- Render stylesheet, SVG font and HTML preview templates with Jinja2
- Write emitted artifacts to an output directory

Key classes:
- FontToolsEngine: Default compositing engine
- ArtifactWriter: Write emitted artifacts to disk
"""

from iconfont.io.engine import FontToolsEngine, build_src
from iconfont.io.eot import ttf_to_eot
from iconfont.io.reader import IconOutline, read_icon
from iconfont.io.templates import render_preview, render_stylesheet, render_svg_font
from iconfont.io.writer import ArtifactWriter

__all__ = [
    "ArtifactWriter",
    "FontToolsEngine",
    "IconOutline",
    "build_src",
    "read_icon",
    "render_preview",
    "render_stylesheet",
    "render_svg_font",
    "ttf_to_eot",
]
