"""Iconfont - Build icon fonts from SVG files.

Iconfont is a build-pipeline transform: it resolves SVG icons from a
declarative icon set configuration, builds font files (EOT, WOFF, TTF, SVG)
and a stylesheet mapping icon names to glyphs, and emits the artifacts with
dependency edges for incremental rebuilds.

Example:
    $ iconfont build icons.font.json --out dist

This will write content-hashed font files and icons.css into dist/.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
