"""Jinja2 rendering for stylesheets, SVG fonts and HTML previews.

Bundled templates live in the ``iconfont/templates`` package directory.
A user-supplied stylesheet template replaces the bundled one and receives
the same context.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

STYLESHEET_TEMPLATE = "stylesheet.css.jinja"
PREVIEW_TEMPLATE = "preview.html.jinja"
SVG_FONT_TEMPLATE = "font.svg.jinja"

_environment = Environment(
    loader=PackageLoader("iconfont", "templates"),
    autoescape=select_autoescape(enabled_extensions=("html.jinja", "svg.jinja")),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def get_environment() -> Environment:
    """Return the shared template environment."""
    return _environment


def render_stylesheet(
    font_name: str,
    src: str,
    codepoints: Mapping[str, int],
    template_options: Mapping[str, Any],
    template_path: Path | None = None,
) -> str:
    """Render the icon stylesheet.

    Args:
        font_name: Font family name
        src: Value of the ``@font-face`` ``src`` descriptor
        codepoints: Glyph name -> code point, in glyph order
        template_options: Options such as ``baseClass`` and ``classPrefix``
        template_path: Custom template replacing the bundled one

    Returns:
        Stylesheet text
    """
    context = dict(template_options)
    context.update(
        font_name=font_name,
        fontName=font_name,
        src=src,
        codepoints=dict(codepoints),
        base_class=template_options.get("baseClass", ""),
        class_prefix=template_options.get("classPrefix", ""),
        template_options=dict(template_options),
    )

    if template_path is not None:
        source = template_path.read_text(encoding="utf-8")
        template = _environment.from_string(source)
    else:
        template = _environment.get_template(STYLESHEET_TEMPLATE)

    return template.render(context)


def render_preview(
    names: Sequence[str],
    font_name: str,
    styles: str,
    template_options: Mapping[str, Any],
) -> str:
    """Render the HTML preview page listing every glyph.

    Template options take precedence over the base context keys.
    """
    context: dict[str, Any] = {
        "names": list(names),
        "fontName": font_name,
        "styles": styles,
    }
    context.update(template_options)
    return _environment.get_template(PREVIEW_TEMPLATE).render(context)


def render_svg_font(
    font_name: str,
    units_per_em: int,
    ascent: int,
    descent: int,
    glyphs: Sequence[Mapping[str, Any]],
) -> str:
    """Render an SVG font document.

    Args:
        font_name: Font family name, also the ``<font>`` id
        units_per_em: Em square size
        ascent: Ascent in font units
        descent: Descent in font units (positive, below the baseline)
        glyphs: Mappings with ``name``, ``codepoint``, ``advance``, ``path``

    Returns:
        SVG document text
    """
    template = _environment.get_template(SVG_FONT_TEMPLATE)
    return template.render(
        font_name=font_name,
        units_per_em=units_per_em,
        ascent=ascent,
        descent=descent,
        glyphs=glyphs,
    )
