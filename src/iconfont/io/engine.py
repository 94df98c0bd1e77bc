"""Compositing engine built on fonttools.

Turns a ``GenerationRequest`` into TrueType, WOFF, EOT and SVG font payloads
plus a stylesheet generator:

- SVG outlines are read with fonttools' svgLib and recorded once
- cubic curves are converted to quadratic ones for the ``glyf`` table
- FontBuilder assembles the TrueType font; WOFF and EOT wrap that data
- the SVG font and the stylesheet are rendered from Jinja2 templates
"""

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
from io import BytesIO
from typing import Any

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont
from fontTools.ttLib.sfnt import WOFFFlavorData

from iconfont.config.settings import DEFAULT_FONT_HEIGHT, FontFormat
from iconfont.domain.generation import GenerationRequest, GenerationResult
from iconfont.exceptions import UnsupportedFormatError
from iconfont.io.eot import ttf_to_eot
from iconfont.io.reader import IconOutline, read_icon
from iconfont.io.templates import render_stylesheet, render_svg_font

# First code point handed out, inside the Private Use Area
START_CODEPOINT = 0xF101

# Maximum cubic-to-quadratic approximation error, in font units
CU2QU_MAX_ERR = 1.0

SRC_TEMPLATES: dict[FontFormat, str] = {
    FontFormat.EOT: 'url("{url}{iefix}") format("embedded-opentype")',
    FontFormat.WOFF: 'url("{url}") format("woff")',
    FontFormat.TTF: 'url("{url}") format("truetype")',
    FontFormat.SVG: 'url("{url}#{font_name}") format("svg")',
}


@dataclass
class GlyphSpec:
    """A glyph ready to be written into every format."""

    name: str
    codepoint: int
    outline: IconOutline
    advance: int
    offset_x: float

    @property
    def lsb(self) -> int:
        if self.outline.bounds is None:
            return 0
        return round(self.outline.bounds[0] + self.offset_x)

    def draw(self, pen: Any) -> None:
        """Replay the outline into ``pen``, shifted horizontally."""
        self.outline.recording.replay(TransformPen(pen, (1, 0, 0, 1, self.offset_x, 0)))


def build_src(
    font_name: str,
    order: tuple[FontFormat, ...],
    urls: Mapping[FontFormat, str],
) -> str:
    """Build the ``@font-face`` ``src`` value for the given URLs."""
    parts = []
    for font_format in order:
        url = urls.get(font_format)
        if url is None:
            continue
        iefix = "" if url.startswith("data:") else "?#iefix"
        parts.append(
            SRC_TEMPLATES[font_format].format(url=url, iefix=iefix, font_name=font_name)
        )
    return ",\n\t\t".join(parts)


def _number_formatter(precision: float | None) -> Any:
    def ntos(value: float) -> str:
        if precision:
            value = round(value * precision) / precision
        if float(value).is_integer():
            return str(int(value))
        return str(value)

    return ntos


class FontToolsEngine:
    """Default compositing engine.

    Example:
        engine = FontToolsEngine()
        result = await engine.generate(request)
        css = result.generate_css({FontFormat.WOFF: "/icons.woff"})
    """

    def __init__(self, start_codepoint: int = START_CODEPOINT) -> None:
        self.start_codepoint = start_codepoint

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Build every requested format off the event loop."""
        return await asyncio.to_thread(self.build, request)

    def build(self, request: GenerationRequest) -> GenerationResult:
        """Build every requested format.

        Args:
            request: Normalized generation request

        Returns:
            GenerationResult with one payload per requested format

        Raises:
            FileNotFoundError: If an icon source does not exist
            UnsupportedFormatError: If a requested format cannot be built
        """
        units_per_em = round(request.font_height or DEFAULT_FONT_HEIGHT)
        descent = round(request.option("descent", 0) or 0)
        ascent = units_per_em - descent

        glyphs = self._layout(request, units_per_em, descent)
        ttf = self._build_ttf(request, glyphs, units_per_em, ascent, descent)

        fonts: dict[FontFormat, bytes] = {}
        for font_format in request.types:
            if font_format == FontFormat.TTF:
                fonts[font_format] = ttf
            elif font_format == FontFormat.WOFF:
                fonts[font_format] = self._build_woff(ttf, request.format_options.get("woff", {}))
            elif font_format == FontFormat.EOT:
                fonts[font_format] = ttf_to_eot(ttf)
            elif font_format == FontFormat.SVG:
                fonts[font_format] = self._build_svg(request, glyphs, units_per_em, ascent, descent)
            else:
                raise UnsupportedFormatError(str(font_format))

        codepoints = {glyph.name: glyph.codepoint for glyph in glyphs}
        font_name = request.font_name
        order = request.order
        template_options = dict(request.template_options)
        css_template = request.css_template

        def generate_css(urls: Mapping[FontFormat, str]) -> str:
            return render_stylesheet(
                font_name,
                build_src(font_name, order, urls),
                codepoints,
                template_options,
                template_path=css_template,
            )

        return GenerationResult(fonts=fonts, generate_css=generate_css, codepoints=codepoints)

    def _layout(
        self,
        request: GenerationRequest,
        units_per_em: int,
        descent: int,
    ) -> list[GlyphSpec]:
        """Read every icon and decide codepoints, advances and offsets.

        Files renamed to the same glyph name collapse into one glyph; the
        last file wins.
        """
        outlines: dict[str, IconOutline] = {}
        for path, name in zip(request.files, request.glyph_names):
            outlines[name] = read_icon(
                path,
                font_height=units_per_em,
                descent=descent,
                normalize=bool(request.option("normalize", False)),
            )

        fixed_width = bool(request.option("fixed_width", False))
        center = bool(request.option("center_horizontally", False))
        widest = max((o.advance for o in outlines.values()), default=units_per_em)

        glyphs = []
        for index, (name, outline) in enumerate(outlines.items()):
            advance = round(widest if fixed_width else outline.advance)
            offset_x = 0.0
            if center and outline.bounds is not None:
                x_min, _, x_max, _ = outline.bounds
                offset_x = (advance - (x_max - x_min)) / 2 - x_min
            glyphs.append(
                GlyphSpec(
                    name=name,
                    codepoint=self.start_codepoint + index,
                    outline=outline,
                    advance=advance,
                    offset_x=offset_x,
                )
            )
        return glyphs

    def _build_ttf(
        self,
        request: GenerationRequest,
        glyphs: list[GlyphSpec],
        units_per_em: int,
        ascent: int,
        descent: int,
    ) -> bytes:
        builder = FontBuilder(units_per_em, isTTF=True)
        builder.setupGlyphOrder([".notdef"] + [glyph.name for glyph in glyphs])
        builder.setupCharacterMap({glyph.codepoint: glyph.name for glyph in glyphs})

        tt_glyphs = {".notdef": TTGlyphPen(None).glyph()}
        metrics = {".notdef": (units_per_em, 0)}
        for glyph in glyphs:
            pen = TTGlyphPen(None)
            glyph.draw(Cu2QuPen(pen, CU2QU_MAX_ERR, reverse_direction=True))
            tt_glyphs[glyph.name] = pen.glyph()
            metrics[glyph.name] = (glyph.advance, glyph.lsb)

        builder.setupGlyf(tt_glyphs)
        builder.setupHorizontalMetrics(metrics)
        builder.setupHorizontalHeader(ascent=ascent, descent=-descent)
        builder.setupNameTable(self._name_strings(request))
        builder.setupOS2(
            sTypoAscender=ascent,
            sTypoDescender=-descent,
            usWinAscent=ascent,
            usWinDescent=descent,
        )
        builder.setupPost()

        buffer = BytesIO()
        builder.save(buffer)
        return buffer.getvalue()

    @staticmethod
    def _name_strings(request: GenerationRequest) -> dict[str, str]:
        options = request.format_options.get("ttf", {})
        font_name = request.font_name
        names = {
            "familyName": font_name,
            "styleName": "Regular",
            "fullName": f"{font_name} Regular",
            "psName": font_name.replace(" ", "") + "-Regular",
            "uniqueFontIdentifier": f"iconfont: {font_name}",
            "version": str(options.get("version", "Version 1.0")),
        }
        if "copyright" in options:
            names["copyright"] = str(options["copyright"])
        if "description" in options:
            names["description"] = str(options["description"])
        if "url" in options:
            names["vendorURL"] = str(options["url"])
        return names

    @staticmethod
    def _build_woff(ttf: bytes, options: Mapping[str, Any]) -> bytes:
        font = TTFont(BytesIO(ttf))
        font.flavor = "woff"
        if options.get("metadata"):
            flavor_data = WOFFFlavorData()
            flavor_data.metaData = str(options["metadata"]).encode("utf-8")
            font.flavorData = flavor_data

        buffer = BytesIO()
        font.save(buffer)
        font.close()
        return buffer.getvalue()

    @staticmethod
    def _build_svg(
        request: GenerationRequest,
        glyphs: list[GlyphSpec],
        units_per_em: int,
        ascent: int,
        descent: int,
    ) -> bytes:
        ntos = _number_formatter(request.option("round"))
        svg_glyphs = []
        for glyph in glyphs:
            pen = SVGPathPen(None, ntos=ntos)
            glyph.draw(pen)
            svg_glyphs.append(
                {
                    "name": glyph.name,
                    "codepoint": glyph.codepoint,
                    "advance": glyph.advance,
                    "path": pen.getCommands(),
                }
            )

        document = render_svg_font(
            font_name=request.font_name,
            units_per_em=units_per_em,
            ascent=ascent,
            descent=descent,
            glyphs=svg_glyphs,
        )
        return document.encode("utf-8")
