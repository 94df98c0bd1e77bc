"""Generation request and result exchanged with the compositing engine.

The request is the canonical, fully-defaulted description of the font to
build. The result is what the engine hands back: one binary payload per
requested format plus a function that renders the stylesheet once the final
URL of every format is known.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from iconfont.config.settings import FontFormat

CssGenerator = Callable[[Mapping[FontFormat, str]], str]


@dataclass(frozen=True)
class GenerationRequest:
    """Canonical request consumed by a compositing engine.

    Attributes:
        files: Absolute icon source paths in glyph order
        font_name: Font family name
        types: Requested formats, without duplicates
        order: Emission order of formats (always equal to ``types``)
        font_height: Em height glyphs are scaled to
        rename: Maps a source path to its glyph name
        template_options: Values exposed to stylesheet and preview templates
        css_template: Optional custom stylesheet template path
        format_options: Per-format engine options
        engine_options: Pass-through options present in the configuration
    """

    files: tuple[str, ...]
    font_name: str
    types: tuple[FontFormat, ...]
    order: tuple[FontFormat, ...]
    font_height: float
    rename: Callable[[str], str]
    template_options: Mapping[str, Any] = field(default_factory=dict)
    css_template: Path | None = None
    format_options: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    engine_options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def glyph_names(self) -> list[str]:
        """Glyph names for ``files``, in order."""
        return [self.rename(path) for path in self.files]

    def option(self, name: str, default: Any = None) -> Any:
        """Get a pass-through engine option, or ``default`` when unset."""
        return self.engine_options.get(name, default)


@dataclass(frozen=True)
class GenerationResult:
    """Output of one compositing engine run.

    Attributes:
        fonts: Binary payload per generated format
        generate_css: Renders the stylesheet from a format -> URL mapping
        codepoints: Glyph name -> assigned code point
    """

    fonts: Mapping[FontFormat, bytes]
    generate_css: CssGenerator
    codepoints: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fonts", MappingProxyType(dict(self.fonts)))
        object.__setattr__(self, "codepoints", MappingProxyType(dict(self.codepoints)))

    def __getitem__(self, font_format: FontFormat) -> bytes:
        return self.fonts[font_format]

    def __contains__(self, font_format: object) -> bool:
        return font_format in self.fonts
