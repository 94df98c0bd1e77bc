"""Configuration settings for Iconfont."""

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any
from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FontFormat(str, Enum):
    """Font formats the pipeline can request from the compositing engine."""

    EOT = "eot"
    WOFF = "woff"
    TTF = "ttf"
    SVG = "svg"


DEFAULT_FORMATS: tuple[FontFormat, ...] = (
    FontFormat.EOT,
    FontFormat.WOFF,
    FontFormat.TTF,
    FontFormat.SVG,
)

# Small source glyphs lose precision when scaled into a smaller em square
DEFAULT_FONT_HEIGHT = 1000

# [ext] expands to the bare format name, without a dot
DEFAULT_FILE_NAME = "[hash]-[fontname].[ext]"
DEFAULT_BASE_CLASS = "icon"
DEFAULT_CLASS_PREFIX = "icon-"

# Engine options copied into the request only when the config sets them
PASS_THROUGH_OPTIONS: tuple[str, ...] = (
    "fixed_width",
    "center_horizontally",
    "normalize",
    "font_height",
    "round",
    "descent",
)

MIME_TYPES: MappingProxyType[FontFormat, str] = MappingProxyType(
    {
        FontFormat.EOT: "application/vnd.ms-fontobject",
        FontFormat.SVG: "image/svg+xml",
        FontFormat.TTF: "application/x-font-ttf",
        FontFormat.WOFF: "application/font-woff",
    }
)


def _coerce_list(value: Any) -> Any:
    """Wrap a scalar value in a single-element list."""
    if value is None or isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


class IconFontConfig(BaseModel):
    """Icon set configuration as written by the user.

    Field names follow the camelCase keys of the configuration file; the
    snake_case attribute names are accepted as well.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    files: list[str] = Field(
        min_length=1,
        description="Literal paths or glob patterns of SVG icon sources",
    )
    font_name: str = Field(alias="fontName", min_length=1)
    types: list[FontFormat] | None = Field(
        default=None,
        description="Requested font formats (scalar allowed)",
    )
    font_height: float | None = Field(default=None, alias="fontHeight", gt=0)
    base_class: str | None = Field(default=None, alias="baseClass")
    class_prefix: str = Field(default=DEFAULT_CLASS_PREFIX, alias="classPrefix")
    template_options: dict[str, Any] = Field(default_factory=dict, alias="templateOptions")
    rename: Callable[[str], str] | None = None
    css_template: str | None = Field(default=None, alias="cssTemplate")
    html: bool = False
    html_file_name: str | None = Field(default=None, alias="htmlFileName")
    file_name: str | None = Field(default=None, alias="fileName")
    export_module: Callable[[list[str]], Any] | None = Field(default=None, alias="exportModule")
    format_options: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        alias="formatOptions",
    )

    # Engine pass-through options
    fixed_width: bool | None = Field(default=None, alias="fixedWidth")
    center_horizontally: bool | None = Field(default=None, alias="centerHorizontally")
    normalize: bool | None = None
    round: float | None = None
    descent: float | None = None

    @field_validator("files", "types", mode="before")
    @classmethod
    def _scalar_to_list(cls, value: Any) -> Any:
        return _coerce_list(value)

    @field_validator("rename", "export_module", mode="before")
    @classmethod
    def _drop_non_callable(cls, value: Any) -> Any:
        # Non-callable hooks fall back to the defaults
        return value if callable(value) else None


class InvocationParams(BaseModel):
    """Per-build-step parameters, typically from a loader query string."""

    model_config = ConfigDict(populate_by_name=True)

    types: list[FontFormat] | None = None
    embed: bool = False
    html: bool = False
    file_name: str | None = Field(default=None, alias="fileName")

    @field_validator("types", mode="before")
    @classmethod
    def _scalar_to_list(cls, value: Any) -> Any:
        return _coerce_list(value)

    @classmethod
    def from_query(cls, query: str) -> "InvocationParams":
        """Parse a loader-style query string.

        Bare keys are flags (``?embed`` means ``embed=True``). ``types`` may
        repeat, use the ``types[]`` form, or hold a comma separated list.

        Args:
            query: Query string, with or without the leading ``?``

        Returns:
            Parsed invocation parameters
        """
        values: dict[str, Any] = {}
        types: list[str] = []

        for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
            key = key.removesuffix("[]")
            if key == "types":
                types.extend(part for part in value.split(",") if part)
            elif value == "":
                values[key] = True
            elif value.lower() in ("false", "0"):
                values[key] = False
            else:
                values[key] = value

        if types:
            values["types"] = types

        return cls.model_validate(values)


class HostOptions(BaseModel):
    """Options supplied by the host build system."""

    context: Path = Field(description="Directory patterns are resolved against")
    public_path: str = Field(default="/", description="Prefix for emitted URLs")
    output_context: Path | None = Field(
        default=None,
        description="Directory [path] placeholders are relative to (defaults to context)",
    )
    resource_path: Path | None = Field(
        default=None,
        description="Configuration file being transformed",
    )

    @property
    def naming_context(self) -> Path:
        """Directory used for resource-relative name placeholders."""
        return self.output_context or self.context


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
