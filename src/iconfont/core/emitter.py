"""Artifact emission.

Maps every generated format either to an external output file with a
content-hashed name, or to an inline data URI. The completed format -> URL
mapping is handed to the result's stylesheet generator, and an optional HTML
preview is registered as one more output file.
"""

import base64
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from iconfont.config.settings import (
    DEFAULT_FILE_NAME,
    MIME_TYPES,
    FontFormat,
    HostOptions,
    IconFontConfig,
    InvocationParams,
)
from iconfont.core.naming import interpolate_name, substitute_placeholders
from iconfont.domain.artifact import (
    ArtifactDescriptor,
    EmissionResult,
    ExternalArtifact,
    InlineArtifact,
    PreviewDocument,
)
from iconfont.domain.build import BuildHost
from iconfont.domain.generation import GenerationRequest, GenerationResult
from iconfont.exceptions import ConfigurationError, UnsupportedFormatError
from iconfont.io.templates import render_preview
from iconfont.utils.logging import PipelineLogger

PreviewRenderer = Callable[[Sequence[str], str, str, dict[str, Any]], str]


@dataclass(frozen=True)
class EmitOptions:
    """Emission settings merged from config, invocation params and host.

    Attributes:
        embed: Inline every format as a data URI instead of emitting files
        html: Emit the HTML preview
        file_name: Font file name template
        html_file_name: Preview file name template
        public_path: Prefix for URLs written into the stylesheet
        resource_path: Configuration file, for resource placeholders
        context: Directory ``[path]`` placeholders are relative to
    """

    embed: bool = False
    html: bool = False
    file_name: str = DEFAULT_FILE_NAME
    html_file_name: str | None = None
    public_path: str = "/"
    resource_path: Path | None = None
    context: Path | None = None

    def __post_init__(self) -> None:
        if self.html and not self.html_file_name:
            raise ConfigurationError("htmlFileName is required when html output is enabled")

    @classmethod
    def from_config(
        cls,
        config: IconFontConfig,
        host: HostOptions,
        params: InvocationParams | None = None,
    ) -> "EmitOptions":
        """Merge emission settings.

        ``fileName`` from the config wins over the invocation parameter.

        Raises:
            ConfigurationError: If html output is enabled without htmlFileName
        """
        params = params or InvocationParams()
        return cls(
            embed=params.embed,
            html=params.html or config.html,
            file_name=config.file_name or params.file_name or DEFAULT_FILE_NAME,
            html_file_name=config.html_file_name,
            public_path=host.public_path or "/",
            resource_path=host.resource_path,
            context=host.naming_context,
        )


def data_uri(font_format: FontFormat, content: bytes) -> str:
    """Encode ``content`` as a base64 data URI with the format's MIME type.

    Raises:
        UnsupportedFormatError: If the format has no registered MIME type
    """
    mime_type = MIME_TYPES.get(font_format)
    if mime_type is None:
        raise UnsupportedFormatError(str(font_format))

    payload = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};charset=utf-8;base64,{payload}"


def public_url(public_path: str, file_name: str) -> str:
    """Prefix an output name with the public path, using forward slashes."""
    return (public_path + file_name).replace("\\", "/")


def output_name(
    template: str,
    font_name: str,
    ext: str,
    content: bytes | str,
    options: EmitOptions,
) -> str:
    """Build an output file name from a template and the hashed content."""
    name = substitute_placeholders(template, font_name, ext)
    return interpolate_name(
        name,
        content,
        resource_path=options.resource_path,
        context=options.context,
    )


class ArtifactEmitter:
    """Registers generated fonts with a build host.

    Example:
        emitter = ArtifactEmitter(host, EmitOptions(embed=False))
        emission = emitter.emit(result, request)
        print(emission.styles)
    """

    def __init__(
        self,
        host: BuildHost,
        options: EmitOptions,
        logger: PipelineLogger | None = None,
        preview_renderer: PreviewRenderer = render_preview,
    ) -> None:
        self.host = host
        self.options = options
        self.logger = logger or PipelineLogger()
        self.preview_renderer = preview_renderer

    def emit(self, result: GenerationResult, request: GenerationRequest) -> EmissionResult:
        """Emit every requested format, render styles and the optional preview.

        Args:
            result: Engine output
            request: The request the result was generated from

        Returns:
            EmissionResult with styles and one descriptor per format
        """
        # One shared hash for every format when an SVG font is generated
        hash_source = FontFormat.SVG if FontFormat.SVG in request.types else None

        artifacts: dict[FontFormat, ArtifactDescriptor] = {}
        for font_format in request.order:
            content = result[font_format]

            if self.options.embed:
                artifacts[font_format] = InlineArtifact(
                    format=font_format,
                    data_uri=data_uri(font_format, content),
                )
                self.logger.log_embedded(font_format.value, len(content))
                continue

            hashed = result[hash_source] if hash_source is not None else content
            file_name = output_name(
                self.options.file_name,
                request.font_name,
                font_format.value,
                hashed,
                self.options,
            )
            self.host.emit_file(file_name, content)
            artifacts[font_format] = ExternalArtifact(
                format=font_format,
                url=public_url(self.options.public_path, file_name),
                file_name=file_name,
                content=content,
            )
            self.logger.log_artifact(font_format.value, file_name, len(content))

        styles = result.generate_css({fmt: a.url for fmt, a in artifacts.items()})

        preview = None
        if self.options.html:
            preview = self._emit_preview(request, styles)

        return EmissionResult(styles=styles, artifacts=artifacts, preview=preview)

    def _emit_preview(self, request: GenerationRequest, styles: str) -> PreviewDocument:
        """Render and register the HTML preview.

        ``[ext]`` in the preview file name expands to nothing.
        """
        content = self.preview_renderer(
            request.glyph_names,
            request.font_name,
            styles,
            dict(request.template_options),
        )
        file_name = output_name(
            self.options.html_file_name or "",
            request.font_name,
            "",
            content,
            self.options,
        )
        self.host.emit_file(file_name, content)
        self.logger.log_preview(file_name, len(content.encode("utf-8")))

        return PreviewDocument(
            url=public_url(self.options.public_path, file_name),
            file_name=file_name,
            content=content,
        )


def emit(
    result: GenerationResult,
    request: GenerationRequest,
    host: BuildHost,
    options: EmitOptions,
    logger: PipelineLogger | None = None,
) -> EmissionResult:
    """Emit a generation result with default collaborators."""
    return ArtifactEmitter(host, options, logger=logger).emit(result, request)
