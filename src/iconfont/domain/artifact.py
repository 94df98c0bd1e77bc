"""Artifact descriptors produced by the emitter."""

from dataclasses import dataclass, field
from enum import Enum

from iconfont.config.settings import FontFormat


class ArtifactKind(str, Enum):
    """How a generated format reaches the stylesheet."""

    EXTERNAL = "external"
    INLINE = "inline"


@dataclass(frozen=True)
class ExternalArtifact:
    """A format written to the build output.

    Attributes:
        format: Font format
        url: Public URL used in the stylesheet
        file_name: Name registered with the build host
        content: Payload written to ``file_name``
    """

    format: FontFormat
    url: str
    file_name: str
    content: bytes = field(repr=False)

    @property
    def kind(self) -> ArtifactKind:
        return ArtifactKind.EXTERNAL


@dataclass(frozen=True)
class InlineArtifact:
    """A format embedded in the stylesheet as a data URI."""

    format: FontFormat
    data_uri: str = field(repr=False)

    @property
    def kind(self) -> ArtifactKind:
        return ArtifactKind.INLINE

    @property
    def url(self) -> str:
        return self.data_uri


ArtifactDescriptor = ExternalArtifact | InlineArtifact


@dataclass(frozen=True)
class PreviewDocument:
    """Rendered HTML preview of the icon set."""

    url: str
    file_name: str
    content: str = field(repr=False)


@dataclass(frozen=True)
class EmissionResult:
    """Everything the emitter produced for one build.

    Attributes:
        styles: Stylesheet text, the transform's primary output
        artifacts: Descriptor per format, in emission order
        preview: HTML preview document, when requested
    """

    styles: str
    artifacts: dict[FontFormat, ArtifactDescriptor]
    preview: PreviewDocument | None = None

    @property
    def urls(self) -> dict[FontFormat, str]:
        """Format -> URL or data URI, as passed to the stylesheet."""
        return {fmt: artifact.url for fmt, artifact in self.artifacts.items()}

    @property
    def external(self) -> list[ExternalArtifact]:
        """Artifacts registered for external output."""
        return [a for a in self.artifacts.values() if isinstance(a, ExternalArtifact)]
