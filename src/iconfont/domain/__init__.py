"""Domain models for iconfont.

This module contains the records passed between pipeline stages. All models
are independent of fontTools and of the host build system.

Key classes:
- ResolvedFileSet: Icon files plus dependency edges
- GenerationRequest: Canonical request for the compositing engine
- GenerationResult: Per-format font payloads and a stylesheet generator
- ExternalArtifact / InlineArtifact: Per-format emission descriptors
- EmissionResult: Stylesheet, descriptors and optional preview
- BuildHost / BuildGraph: Host build system interface and in-memory graph
"""

from iconfont.domain.artifact import (
    ArtifactDescriptor,
    ArtifactKind,
    EmissionResult,
    ExternalArtifact,
    InlineArtifact,
    PreviewDocument,
)
from iconfont.domain.build import BuildGraph, BuildHost
from iconfont.domain.files import ResolvedFileSet
from iconfont.domain.generation import CssGenerator, GenerationRequest, GenerationResult

__all__: list[str] = [
    # Enums
    "ArtifactKind",
    # Core types
    "ResolvedFileSet",
    "GenerationRequest",
    "GenerationResult",
    "CssGenerator",
    "ArtifactDescriptor",
    "ExternalArtifact",
    "InlineArtifact",
    "PreviewDocument",
    "EmissionResult",
    # Build host
    "BuildHost",
    "BuildGraph",
]
