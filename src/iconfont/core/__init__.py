"""Core pipeline stages for iconfont.

This module contains the resolution-and-emission pipeline:

- Path resolution (selection patterns -> files + dependency edges)
- Config normalization (config + params + host -> generation request)
- Generation invocation (one call to the compositing engine)
- Artifact emission (content-hashed files or data URIs, stylesheet, preview)
- Export bridge (glyph names -> user hook)

Key functions:
- resolve_files: Expand selection patterns
- normalize: Build the canonical generation request
- invoke: Run the compositing engine
- emit: Emit a generation result
- export_names: Notify the export hook
- interpolate_name: Content-hash file naming

Key classes:
- IconFontPipeline: Orchestrates a full build
- ArtifactEmitter: Registers artifacts with a build host
- CompositingEngine: Engine protocol
"""

from iconfont.core.emitter import ArtifactEmitter, EmitOptions, data_uri, emit
from iconfont.core.exporter import export_names
from iconfont.core.invoker import CompositingEngine, invoke
from iconfont.core.naming import hash_digest, interpolate_name, substitute_placeholders
from iconfont.core.normalizer import default_rename, normalize, select_formats
from iconfont.core.pipeline import IconFontPipeline, PipelineResult, build_from_file
from iconfont.core.resolver import has_magic, resolve_files

__all__ = [
    # Emission
    "ArtifactEmitter",
    "EmitOptions",
    # Engine
    "CompositingEngine",
    # Pipeline
    "IconFontPipeline",
    "PipelineResult",
    "build_from_file",
    "data_uri",
    "default_rename",
    "emit",
    "export_names",
    "has_magic",
    "hash_digest",
    "interpolate_name",
    "invoke",
    "normalize",
    "resolve_files",
    "select_formats",
    "substitute_placeholders",
]
