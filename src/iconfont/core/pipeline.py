"""Icon font build pipeline.

This module wires the pipeline stages for one configuration:

1. Resolve selection patterns and register dependency edges with the host
2. Normalize configuration into a generation request
3. Invoke the compositing engine (the only suspension point)
4. Emit artifacts and render the stylesheet
5. Hand the glyph names to the export hook

Stages run one after the other. A failing stage ends the run; nothing is
retried and no partial output is emitted after an engine failure.
"""

import time
from dataclasses import dataclass
from pathlib import Path

from iconfont.config import (
    HostOptions,
    IconFontConfig,
    InvocationParams,
    load_config,
)
from iconfont.core.emitter import ArtifactEmitter, EmitOptions
from iconfont.core.exporter import export_names
from iconfont.core.invoker import CompositingEngine, invoke
from iconfont.core.normalizer import normalize
from iconfont.core.resolver import resolve_files
from iconfont.domain import (
    BuildHost,
    EmissionResult,
    GenerationRequest,
    ResolvedFileSet,
)
from iconfont.io import FontToolsEngine
from iconfont.utils import PipelineLogger, PipelineStats


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of one pipeline run.

    Attributes:
        styles: Stylesheet text, the transform's module output
        emission: Artifacts and optional preview
        files: Resolved file set with dependency edges
        request: The request sent to the engine
        glyph_names: Glyph names in glyph order
        stats: Run statistics
    """

    styles: str
    emission: EmissionResult
    files: ResolvedFileSet
    request: GenerationRequest
    glyph_names: list[str]
    stats: PipelineStats


class IconFontPipeline:
    """Orchestrates resolution, generation and emission for one config.

    Example:
        pipeline = IconFontPipeline()
        graph = BuildGraph()
        result = asyncio.run(
            pipeline.run(config, HostOptions(context=Path("icons")), graph)
        )
        print(result.styles)
    """

    def __init__(
        self,
        engine: CompositingEngine | None = None,
        logger: PipelineLogger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            engine: Compositing engine (default: FontToolsEngine)
            logger: Pipeline logger (default: logs to the "iconfont" logger)
        """
        self.engine = engine if engine is not None else FontToolsEngine()
        self.logger = logger if logger is not None else PipelineLogger()

    def prepare(
        self,
        config: IconFontConfig,
        host_options: HostOptions,
        host: BuildHost,
        params: InvocationParams | None = None,
    ) -> tuple[ResolvedFileSet, GenerationRequest]:
        """Run the synchronous stages: resolution and normalization.

        Dependency edges, including a custom stylesheet template, are
        registered with ``host``.

        Returns:
            Resolved file set and the generation request
        """
        self.logger.log_start(config.font_name, config.files)

        files = resolve_files(config.files, host_options.context)
        for path in files.file_dependencies:
            host.add_dependency(path)
        for path in files.directory_dependencies:
            host.add_context_dependency(path)
        self.logger.log_files_resolved(
            len(files),
            len(files.file_dependencies),
            len(files.directory_dependencies),
        )

        request = normalize(config, files.files, host_options, params)
        if request.css_template is not None:
            host.add_dependency(str(request.css_template))
        self.logger.log_request(
            [fmt.value for fmt in request.types],
            request.font_height,
            len(request.files),
        )

        return files, request

    async def run(
        self,
        config: IconFontConfig,
        host_options: HostOptions,
        host: BuildHost,
        params: InvocationParams | None = None,
    ) -> PipelineResult:
        """Build the icon font described by ``config``.

        Args:
            config: Validated icon set configuration
            host_options: Host build options
            host: Receives dependency edges and emitted files
            params: Per-invocation parameters

        Returns:
            PipelineResult with the stylesheet text

        Raises:
            ConfigurationError: If html output lacks an htmlFileName
            Exception: Any engine or export hook error, unchanged
        """
        options = EmitOptions.from_config(config, host_options, params)
        files, request = self.prepare(config, host_options, host, params)

        start = time.time()
        result = await invoke(self.engine, request)
        self.logger.log_generated(
            [fmt.value for fmt in result.fonts],
            (time.time() - start) * 1000,
        )

        emitter = ArtifactEmitter(host, options, logger=self.logger)
        emission = emitter.emit(result, request)

        names = request.glyph_names
        if export_names(config.export_module, names):
            self.logger.log_exported(len(names))

        self.logger.log_complete()

        return PipelineResult(
            styles=emission.styles,
            emission=emission,
            files=files,
            request=request,
            glyph_names=names,
            stats=self.logger.stats,
        )


async def build_from_file(
    config_path: Path,
    host: BuildHost,
    params: InvocationParams | None = None,
    public_path: str = "/",
    engine: CompositingEngine | None = None,
    logger: PipelineLogger | None = None,
) -> PipelineResult:
    """Load a configuration file and build it.

    Patterns and ``cssTemplate`` are resolved against the directory holding
    the configuration file, which is itself registered as a dependency.

    Args:
        config_path: Configuration file (JSON, YAML or Python)
        host: Receives dependency edges and emitted files
        params: Per-invocation parameters
        public_path: Prefix for emitted URLs
        engine: Compositing engine (default: FontToolsEngine)
        logger: Pipeline logger

    Returns:
        PipelineResult with the stylesheet text
    """
    config_path = config_path.resolve()
    config = load_config(config_path)
    host.add_dependency(str(config_path))

    host_options = HostOptions(
        context=config_path.parent,
        public_path=public_path,
        resource_path=config_path,
    )
    pipeline = IconFontPipeline(engine=engine, logger=logger)
    return await pipeline.run(config, host_options, host, params)
