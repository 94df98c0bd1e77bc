"""Logging utilities for Iconfont."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class PipelineStats:
    """Statistics from a pipeline run."""

    files_resolved: int = 0
    glyph_count: int = 0
    external_count: int = 0
    inline_count: int = 0
    bytes_emitted: int = 0
    emitted_files: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("iconfont")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PipelineLogger:
    """Logger for tracking pipeline steps and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("iconfont")
        self._stats = PipelineStats()

    def log_start(self, font_name: str, patterns: list[str]) -> None:
        """Log start of a pipeline run and reset statistics."""
        self._stats = PipelineStats(start_time=time.time())
        self._logger.info("Building icon font", font_name=font_name, patterns=patterns)

    def log_files_resolved(
        self,
        file_count: int,
        file_deps: int,
        directory_deps: int,
    ) -> None:
        """Log path resolution results."""
        self._logger.debug(
            "Files resolved",
            files=file_count,
            file_deps=file_deps,
            directory_deps=directory_deps,
        )
        self._stats.files_resolved = file_count

    def log_request(self, types: list[str], font_height: float, glyph_count: int) -> None:
        """Log the normalized generation request."""
        self._logger.debug(
            "Request normalized",
            types=types,
            font_height=font_height,
            glyphs=glyph_count,
        )
        self._stats.glyph_count = glyph_count

    def log_generated(self, formats: list[str], duration_ms: float) -> None:
        """Log a completed engine run."""
        self._logger.info(
            "Font generated",
            formats=formats,
            duration_ms=round(duration_ms, 2),
        )

    def log_artifact(self, font_format: str, file_name: str, size: int) -> None:
        """Log an artifact registered for external output."""
        self._logger.info("Artifact emitted", font_format=font_format, file=file_name, bytes=size)
        self._stats.external_count += 1
        self._stats.bytes_emitted += size
        self._stats.emitted_files.append(file_name)

    def log_embedded(self, font_format: str, size: int) -> None:
        """Log a format embedded as a data URI."""
        self._logger.debug("Artifact embedded", font_format=font_format, bytes=size)
        self._stats.inline_count += 1

    def log_preview(self, file_name: str, size: int) -> None:
        """Log the emitted HTML preview."""
        self._logger.info("Preview emitted", file=file_name, bytes=size)
        self._stats.bytes_emitted += size
        self._stats.emitted_files.append(file_name)

    def log_exported(self, glyph_count: int) -> None:
        """Log an export hook call."""
        self._logger.debug("Glyph names exported", glyphs=glyph_count)

    def log_complete(self) -> None:
        """Log end of a pipeline run."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Icon font built",
            external=self._stats.external_count,
            inline=self._stats.inline_count,
            bytes=self._stats.bytes_emitted,
            duration_s=round(self._stats.duration_seconds, 3),
        )

    @property
    def stats(self) -> PipelineStats:
        """Get current pipeline statistics."""
        return self._stats
