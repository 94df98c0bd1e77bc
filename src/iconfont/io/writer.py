"""Artifact writer for emitted build outputs.

This module provides the ArtifactWriter class, which writes files emitted into
a BuildGraph, plus the stylesheet, into an output directory.
"""

from collections.abc import Mapping
from pathlib import Path, PurePosixPath

from iconfont.exceptions import ArtifactWriteError


class ArtifactWriter:
    """Writes emitted artifacts below an output directory.

    Emitted names are relative, forward-slash paths and may contain
    subdirectories, which are created as needed. Concurrent writers targeting
    the same directory are not coordinated.

    Example:
        writer = ArtifactWriter(Path("dist"))
        paths = writer.write_all(graph.emitted)
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the artifact writer.

        Args:
            output_dir: Directory that receives every artifact
        """
        self._output_dir = output_dir

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def target_path(self, name: str) -> Path:
        """Map an emitted name onto the output directory.

        Raises:
            ArtifactWriteError: If the name escapes the output directory
        """
        relative = PurePosixPath(name.lstrip("/"))
        if ".." in relative.parts:
            raise ArtifactWriteError(name, "path escapes the output directory")
        return self._output_dir.joinpath(*relative.parts)

    def write(self, name: str, content: bytes | str) -> Path:
        """Write one artifact.

        Args:
            name: Emitted name, relative to the output directory
            content: Artifact payload; text is written as UTF-8

        Returns:
            Path of the written file

        Raises:
            ArtifactWriteError: If the file cannot be written
        """
        path = self.target_path(name)
        if isinstance(content, str):
            content = content.encode("utf-8")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise ArtifactWriteError(str(path), str(e)) from e

        return path

    def write_all(self, emitted: Mapping[str, bytes]) -> list[Path]:
        """Write every emitted artifact, in emission order."""
        return [self.write(name, content) for name, content in emitted.items()]
