"""Build host interface and an in-memory output graph."""

from dataclasses import dataclass, field
from typing import Protocol


class BuildHost(Protocol):
    """The slice of a host build system the pipeline talks to."""

    def add_dependency(self, path: str) -> None:
        """Invalidate the build when ``path`` changes."""
        ...

    def add_context_dependency(self, path: str) -> None:
        """Invalidate the build when entries under ``path`` are added or removed."""
        ...

    def emit_file(self, name: str, content: bytes | str) -> None:
        """Register ``content`` for output under ``name``."""
        ...


@dataclass
class BuildGraph:
    """In-memory ``BuildHost`` recording dependency edges and emitted files.

    Attributes:
        file_dependencies: Exact files, in registration order, deduplicated
        directory_dependencies: Watched directories, deduplicated
        emitted: Output name -> payload
    """

    file_dependencies: list[str] = field(default_factory=list)
    directory_dependencies: list[str] = field(default_factory=list)
    emitted: dict[str, bytes] = field(default_factory=dict)

    def add_dependency(self, path: str) -> None:
        if path not in self.file_dependencies:
            self.file_dependencies.append(path)

    def add_context_dependency(self, path: str) -> None:
        if path not in self.directory_dependencies:
            self.directory_dependencies.append(path)

    def emit_file(self, name: str, content: bytes | str) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.emitted[name] = content
