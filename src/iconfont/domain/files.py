"""Resolved icon source files and their dependency edges."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResolvedFileSet:
    """Concrete file list produced from selection patterns.

    Attributes:
        files: Absolute icon paths; order decides glyph order and naming
        file_dependencies: Files whose change invalidates the build
        directory_dependencies: Directories whose listing change invalidates
            the build (files added or removed under a wildcard)
    """

    files: tuple[str, ...] = ()
    file_dependencies: tuple[str, ...] = ()
    directory_dependencies: tuple[str, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.files)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with files and a nested dependencies mapping
        """
        return {
            "files": list(self.files),
            "dependencies": {
                "files": list(self.file_dependencies),
                "directories": list(self.directory_dependencies),
            },
        }
