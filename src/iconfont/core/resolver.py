"""Path resolution for icon selection patterns.

Expands configuration patterns into absolute icon paths and collects the
filesystem paths the host must watch for the result to stay valid:

- literal paths become exact file dependencies
- wildcard patterns make their parent directories context dependencies, so
  adding or removing a matching file triggers a rebuild even though no
  existing file changed
- a recursive ``**`` parent watches every directory below it, so icons added
  to a nested directory are picked up too
"""

import glob
import os
import re
from collections.abc import Iterable
from pathlib import Path

from iconfont.domain.files import ResolvedFileSet

_MAGIC_CHECK = re.compile(r"[*?[]")


def has_magic(pattern: str) -> bool:
    """Check whether a pattern contains glob metacharacters."""
    return _MAGIC_CHECK.search(pattern) is not None


def absolute(base_dir: Path | str, path: str) -> str:
    """Resolve ``path`` against ``base_dir`` into a normalized absolute path."""
    return os.path.normpath(os.path.join(os.path.abspath(base_dir), path))


def _glob(pattern: str, base_dir: Path | str) -> list[str]:
    return glob.glob(pattern, root_dir=base_dir, recursive=True)


def resolve_files(patterns: Iterable[str], base_dir: Path | str) -> ResolvedFileSet:
    """Resolve selection patterns into a dependency-tracked file set.

    Literal patterns are not checked for existence; a missing file surfaces
    when the compositing engine reads it.

    Wildcard matches follow filesystem enumeration order, which is not
    guaranteed to be stable across platforms. Sort the result if a fixed
    glyph order matters.

    Args:
        patterns: Literal paths or glob patterns, relative to ``base_dir``
            unless absolute
        base_dir: Directory patterns are resolved against

    Returns:
        ResolvedFileSet with files in pattern order
    """
    files: list[str] = []
    file_deps: list[str] = []
    directory_deps: list[str] = []

    for pattern in patterns:
        if not has_magic(pattern):
            path = absolute(base_dir, pattern)
            files.append(path)
            file_deps.append(path)
            continue

        files.extend(absolute(base_dir, match) for match in _glob(pattern, base_dir))

        parent = os.path.dirname(pattern) or "."
        for directory in _glob(parent + "/", base_dir):
            path = absolute(base_dir, directory)
            if path not in directory_deps:
                directory_deps.append(path)

    return ResolvedFileSet(
        files=tuple(files),
        file_dependencies=tuple(file_deps),
        directory_dependencies=tuple(directory_deps),
    )
