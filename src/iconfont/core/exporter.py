"""Export hook notification for downstream code generation."""

from collections.abc import Callable, Sequence
from typing import Any


def export_names(hook: Callable[[list[str]], Any] | None, names: Sequence[str]) -> bool:
    """Hand the final glyph names to the configured export hook.

    The hook's return value is ignored and its exceptions propagate.

    Args:
        hook: Configured ``exportModule`` callable, if any
        names: Glyph names after renaming, in glyph order

    Returns:
        True if a hook was called
    """
    if hook is None or not callable(hook):
        return False

    hook(list(names))
    return True
