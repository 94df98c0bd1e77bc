"""Config normalization.

Merges the user configuration, per-invocation parameters and host options
into a single ``GenerationRequest`` with every default applied.
"""

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from iconfont.config.settings import (
    DEFAULT_BASE_CLASS,
    DEFAULT_FONT_HEIGHT,
    DEFAULT_FORMATS,
    PASS_THROUGH_OPTIONS,
    FontFormat,
    HostOptions,
    IconFontConfig,
    InvocationParams,
)
from iconfont.core.resolver import absolute
from iconfont.domain.generation import GenerationRequest


def default_rename(path: str) -> str:
    """Derive a glyph name from its source path.

    Strips the directory and a trailing ``.svg``:
    ``/a/b/star.svg`` -> ``star``. Every resolved file must map to a
    distinct name, or later glyphs overwrite earlier ones.
    """
    name = os.path.basename(path)
    return name.removesuffix(".svg")


def select_formats(
    config: IconFontConfig,
    params: InvocationParams | None = None,
) -> tuple[FontFormat, ...]:
    """Pick requested formats: params, then config, then the default set.

    Duplicates are dropped, keeping the first occurrence.
    """
    formats: Iterable[FontFormat] = DEFAULT_FORMATS
    if params is not None and params.types:
        formats = params.types
    elif config.types:
        formats = config.types
    return tuple(dict.fromkeys(formats))


def build_template_options(config: IconFontConfig) -> dict[str, Any]:
    """Build stylesheet template options.

    ``classPrefix`` is taken whenever the config sets it, so an explicit empty
    prefix is kept. User ``templateOptions`` override per key.
    """
    options: dict[str, Any] = {
        "baseClass": config.base_class or DEFAULT_BASE_CLASS,
        "classPrefix": config.class_prefix,
    }
    options.update(config.template_options)
    return options


def pass_through_options(config: IconFontConfig) -> dict[str, Any]:
    """Collect engine options the config sets explicitly.

    Unset options are left out so the engine keeps its own defaults.
    """
    return {
        name: getattr(config, name)
        for name in PASS_THROUGH_OPTIONS
        if name in config.model_fields_set
    }


def normalize(
    config: IconFontConfig,
    files: Iterable[str],
    host: HostOptions,
    params: InvocationParams | None = None,
) -> GenerationRequest:
    """Build the canonical generation request.

    Args:
        config: Validated user configuration
        files: Resolved absolute icon paths
        host: Host build options (context directory for ``cssTemplate``)
        params: Per-invocation parameters

    Returns:
        GenerationRequest with ``order`` equal to ``types``
    """
    formats = select_formats(config, params)

    css_template = None
    if config.css_template:
        css_template = Path(absolute(host.context, config.css_template))

    return GenerationRequest(
        files=tuple(files),
        font_name=config.font_name,
        types=formats,
        order=formats,
        font_height=config.font_height or DEFAULT_FONT_HEIGHT,
        rename=config.rename if callable(config.rename) else default_rename,
        template_options=build_template_options(config),
        css_template=css_template,
        format_options=dict(config.format_options),
        engine_options=pass_through_options(config),
    )
