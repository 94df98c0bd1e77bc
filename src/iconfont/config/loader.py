"""Configuration file loading.

A configuration file is either structured data (JSON, YAML) or Python code
that produces structured data. Each format is handled by a ``ConfigSource``
strategy; ``load_config`` picks one by file suffix and validates the result
into an ``IconFontConfig``.
"""

import json
import runpy
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

import yaml
from pydantic import ValidationError

from iconfont.config.settings import IconFontConfig
from iconfont.exceptions import ConfigLoadError, ConfigurationError


class ConfigSource(Protocol):
    """Strategy turning a configuration file into a raw mapping."""

    def load(self, path: Path) -> Mapping[str, Any]:
        """Read ``path`` and return the raw configuration mapping."""
        ...


class JsonConfigSource:
    """Reads configuration stored as JSON."""

    def load(self, path: Path) -> Mapping[str, Any]:
        return json.loads(path.read_text(encoding="utf-8"))


class YamlConfigSource:
    """Reads configuration stored as YAML."""

    def load(self, path: Path) -> Mapping[str, Any]:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        return data if data is not None else {}


class PythonConfigSource:
    """Evaluates a Python file and reads its module-level ``config``.

    ``config`` may be a mapping or a function returning one. Python sources
    are the only way to supply callables such as ``rename`` or
    ``exportModule``.
    """

    variable = "config"

    def load(self, path: Path) -> Mapping[str, Any]:
        namespace = runpy.run_path(str(path), run_name="__iconfont_config__")

        if self.variable not in namespace:
            raise ValueError(f"no module-level '{self.variable}' defined")

        config = namespace[self.variable]
        if callable(config):
            config = config()
        return config


SOURCES_BY_SUFFIX: dict[str, ConfigSource] = {
    ".json": JsonConfigSource(),
    ".yaml": YamlConfigSource(),
    ".yml": YamlConfigSource(),
    ".py": PythonConfigSource(),
}

# Unknown suffixes: structured data first, then code
FALLBACK_SOURCES: tuple[ConfigSource, ...] = (JsonConfigSource(), PythonConfigSource())


def read_config_mapping(
    path: Path,
    sources: Sequence[ConfigSource] | None = None,
) -> Mapping[str, Any]:
    """Read a configuration file into a raw mapping.

    Args:
        path: Configuration file path
        sources: Strategies to try in order (default: chosen by suffix)

    Returns:
        Raw configuration mapping

    Raises:
        ConfigLoadError: If no strategy can read the file
    """
    if not path.is_file():
        raise ConfigLoadError(str(path), "file not found")

    if sources is None:
        source = SOURCES_BY_SUFFIX.get(path.suffix.lower())
        sources = (source,) if source is not None else FALLBACK_SOURCES

    last_error: Exception | None = None
    for source in sources:
        try:
            data = source.load(path)
        except json.JSONDecodeError as e:
            last_error = e
            continue
        except Exception as e:
            raise ConfigLoadError(str(path), f"{type(e).__name__}: {e}") from e

        if not isinstance(data, Mapping):
            raise ConfigLoadError(
                str(path), f"expected a mapping, got {type(data).__name__}"
            )
        return data

    raise ConfigLoadError(str(path), str(last_error))


def parse_config(data: Mapping[str, Any]) -> IconFontConfig:
    """Validate a raw mapping into an ``IconFontConfig``.

    Raises:
        ConfigurationError: If required fields are missing or malformed
    """
    try:
        return IconFontConfig.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid icon font configuration: {e}") from e


def load_config(
    path: Path,
    sources: Sequence[ConfigSource] | None = None,
) -> IconFontConfig:
    """Load and validate a configuration file.

    Args:
        path: Configuration file path
        sources: Strategies to try in order (default: chosen by suffix)

    Returns:
        Validated configuration
    """
    return parse_config(read_config_mapping(path, sources))
