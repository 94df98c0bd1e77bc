"""Configuration management for iconfont.

This module provides configuration management using Pydantic models.
Configuration comes from an icon set config file (JSON, YAML or Python),
per-invocation parameters, and options of the host build system.

Key classes:
- IconFontConfig: User icon set configuration
- InvocationParams: Per-build-step parameters
- HostOptions: Host build system options
- LoggingConfig: Logging settings
"""

from iconfont.config.loader import (
    ConfigSource,
    JsonConfigSource,
    PythonConfigSource,
    YamlConfigSource,
    load_config,
    parse_config,
    read_config_mapping,
)
from iconfont.config.settings import (
    DEFAULT_FILE_NAME,
    DEFAULT_FONT_HEIGHT,
    DEFAULT_FORMATS,
    MIME_TYPES,
    PASS_THROUGH_OPTIONS,
    FontFormat,
    HostOptions,
    IconFontConfig,
    InvocationParams,
    LoggingConfig,
)

__all__ = [
    "DEFAULT_FILE_NAME",
    "DEFAULT_FONT_HEIGHT",
    "DEFAULT_FORMATS",
    "MIME_TYPES",
    "PASS_THROUGH_OPTIONS",
    "ConfigSource",
    "FontFormat",
    "HostOptions",
    "IconFontConfig",
    "InvocationParams",
    "JsonConfigSource",
    "LoggingConfig",
    "PythonConfigSource",
    "YamlConfigSource",
    "load_config",
    "parse_config",
    "read_config_mapping",
]
