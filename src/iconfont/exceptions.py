"""Exception hierarchy for Iconfont."""


class IconFontError(Exception):
    """Base exception for all Iconfont errors."""

    pass


class ConfigurationError(IconFontError):
    """Invalid or incomplete icon font configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigLoadError(ConfigurationError):
    """Error reading or evaluating a configuration file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config '{path}': {reason}")


class ArtifactError(IconFontError):
    """Errors related to emitted build artifacts."""

    pass


class ArtifactWriteError(ArtifactError):
    """Error writing an emitted artifact to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write artifact '{path}': {reason}")


class UnsupportedFormatError(ArtifactError):
    """Requested font format has no known encoding."""

    def __init__(self, font_format: str) -> None:
        self.font_format = font_format
        super().__init__(f"Unsupported font format '{font_format}'")
