"""Custom Exception Hierarchy

The layout pipeline itself never raises for malformed markup; these
exceptions cover the outer surfaces (file input, configuration, CLI).
"""


class TexPagesError(Exception):
    """Base exception for all texpages errors."""
    pass


class DocumentSourceError(TexPagesError):
    """Raised when a source document cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read document '{path}': {reason}")


class InvalidConfigurationError(TexPagesError, ValueError):
    """Raised when configuration values are invalid."""
    pass


class UnsupportedFormatError(TexPagesError):
    """Raised when an unknown output format is requested."""

    def __init__(self, output_format: str, supported: list):
        self.output_format = output_format
        self.supported = supported
        super().__init__(
            f"Unsupported output format: {output_format}. "
            f"Supported formats: {', '.join(supported)}"
        )
