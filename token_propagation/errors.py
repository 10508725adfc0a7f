"""Exception types raised by the propagation analyzer."""


class PropagationError(Exception):
    """Base class for analyzer errors."""


class ConfigError(PropagationError, ValueError):
    """Raised when the configuration is malformed."""


class StylesheetParseError(PropagationError):
    """Raised when a stylesheet cannot be parsed."""


class FileAnalysisError(PropagationError):
    """Raised when a primary stylesheet cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        """Record the failing file alongside the reason."""
        super().__init__(f"Unable to read or parse {path}: {reason}")
        self.path = path
        self.reason = reason
