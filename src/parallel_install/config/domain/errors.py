"""Error types raised when an InstallConfig fails validation."""

from datetime import timedelta

from parallel_install.core.errors import ParallelInstallError


class ConfigValidationError(ParallelInstallError):
    """Base class for every configuration validation failure."""


class InvalidWorkersCountError(ConfigValidationError):
    """Raised when the workers count is zero or negative."""

    def __init__(self, workers_count: int) -> None:
        self.workers_count = workers_count
        super().__init__("Workers count cannot be <= 0")


class EmptyPathError(ConfigValidationError):
    """Raised when a required path field is empty."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"{description} is empty")


class PathNotFoundError(ConfigValidationError):
    """Raised when a path field does not reference an existing filesystem entry."""

    def __init__(self, description: str, path: str) -> None:
        self.description = description
        self.path = path
        super().__init__(f"{description} '{path}' not found")


class PathAccessError(ConfigValidationError):
    """Raised when a path field cannot be stat-ed for a reason other than absence."""

    def __init__(self, description: str, path: str, reason: str) -> None:
        self.description = description
        self.path = path
        self.reason = reason
        super().__init__(f"{description} '{path}' cannot be accessed: {reason}")


class EmptyVersionError(ConfigValidationError):
    """Raised when the version field is empty."""

    def __init__(self) -> None:
        super().__init__("Version is empty")


class InvalidTimeoutsError(ConfigValidationError):
    """Raised when the quit timeout does not exceed the cancel timeout."""

    def __init__(self, cancel_timeout: timedelta, quit_timeout: timedelta) -> None:
        self.cancel_timeout = cancel_timeout
        self.quit_timeout = quit_timeout
        super().__init__(
            f"Quit timeout ({quit_timeout}) must be greater than"
            f" cancel timeout ({cancel_timeout})"
        )
