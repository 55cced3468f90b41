"""Tests verifying the ParallelInstallError type hierarchy."""

from datetime import timedelta

from parallel_install.config.domain.errors import (
    ConfigValidationError,
    EmptyPathError,
    EmptyVersionError,
    InvalidTimeoutsError,
    InvalidWorkersCountError,
    PathAccessError,
    PathNotFoundError,
)
from parallel_install.core.errors import ParallelInstallError


class TestParallelInstallErrorHierarchy:
    """All config validation errors inherit from ParallelInstallError."""

    def test_config_validation_error_is_parallel_install_error(self) -> None:
        assert isinstance(ConfigValidationError("bad"), ParallelInstallError)

    def test_invalid_workers_count_error_is_config_validation_error(self) -> None:
        error = InvalidWorkersCountError(workers_count=0)
        assert isinstance(error, ConfigValidationError)

    def test_empty_path_error_is_config_validation_error(self) -> None:
        assert isinstance(EmptyPathError(description="CRD path"), ConfigValidationError)

    def test_path_not_found_error_is_config_validation_error(self) -> None:
        error = PathNotFoundError(description="CRD path", path="/nope")
        assert isinstance(error, ConfigValidationError)

    def test_path_access_error_is_config_validation_error(self) -> None:
        error = PathAccessError(description="CRD path", path="/x", reason="denied")
        assert isinstance(error, ConfigValidationError)

    def test_empty_version_error_is_config_validation_error(self) -> None:
        assert isinstance(EmptyVersionError(), ConfigValidationError)

    def test_invalid_timeouts_error_is_config_validation_error(self) -> None:
        error = InvalidTimeoutsError(
            cancel_timeout=timedelta(minutes=5), quit_timeout=timedelta(minutes=1)
        )
        assert isinstance(error, ConfigValidationError)

    def test_parallel_install_error_is_exception(self) -> None:
        assert isinstance(ParallelInstallError("test"), Exception)


class TestErrorDetails:
    """Validation errors are not retriable and carry the offending values."""

    def test_default_not_retriable(self) -> None:
        assert ParallelInstallError("test").retriable is False

    def test_validation_errors_not_retriable(self) -> None:
        assert EmptyVersionError().retriable is False

    def test_path_not_found_keeps_description_and_path(self) -> None:
        error = PathNotFoundError(description="Resource path", path="/tmp/missing")
        assert error.description == "Resource path"
        assert error.path == "/tmp/missing"
        assert str(error) == "Resource path '/tmp/missing' not found"

    def test_path_access_error_keeps_reason(self) -> None:
        error = PathAccessError(
            description="CRD path", path="/srv/crds", reason="Permission denied"
        )
        assert error.reason == "Permission denied"
        assert str(error) == (
            "CRD path '/srv/crds' cannot be accessed: Permission denied"
        )

    def test_empty_path_error_has_no_path(self) -> None:
        assert not hasattr(EmptyPathError(description="CRD path"), "path")

    def test_empty_path_message(self) -> None:
        assert str(EmptyPathError(description="Components list")) == (
            "Components list is empty"
        )

    def test_invalid_timeouts_message_names_both_durations(self) -> None:
        error = InvalidTimeoutsError(
            cancel_timeout=timedelta(minutes=5), quit_timeout=timedelta(minutes=1)
        )
        assert "0:05:00" in str(error)
        assert "0:01:00" in str(error)
