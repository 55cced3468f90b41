"""InstallConfig — tunable parameters for a parallel install or uninstall run."""

from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel

from parallel_install.config.domain.errors import (
    EmptyPathError,
    EmptyVersionError,
    InvalidTimeoutsError,
    InvalidWorkersCountError,
    PathAccessError,
    PathNotFoundError,
)

type Profile = str

EVALUATION_PROFILE: Profile = "evaluation"
PRODUCTION_PROFILE: Profile = "production"
KNOWN_PROFILES: frozenset[Profile] = frozenset({EVALUATION_PROFILE, PRODUCTION_PROFILE})


class InstallConfig(BaseModel, frozen=True):
    """Parameters shared by install and uninstall operations.

    Fields are only type-checked on construction. Semantic checks run when
    `validate` is called. Use two instances if install and uninstall need
    different settings.
    """

    # Number of parallel workers used for an install/uninstall operation.
    workers_count: int = 4
    # Worker cancellation is signalled after this. Blocked client calls may continue.
    cancel_timeout: timedelta = timedelta(minutes=20)
    # The operation fails after this, even if workers are still running.
    # Must be greater than cancel_timeout.
    quit_timeout: timedelta = timedelta(minutes=25)
    client_timeout_seconds: int = 360
    backoff_initial_interval_seconds: int = 3
    backoff_max_elapsed_seconds: int = 300
    max_revision_history: int = 10
    profile: Profile = ""
    components_list_file: str
    resource_path: str
    crd_path: str
    version: str

    def ensure_valid(self) -> None:
        """
        Check the configuration, stopping at the first failing field.

        Existence checks only reflect the filesystem at call time; consumers
        must still handle paths that disappear afterwards.

        Raises:
            InvalidWorkersCountError: if workers_count <= 0.
            EmptyPathError: if a path field is empty.
            PathNotFoundError: if a path field does not exist.
            PathAccessError: if a path field cannot be checked, e.g. its name is
                too long or a parent directory is not searchable.
            EmptyVersionError: if version is empty.
            InvalidTimeoutsError: if quit_timeout <= cancel_timeout.
        """
        if self.workers_count <= 0:
            raise InvalidWorkersCountError(workers_count=self.workers_count)
        _check_path_exists(
            path=self.components_list_file, description="Components list"
        )
        _check_path_exists(path=self.resource_path, description="Resource path")
        _check_path_exists(path=self.crd_path, description="CRD path")
        if not self.version:
            raise EmptyVersionError()
        if self.quit_timeout <= self.cancel_timeout:
            raise InvalidTimeoutsError(
                cancel_timeout=self.cancel_timeout, quit_timeout=self.quit_timeout
            )


def _check_path_exists(path: str, description: str) -> None:
    if not path:
        raise EmptyPathError(description=description)
    try:
        Path(path).stat()
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise PathNotFoundError(description=description, path=path) from exc
    except OSError as exc:
        raise PathAccessError(
            description=description, path=path, reason=exc.strerror or str(exc)
        ) from exc
