"""ConfigValidator — validates an InstallConfig and reports the result."""

from parallel_install.config.domain.config import KNOWN_PROFILES, InstallConfig
from parallel_install.config.domain.errors import ConfigValidationError
from parallel_install.config.domain.observer import ConfigObserver


class ConfigValidator:
    """Runs InstallConfig.ensure_valid and emits observer events for the result."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def validate(self, config: InstallConfig) -> None:
        """
        Validate *config*, emitting config_rejected before re-raising on failure.

        An unrecognised profile only produces a warning.

        Raises:
            ConfigValidationError: the first check InstallConfig.ensure_valid fails.
        """
        try:
            config.ensure_valid()
        except ConfigValidationError as exc:
            self._observer.config_rejected(reason=str(exc))
            raise

        if config.profile and config.profile not in KNOWN_PROFILES:
            self._observer.config_unknown_profile_warning(profile=config.profile)
        self._observer.config_validated(
            version=config.version,
            profile=config.profile,
            workers_count=config.workers_count,
        )
