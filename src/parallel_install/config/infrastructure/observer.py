"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_validated(self, version: str, profile: str, workers_count: int) -> None:
        self._log.info(
            "config.validated",
            version=version,
            profile=profile,
            workers_count=workers_count,
        )

    def config_rejected(self, reason: str) -> None:
        self._log.error("config.rejected", reason=reason)

    def config_unknown_profile_warning(self, profile: str) -> None:
        self._log.warning(
            "config.unknown_profile_warning",
            profile=profile,
            message="Profile is not one of the known deployment profiles",
        )
