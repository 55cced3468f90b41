"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_validated(
        self, version: str, profile: str, workers_count: int
    ) -> None: ...

    def config_rejected(self, reason: str) -> None: ...

    def config_unknown_profile_warning(self, profile: str) -> None: ...
