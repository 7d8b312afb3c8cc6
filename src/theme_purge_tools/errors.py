"""Errors raised while purging."""
from __future__ import annotations


class PurgeToolsError(Exception):
    """Base class for all theme-purge-tools errors."""


class ConfigError(PurgeToolsError):
    """Required configuration is missing or invalid."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid configuration: " + "; ".join(problems))


class DiscoveryError(PurgeToolsError):
    """The themes root could not be scanned."""


class NetworkError(PurgeToolsError):
    """Transport level failure talking to the purge API."""


class ResponseParseError(PurgeToolsError):
    """The purge API returned a body we could not understand."""


class PurgeFailedError(PurgeToolsError):
    """The purge API reported the job as failed."""


class PurgeTimeoutError(PurgeToolsError):
    """The job did not reach a terminal state in time."""


class PurgeCancelledError(PurgeToolsError):
    """Polling was cancelled before the job finished."""


class PurgeResultError(PurgeToolsError):
    """The job finished but some paths failed at a provider."""

    def __init__(self, failed_paths: list[str]):
        self.failed_paths = failed_paths
        super().__init__(f"{len(failed_paths)} path(s) failed to purge")
