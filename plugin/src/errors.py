"""
Error types for the plugin.

Anything derived from PluginError aborts the run. Remote failures that are
only best-effort are caught with best_effort() and logged instead.
"""

import logging
from contextlib import contextmanager
from typing import Optional

logger = logging.getLogger(__name__)

class PluginError(Exception):
    """Base class for errors that abort the whole run."""
    pass

class ConfigurationError(PluginError):
    """Raised when plugin settings are missing or invalid."""
    pass

class ResolutionError(ConfigurationError):
    """Raised when the configured stage and step are not part of the build."""
    pass

class StepStatusError(ConfigurationError):
    """Raised when the target step has not finished running."""
    pass

class TemplateConfigError(ConfigurationError):
    """Raised when the comment template cannot be loaded."""
    pass

class APIError(PluginError):
    """Raised when a call to the Drone or GitHub API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

@contextmanager
def best_effort(description: str):
    """
    Run a block whose API failures should be logged rather than abort the run.
    Only APIError is recovered, anything else propagates.
    """
    try:
        yield
    except APIError as e:
        logger.warning(f"{description}: {e}")
