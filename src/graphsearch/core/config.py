"""
Search configuration.

All tunables for a query live in one frozen dataclass that is handed to the
finders and to :class:`~graphsearch.core.graph.searchable.SearchableGraph`.
Values are validated on construction, so an existing ``SearchConfig`` is
always usable.
"""

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError

DEFAULT_MEMORY_CHECK_INTERVAL = 1000


@dataclass(frozen=True)
class SearchConfig:
    """
    Configuration shared by all graph searches.

    Attributes:
        max_memory_mb: Ceiling on memory growth during a query, in MB.
            ``None`` disables the check.
        memory_check_interval: Number of loop iterations between memory checks.
        validate_results: Validate every path result against the graph.
        log_timings: Log the duration of every query at INFO level.
        zero: Cost of the empty path.
        infinity: Sentinel cost of a vertex not yet reached.
    """

    max_memory_mb: Optional[float] = None
    memory_check_interval: int = DEFAULT_MEMORY_CHECK_INTERVAL
    validate_results: bool = False
    log_timings: bool = False
    zero: Any = 0
    infinity: Any = math.inf

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_memory_mb is not None:
            if isinstance(self.max_memory_mb, bool) or not isinstance(
                self.max_memory_mb, (int, float)
            ):
                raise ConfigurationError("max_memory_mb must be a number")
            if self.max_memory_mb <= 0:
                raise ConfigurationError("max_memory_mb must be positive")

        if isinstance(self.memory_check_interval, bool) or not isinstance(
            self.memory_check_interval, int
        ):
            raise ConfigurationError("memory_check_interval must be an integer")
        if self.memory_check_interval <= 0:
            raise ConfigurationError("memory_check_interval must be positive")

        if not isinstance(self.validate_results, bool):
            raise ConfigurationError("validate_results must be a boolean")
        if not isinstance(self.log_timings, bool):
            raise ConfigurationError("log_timings must be a boolean")

        try:
            ordered = self.zero < self.infinity
        except TypeError as e:
            raise ConfigurationError(f"zero and infinity must be comparable: {e}")
        if not ordered:
            raise ConfigurationError("infinity must be greater than zero")

    def with_overrides(self, **overrides: Any) -> "SearchConfig":
        """Return a copy of this configuration with some fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary format.

        Returns:
            Dictionary containing all settings
        """
        return {
            "max_memory_mb": self.max_memory_mb,
            "memory_check_interval": self.memory_check_interval,
            "validate_results": self.validate_results,
            "log_timings": self.log_timings,
            "zero": self.zero,
            "infinity": self.infinity,
        }
