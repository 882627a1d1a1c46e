"""
=============================================================================
CHAIN CONFIGURATION
=============================================================================

Centralized configuration for the demo harness: logging verbosity, the
simulated server latency, and whether the logging interceptor joins the
canonical chain.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Command-line arguments                                         │
    │      └── python -m interceptchain --latency 0.5                     │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── INTERCEPT_SERVER_LATENCY=0.5 python -m interceptchain      │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
from dataclasses import dataclass


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class ChainConfig:
    """
    Configuration for building and running the canonical chain.

    Development:
        ChainConfig(log_level="DEBUG")    # trace every proceed()

    Slow network rehearsal:
        ChainConfig(server_latency=1.5)
    """

    log_level: str = "INFO"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    DEBUG - also traces chain mechanics (add/proceed)
    INFO  - request/response bodies from the logging interceptor
    """

    server_latency: float = 0.0
    """
    Seconds the mock server blocks per request. 0 = no delay.
    """

    log_interceptor: bool = True
    """
    Put the logging interceptor at the head of the canonical chain.
    """

    @classmethod
    def from_env(cls) -> "ChainConfig":
        """
        Create configuration from environment variables.

        INTERCEPT_LOG_LEVEL         Logging level (default: INFO)
        INTERCEPT_SERVER_LATENCY    Mock server delay in seconds (default: 0)
        INTERCEPT_LOG_INTERCEPTOR   Include the logging interceptor (default: 1)
        """
        return cls(
            log_level=os.getenv("INTERCEPT_LOG_LEVEL", "INFO"),
            server_latency=float(os.getenv("INTERCEPT_SERVER_LATENCY", "0")),
            log_interceptor=os.getenv(
                "INTERCEPT_LOG_INTERCEPTOR", "1"
            ).lower() in _TRUTHY,
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Fail fast at startup, before any chain is built.
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {', '.join(LOG_LEVELS)}."
            )

        if self.server_latency < 0:
            raise ValueError(f"server_latency must be >= 0")
