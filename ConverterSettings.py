"""
Runtime configuration for the unit converter.

Settings come from environment variables, optionally provided through a
`.env` file in the working directory (loaded with python-dotenv):

    UNIT_RATES_SOURCE     path or http(s) URL of the rate table   (default: rates.txt)
    UNIT_RATES_DELIMITER  single-character field separator        (default: ;)
    UNIT_ROUTE_STRATEGY   depth_first | breadth_first             (default: depth_first)
    UNIT_RATES_TIMEOUT    seconds to wait for a remote rate table (default: 10)

Command-line flags in `Main` take precedence over these values.
"""

import math
import os
from dataclasses import dataclass, replace

from dotenv import find_dotenv, load_dotenv

from RateFileHandler import DEFAULT_TIMEOUT
from RateLine import DEFAULT_DELIMITER
from RouteFinder import DEPTH_FIRST, STRATEGIES

DEFAULT_RATES_SOURCE = "rates.txt"


@dataclass(frozen=True)
class ConverterSettings:
    rates_source: str = DEFAULT_RATES_SOURCE
    delimiter: str = DEFAULT_DELIMITER
    strategy: str = DEPTH_FIRST
    timeout: float = DEFAULT_TIMEOUT


    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ValueError(f"UNIT_RATES_DELIMITER must be a single character, got {self.delimiter!r}")
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"UNIT_ROUTE_STRATEGY must be one of {', '.join(STRATEGIES)}, got {self.strategy!r}"
            )
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ValueError(f"UNIT_RATES_TIMEOUT must be a finite positive number, got {self.timeout}")


    @classmethod
    def from_env(cls, dotenv=True):
        """
        Build settings from the environment.

        Args:
            dotenv (bool): Load the nearest `.env` file, searching upwards
                from the working directory. Variables that are
                already set in the environment are not overridden.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        timeout = os.getenv("UNIT_RATES_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout)
        except ValueError:
            raise ValueError(f"UNIT_RATES_TIMEOUT must be a number, got {timeout!r}")

        return cls(
            rates_source=os.getenv("UNIT_RATES_SOURCE", DEFAULT_RATES_SOURCE),
            delimiter=os.getenv("UNIT_RATES_DELIMITER", DEFAULT_DELIMITER),
            strategy=os.getenv("UNIT_ROUTE_STRATEGY", DEPTH_FIRST),
            timeout=timeout,
        )


    def override(self, **changes):
        """Return a copy with every non-None keyword applied."""
        changes = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **changes)
