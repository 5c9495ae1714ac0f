"""
Exception hierarchy for rate-table loading and unit conversion.

Overview
--------
Every error raised by this project derives from `ConversionError`, which
carries a human-readable message plus an optional `details` dict. The
details are appended to `str(error)` as "(Details: key=value, ...)" so the
CLI can print a single line that still names the offending line/unit.

Hierarchy
---------
ConversionError
    RateTableError              - anything that stops a rate table from loading
        MalformedLineError      - a line splits into fewer than 3 fields
        MalformedRateError      - rate token is not a finite positive number
        SourceUnavailableError  - the rate source cannot be read at all
        NoRatesLoadedError      - the table produced no rates
    UnitNotFoundError           - a requested unit is not in the graph
    NoPathError                 - no conversion route links two units

Notes
-----
- `MalformedLineError` and `MalformedRateError` are also `ValueError`s, so
  callers that already catch `ValueError` around parsing keep working.
- "No route" is normally reported as a result (`ConversionResult.found`),
  `NoPathError` only exists for callers that ask for an exception.
"""


class ConversionError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, details: dict = None):
        self.details = details or {}
        super().__init__(message)

    def __str__(self):
        base_msg = super().__str__()
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base_msg} (Details: {detail_str})"
        return base_msg


class RateTableError(ConversionError):
    """Raised when a rate table cannot be turned into a graph."""


class MalformedLineError(RateTableError, ValueError):
    """Raised when a rate line does not have the required fields."""

    def __init__(self, message: str, line_number: int = None, line: str = None):
        details = {}
        if line_number is not None:
            details['line_number'] = line_number
        if line is not None:
            details['line'] = repr(line)
        self.line_number = line_number
        self.line = line
        super().__init__(message, details)


class MalformedRateError(RateTableError, ValueError):
    """Raised when the rate field is not a finite positive number."""

    def __init__(self, message: str, line_number: int = None, line: str = None, token: str = None):
        details = {}
        if line_number is not None:
            details['line_number'] = line_number
        if line is not None:
            details['line'] = repr(line)
        if token is not None:
            details['token'] = repr(token)
        self.line_number = line_number
        self.line = line
        self.token = token
        super().__init__(message, details)


class SourceUnavailableError(RateTableError):
    """Raised when the rate source cannot be opened or fetched."""

    def __init__(self, message: str, source: str = None, reason: str = None):
        details = {}
        if source:
            details['source'] = source
        if reason:
            details['reason'] = reason
        self.source = source
        super().__init__(message, details)


class NoRatesLoadedError(RateTableError):
    """Raised at startup when there are no rates to convert with."""

    def __init__(self, message: str, source: str = None, reason: str = None):
        details = {}
        if source:
            details['source'] = source
        if reason:
            details['reason'] = reason
        self.source = source
        self.reason = reason
        super().__init__(message, details)


class UnitNotFoundError(ConversionError):
    """Raised when a requested unit is not present in the rate graph."""

    def __init__(self, message: str, unit: str = None):
        details = {}
        if unit is not None:
            details['unit'] = unit
        self.unit = unit
        super().__init__(message, details)


class NoPathError(ConversionError):
    """Raised on request when no conversion route links two units."""

    def __init__(self, message: str, from_unit: str = None, to_unit: str = None):
        details = {}
        if from_unit is not None:
            details['from_unit'] = from_unit
        if to_unit is not None:
            details['to_unit'] = to_unit
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(message, details)
