"""
Route-based unit conversion.

This module defines `UnitConvertor`, which converts a value between any two
units of a rate table by chaining the direct rates that link them. Unlike a
fixed "convert to a base unit" table, only some pairs need a declared rate:

    m;cm;100
    cm;mm;10

is enough to convert metres to millimetres (m -> cm -> mm, factor 1000).

Workflow
--------
1. `from_source()` reads the rate table and builds a `RateGraph`.
2. `convert()` asks `RouteFinder` for a route between the two units.
3. `evaluate()` multiplies the value by each direct rate along the route.

Notes & caveats
---------------
- No dimensional analysis: a rate table linking "m" and "kg" is taken at
  face value.
- Floating-point error grows with every hop; nothing compensates for it.
- When several routes exist, which one is used depends on the search
  strategy and on the order of the rate table (see `RouteFinder`).
"""

import numpy as np

from ConversionErrors import NoRatesLoadedError, SourceUnavailableError
from ConversionResult import ConversionResult
from ConverterSettings import ConverterSettings
from RateFileHandler import RateFileHandler
from RateGraph import RateGraph
from RouteFinder import DEPTH_FIRST, RouteFinder

SOURCE_UNAVAILABLE_MESSAGE = "could not open file"


class UnitConvertor:
    """
    Convert values between units of a `RateGraph`.

    Attributes
    ----------
    graph : RateGraph
        Rates the conversions are computed from. Read-only.
    route_finder : RouteFinder
        Search used to link two units.
    """

    def __init__(self, graph, strategy=DEPTH_FIRST):
        self.graph = graph
        self.route_finder = RouteFinder(graph, strategy=strategy)


    @classmethod
    def from_source(cls, settings=None, file_handler=None):
        """
        Load the rate table named by `settings` and build a convertor.

        Parameters
        ----------
        settings : ConverterSettings | None
            Source, delimiter, strategy and timeout. Read from the
            environment when omitted.
        file_handler : RateFileHandler | None
            Reader for the rate table. Created from `settings` when omitted.

        Returns
        -------
        UnitConvertor

        Raises
        ------
        MalformedLineError, MalformedRateError
            If a line of the rate table is malformed.
        NoRatesLoadedError
            If the table could not be read or holds no rates.

        Notes
        -----
        An unreadable source prints "could not open file" before the
        `NoRatesLoadedError` is raised.
        """
        settings = settings or ConverterSettings.from_env()
        file_handler = file_handler or RateFileHandler(timeout=settings.timeout)

        unavailable = None
        try:
            lines = file_handler.read_lines(settings.rates_source)
        except SourceUnavailableError as ex:
            print(SOURCE_UNAVAILABLE_MESSAGE)
            unavailable = ex
            lines = []

        graph = RateGraph.from_lines(lines, delimiter=settings.delimiter)
        if not len(graph):
            reason = unavailable.details.get("reason") if unavailable else None
            raise NoRatesLoadedError(
                "No conversion rates loaded", source=str(settings.rates_source), reason=reason
            ) from unavailable
        return cls(graph, strategy=settings.strategy)


    def get_units(self):
        """Return every unit that appears in the rate table."""
        return self.graph.units()


    def has_unit(self, unit):
        return unit in self.graph


    def evaluate(self, start_value, route):
        """
        Apply the rates along `route` to `start_value`.

        Parameters
        ----------
        start_value : float | int
            Quantity expressed in `route[0]`.
        route : list[str]
            Units from start to goal, each consecutive pair a direct rate.

        Returns
        -------
        float
            Quantity expressed in `route[-1]`.

        Raises
        ------
        RuntimeError
            If two consecutive units of the route have no direct rate.
            Routes from `RouteFinder` never trigger this.
        """
        factors = [start_value]
        for from_unit, to_unit in zip(route, route[1:]):
            if not self.graph.has_edge(from_unit, to_unit):
                raise RuntimeError(f"Route step {from_unit} -> {to_unit} has no direct rate")
            factors.append(self.graph.rate(from_unit, to_unit))
        # Left-to-right product, same rounding as multiplying step by step.
        return float(np.prod(np.array(factors, dtype=float)))


    def convert(self, value, from_unit, to_unit):
        """
        Convert `value` from `from_unit` to `to_unit`.

        Parameters
        ----------
        value : float | int
            Quantity expressed in `from_unit`.
        from_unit : str
            Unit in the rate table.
        to_unit : str
            Unit in the rate table.

        Returns
        -------
        ConversionResult
            `found` is False (and the route empty) when no chain of rates
            links the units.

        Raises
        ------
        UnitNotFoundError
            If either unit is not in the rate table.
        """
        route = self.route_finder.find_path(from_unit, to_unit)
        if route is None:
            return ConversionResult(value, from_unit, to_unit)

        return ConversionResult(
            value,
            from_unit,
            to_unit,
            route=route,
            factor=self.evaluate(1.0, route),
            converted_value=self.evaluate(value, route),
        )


if __name__ == "__main__":
    # Example usage / quick sanity checks
    unit_convertor = UnitConvertor(RateGraph.build([("m", "cm", 100.0), ("cm", "mm", 10.0)]))
    print(unit_convertor.convert(5, "m", "mm"))  # 5 m = 5000 mm
    print(unit_convertor.get_units())  # Display available units
