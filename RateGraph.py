"""
Bidirectional conversion-rate graph.

Overview
--------
`RateGraph` turns declared rate triples (unit1, unit2, rate) into an
adjacency mapping:

    {unit: {neighbour_unit: factor}}

where `factor` means "1 unit = factor neighbour_unit". Every declared edge
is stored together with its inverse (1/rate), so a search never has to
re-derive anything at query time.

Key points
----------
- Symmetry: every neighbour of a unit is itself a key of the graph.
- A later declaration of the same unit pair overwrites the earlier one in
  both directions.
- The graph is filled once in `build()` and is read-only afterwards; the
  public accessors hand out read-only views or copies.
- Neighbours keep the order in which their rates were declared.

Caveats
-------
- No dimensional analysis is done. Rates between "m" and "kg" are accepted
  if the table declares them.
"""

import copy
import math
from types import MappingProxyType
from typing import Dict, Iterable, List, Tuple

from ConversionErrors import MalformedRateError, MalformedLineError
from RateLine import DEFAULT_DELIMITER, RateLine


class RateGraph:
    """
    Read-only adjacency mapping of direct conversion factors between units.
    """

    def __init__(self, rates: Dict[str, Dict[str, float]] = None):
        self._rates = rates if rates is not None else {}


    @classmethod
    def build(cls, triples: Iterable[Tuple[str, str, float]]):
        """
        Build a graph from (unit1, unit2, rate) triples.

        Parameters
        ----------
        triples : Iterable[tuple[str, str, float] | RateLine]
            Declared rates. `RateLine` objects are accepted as well.

        Returns
        -------
        RateGraph
            Graph holding each declared edge and its inverse.

        Raises
        ------
        MalformedRateError
            If a rate, or its inverse, is not a finite positive number.
        MalformedLineError
            If a triple has fewer than three fields, an empty unit name, or
            the same unit on both sides.
        """
        rates = {}
        for index, triple in enumerate(triples, start=1):
            if isinstance(triple, RateLine):
                line_number = triple.line_number or index
                unit1, unit2, rate = triple.as_triple()
            else:
                line_number = index
                if len(triple) < 3:
                    raise MalformedLineError("Expected (unit1, unit2, rate)", line_number=line_number, line=str(triple))
                unit1, unit2, rate = triple[:3]

            if not unit1 or not unit2:
                raise MalformedLineError("Unit name cannot be empty", line_number=line_number)
            if unit1 == unit2:
                raise MalformedLineError(f"Rate from '{unit1}' to itself", line_number=line_number)
            try:
                rate = RateLine.parse_rate(rate, line_number=line_number)
            except TypeError:
                raise MalformedRateError("Rate is not a number", line_number=line_number, token=str(rate))

            inverse = 1 / rate
            # Rates near the float limits can lose their inverse (1e-320 -> inf).
            if not math.isfinite(inverse) or inverse == 0:
                raise MalformedRateError(
                    "Inverse rate is not a finite positive number", line_number=line_number, token=str(rate)
                )

            rates.setdefault(unit1, {})[unit2] = rate
            rates.setdefault(unit2, {})[unit1] = inverse
        return cls(rates)


    @classmethod
    def from_lines(cls, lines: Iterable[str], delimiter: str = DEFAULT_DELIMITER):
        """
        Tokenize rate-table lines and build the graph.

        Blank lines are skipped. The first malformed line aborts the build,
        so a corrupt table never yields a partial graph.
        """
        return cls.build(cls.parse_lines(lines, delimiter))


    @staticmethod
    def parse_lines(lines: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> List[RateLine]:
        parsed = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            parsed.append(RateLine.parse(line, line_number=line_number, delimiter=delimiter))
        return parsed


    def units(self) -> List[str]:
        return list(self._rates)


    def neighbours(self, unit):
        """
        Return a read-only view of `unit`'s direct conversion factors.

        Raises
        ------
        KeyError
            If `unit` is not in the graph.
        """
        return MappingProxyType(self._rates[unit])


    def rate(self, from_unit, to_unit) -> float:
        return self._rates[from_unit][to_unit]


    def has_edge(self, from_unit, to_unit) -> bool:
        return to_unit in self._rates.get(from_unit, {})


    def as_dict(self) -> Dict[str, Dict[str, float]]:
        return copy.deepcopy(self._rates)


    def __contains__(self, unit):
        return unit in self._rates


    def __len__(self):
        return len(self._rates)


    def __iter__(self):
        return iter(self._rates)


    def __str__(self):
        edges = sum(len(neighbours) for neighbours in self._rates.values())
        return f"RateGraph with {len(self._rates)} units and {edges} directed rates"
