"""
Conversion route search over a `RateGraph`.

Overview
--------
`RouteFinder.find_path(start, goal)` returns some chain of units linked by
direct rates, e.g. ["m", "cm", "mm"], or None when the two units sit in
disconnected parts of the graph.

Strategies
----------
- "depth_first" (default): recursive backtracking. The first route found
  wins; there is no shortest-path guarantee and which route comes back when
  several exist depends on the order the rates were declared in.
- "breadth_first": returns a route with the fewest hops. This can pick a
  different route than depth-first when several exist.

Key points
----------
- Both units must be in the graph. This is checked once on entry and raises
  `UnitNotFoundError`; the recursion itself never raises.
- The path walked so far is an immutable tuple, copied on every step. A failed
  branch therefore leaves its caller's path exactly as it was, and a
  successful branch returns its path untouched.
- A unit is never expanded twice on the same path, so the search terminates
  with a recursion depth of at most the number of units.
- Converting a unit to itself returns the one-unit route [unit].
"""

from collections import deque
from typing import List, Optional, Tuple

from ConversionErrors import UnitNotFoundError

DEPTH_FIRST = "depth_first"
BREADTH_FIRST = "breadth_first"
STRATEGIES = (DEPTH_FIRST, BREADTH_FIRST)


class RouteFinder:
    """
    Find conversion routes between units of a read-only `RateGraph`.

    Attributes
    ----------
    graph : RateGraph
        Graph to search. Never modified.
    strategy : str
        One of `STRATEGIES`.
    """

    def __init__(self, graph, strategy=DEPTH_FIRST):
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown route strategy '{strategy}'. Expected one of: {', '.join(STRATEGIES)}")
        self.graph = graph
        self.strategy = strategy


    def find_path(self, start_unit, goal_unit) -> Optional[List[str]]:
        """
        Find a route of direct rates from `start_unit` to `goal_unit`.

        Parameters
        ----------
        start_unit : str
            Unit to convert from. Must be in the graph.
        goal_unit : str
            Unit to convert to. Must be in the graph.

        Returns
        -------
        list[str] | None
            Units from start to goal, or None if no route exists.

        Raises
        ------
        UnitNotFoundError
            If either unit is not in the graph.
        """
        for unit in (start_unit, goal_unit):
            if unit not in self.graph:
                raise UnitNotFoundError(f"Unit '{unit}' is not in the rate table", unit=unit)

        if start_unit == goal_unit:
            return [start_unit]

        if self.strategy == BREADTH_FIRST:
            route = self._search_breadth_first(start_unit, goal_unit)
        else:
            route = self._search_depth_first(start_unit, goal_unit, ())
        return list(route) if route is not None else None


    def _search_depth_first(self, current_unit, goal_unit, visited: Tuple[str, ...]) -> Optional[Tuple[str, ...]]:
        neighbours = self.graph.neighbours(current_unit)

        # Direct rate to the goal ends the search.
        if goal_unit in neighbours:
            return visited + (current_unit, goal_unit)

        # Already on this path: going further would only walk in circles.
        if current_unit in visited:
            return None

        path = visited + (current_unit,)
        for next_unit in neighbours:
            route = self._search_depth_first(next_unit, goal_unit, path)
            if route is not None:
                return route

        # Every neighbour failed; the caller still holds `visited` unchanged.
        return None


    def _search_breadth_first(self, start_unit, goal_unit) -> Optional[Tuple[str, ...]]:
        queue = deque([(start_unit,)])
        seen = {start_unit}
        while queue:
            path = queue.popleft()
            for next_unit in self.graph.neighbours(path[-1]):
                if next_unit == goal_unit:
                    return path + (next_unit,)
                if next_unit not in seen:
                    seen.add(next_unit)
                    queue.append(path + (next_unit,))
        return None
