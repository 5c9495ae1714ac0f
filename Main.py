import argparse
import sys

from ConversionErrors import ConversionError, UnitNotFoundError
from ConverterSettings import ConverterSettings
from RouteFinder import STRATEGIES
from UnitConvertor import UnitConvertor


"""
Command-line entry point for route-based unit conversion.

Overview
--------
Two ways to run it:

1) Interactive (no conversion arguments): asks for the starting unit, the
   goal unit and a value, re-asking until each answer is valid, prints the
   result and offers another conversion.
2) One-shot: `unit-route 5 m mm` prints "5 m = 5000 mm" and exits.

Exit codes
----------
0   conversion printed (or interactive session ended)
1   no conversion route links the two units
2   bad configuration, unreadable/malformed rate table, or unknown unit

Key behavior & dependencies
---------------------------
- `ConverterSettings` supplies defaults from the environment / `.env`;
  flags given here win.
- `UnitConvertor` loads the rate table and does the conversion.
- Errors are printed to stderr as "Error: <message>".
"""


class Main:
    """
    Interactive prompts and one-shot conversions on top of a `UnitConvertor`.
    """
    def __init__(self, unit_convertor, show_route=False):
        """
        Parameters
        ----------
        unit_convertor : UnitConvertor
        show_route : bool
            Also print the chain of units each conversion went through.
        """
        self.unit_convertor = unit_convertor
        self.show_route = show_route

    def prompt_unit(self, prompt):
        """
        Ask for a unit until the answer is a unit of the rate table.
        """
        unit = ""
        while not self.unit_convertor.has_unit(unit):
            unit = input(prompt).strip()
        return unit

    def prompt_value(self, prompt="Enter value for conversion: "):
        """
        Ask for a number until the answer parses as a float.
        """
        while True:
            text = input(prompt).strip()
            try:
                return float(text)
            except ValueError:
                print(f"'{text}' is not a number.")

    def print_result(self, result):
        print(result)
        if self.show_route and result.found:
            print(f"Route: {result.describe_route()}")

    def run(self):
        """
        Run conversions until the user declines another one.

        Notes
        -----
        - User input is read from stdin.
        - Unknown units are never passed on: the prompts repeat instead.
        """
        while True:
            starting_unit = self.prompt_unit("Enter starting unit: ")
            goal_unit = self.prompt_unit("Enter goal unit: ")
            value = self.prompt_value()

            self.print_result(self.unit_convertor.convert(value, starting_unit, goal_unit))

            choice = input("\nConvert another value? (y/n): ").strip().lower()
            if choice not in ("y", "yes"):
                print("Exiting the program.")
                return 0

    def convert_once(self, value, starting_unit, goal_unit):
        """
        Convert a single value and return the process exit code.
        """
        try:
            result = self.unit_convertor.convert(value, starting_unit, goal_unit)
        except UnitNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

        self.print_result(result)
        return 0 if result.found else 1

    def list_units(self):
        for unit in self.unit_convertor.get_units():
            print(unit)
        return 0


def build_parser():
    p = argparse.ArgumentParser(
        prog="unit-route",
        description="Convert a value between units by chaining the direct rates of a rate table.",
    )
    p.add_argument("value", nargs="?", type=float, help="Value to convert (omit for interactive mode)")
    p.add_argument("from_unit", nargs="?", help="Unit to convert from")
    p.add_argument("to_unit", nargs="?", help="Unit to convert to")
    p.add_argument("--rates", dest="rates_source",
                   help="Rate table path or http(s) URL (default: $UNIT_RATES_SOURCE or rates.txt)")
    p.add_argument("--delimiter",
                   help="Field separator of the rate table (default: $UNIT_RATES_DELIMITER or ';')")
    p.add_argument("--strategy", choices=STRATEGIES,
                   help="Route search strategy (default: $UNIT_ROUTE_STRATEGY or depth_first)")
    p.add_argument("--show-route", action="store_true", help="Also print the units the conversion went through")
    p.add_argument("--list-units", action="store_true", help="Print every unit of the rate table and exit")
    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    one_shot = [args.value, args.from_unit, args.to_unit]
    if any(arg is not None for arg in one_shot) and not all(arg is not None for arg in one_shot):
        parser.error("a one-shot conversion needs VALUE, FROM_UNIT and TO_UNIT")

    try:
        settings = ConverterSettings.from_env().override(
            rates_source=args.rates_source,
            delimiter=args.delimiter,
            strategy=args.strategy,
        )
        unit_convertor = UnitConvertor.from_source(settings)
    except (ConversionError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    app = Main(unit_convertor, show_route=args.show_route)

    if args.list_units:
        return app.list_units()

    if args.value is not None:
        return app.convert_once(args.value, args.from_unit, args.to_unit)

    try:
        return app.run()
    except (EOFError, KeyboardInterrupt):
        print("\nExiting the program.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
