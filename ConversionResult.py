from dataclasses import dataclass, field
from typing import List, Optional

from ConversionErrors import NoPathError

ROUTE_NOT_FOUND_MESSAGE = "conversion route not found"


def format_number(number):
    # Six significant digits, trailing zeros dropped: 5000.0 -> "5000".
    return f"{number:g}"


@dataclass
class ConversionResult:
    value: float
    from_unit: str
    to_unit: str
    route: List[str] = field(default_factory=list)
    factor: Optional[float] = None
    converted_value: Optional[float] = None


    @property
    def found(self):
        return self.converted_value is not None


    @property
    def hops(self):
        return max(len(self.route) - 1, 0)


    def raise_for_route(self):
        """
        Raise `NoPathError` if no route was found, otherwise return self.
        """
        if not self.found:
            raise NoPathError(ROUTE_NOT_FOUND_MESSAGE, from_unit=self.from_unit, to_unit=self.to_unit)
        return self


    def describe_route(self):
        return " -> ".join(self.route)


    def __str__(self):
        if not self.found:
            return ROUTE_NOT_FOUND_MESSAGE

        result_str = (
            f"{format_number(self.value)} {self.from_unit} = "
            f"{format_number(self.converted_value)} {self.to_unit}"
        )
        return result_str
