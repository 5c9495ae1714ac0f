import math
from dataclasses import dataclass

from ConversionErrors import MalformedLineError, MalformedRateError

DEFAULT_DELIMITER = ";"
REQUIRED_FIELDS = 3   # unit1, unit2, rate. Anything after the third field is ignored.


@dataclass(frozen=True)
class RateLine:
    """
    One declared conversion rate: 1 `from_unit` = `rate` `to_unit`.

    Built from a single line of a rate table such as "m;cm;100". The line
    number is kept so later errors can point back at the table.
    """
    from_unit: str
    to_unit: str
    rate: float
    line_number: int = 0


    @classmethod
    def parse(cls, line, line_number=0, delimiter=DEFAULT_DELIMITER):
        """
        Tokenize a rate-table line into a validated `RateLine`.

        Token rules:
            - The line ending is removed, then the line is split on `delimiter`.
            - Unit names are stripped of surrounding whitespace; matching is
              otherwise exact and case-sensitive.
            - The rate token goes through `float()`, so "100", "1e2" and " 100 "
              are all accepted.

        Args:
            line (str): Raw line from the rate table.
            line_number (int): 1-based position of the line, used in errors.
            delimiter (str): Field separator.

        Returns:
            RateLine: The parsed triple.

        Raises:
            MalformedLineError: Fewer than three fields, or an empty unit name.
            MalformedRateError: The rate is not a finite positive number.
        """
        text = line.rstrip("\r\n")
        fields = text.split(delimiter)
        if len(fields) < REQUIRED_FIELDS:
            raise MalformedLineError(
                f"Expected {REQUIRED_FIELDS} fields separated by '{delimiter}', got {len(fields)}",
                line_number=line_number,
                line=text,
            )

        from_unit = fields[0].strip()
        to_unit = fields[1].strip()
        if not from_unit or not to_unit:
            raise MalformedLineError("Unit name cannot be empty", line_number=line_number, line=text)

        rate = cls.parse_rate(fields[2], line_number=line_number, line=text)
        return cls(from_unit, to_unit, rate, line_number)


    @staticmethod
    def parse_rate(token, line_number=0, line=None):
        """
        Convert a rate token to float, rejecting anything that is not a finite positive number.
        """
        try:
            rate = float(token)
        except ValueError:
            raise MalformedRateError("Rate is not a number", line_number=line_number, line=line, token=token)

        if not math.isfinite(rate) or rate <= 0:
            raise MalformedRateError(
                "Rate must be a finite positive number", line_number=line_number, line=line, token=token
            )
        return rate


    def as_triple(self):
        return (self.from_unit, self.to_unit, self.rate)


    def __str__(self):
        return f"1 {self.from_unit} = {self.rate:g} {self.to_unit}"
