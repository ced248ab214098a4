"""Locale-independent parsing of numeric tokens.

Grouping and decimal separators are explicit, so ``1,234`` parses the same
way on every host. Every failure is reported as ``ValueError``.
"""

import re

INT_MIN, INT_MAX = -(2 ** 31), 2 ** 31 - 1
LONG_MIN, LONG_MAX = -(2 ** 63), 2 ** 63 - 1

SPECIAL_FLOATS = re.compile(r"[+-]?(NaN|Infinity)")


class NumberParser:
    """Parses integer and decimal tokens, accepting digit grouping."""

    def __init__(self, grouping_separator: str = ",", decimal_separator: str = "."):
        if grouping_separator == decimal_separator:
            raise ValueError("grouping and decimal separators must differ")
        self.grouping_separator = grouping_separator
        self.decimal_separator = decimal_separator

        group = re.escape(grouping_separator)
        point = re.escape(decimal_separator)
        # Plain digits, or 1-3 leading digits followed by groups of exactly 3
        numeral = rf"(?:[0-9]+|[1-9][0-9]{{0,2}}(?:{group}[0-9]{{3}})+)"
        self._integer = re.compile(rf"[+-]?{numeral}")
        self._decimal = re.compile(
            rf"[+-]?(?:{numeral}(?:{point}[0-9]*)?|{point}[0-9]+)"
            r"(?:[eE][+-]?[0-9]+)?"
        )

    def _integer_value(self, token: str, low: int, high: int, kind: str) -> int:
        if not self._integer.fullmatch(token):
            raise ValueError(f"invalid {kind}: {token!r}")
        value = int(token.replace(self.grouping_separator, ""))
        if not low <= value <= high:
            raise ValueError(f"{kind} out of range: {token!r}")
        return value

    def parse_int(self, token: str) -> int:
        """Parse a 32-bit signed integer."""
        return self._integer_value(token, INT_MIN, INT_MAX, "integer")

    def parse_long(self, token: str) -> int:
        """Parse a 64-bit signed integer."""
        return self._integer_value(token, LONG_MIN, LONG_MAX, "long integer")

    def parse_double(self, token: str) -> float:
        if SPECIAL_FLOATS.fullmatch(token):
            return float(token)
        if not self._decimal.fullmatch(token):
            raise ValueError(f"not a decimal: {token!r}")
        normalized = token.replace(self.grouping_separator, "")
        normalized = normalized.replace(self.decimal_separator, ".")
        return float(normalized)
