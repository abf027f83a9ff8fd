"""A minimal complex number with equality, addition and a checked division."""

from __future__ import annotations

import math


def _ieee_divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


class Complex:
    """Complex number with a real and an imaginary part."""

    __slots__ = ("real", "imaginary")

    def __init__(self, real: float = 0, imaginary: float = 0) -> None:
        self.real = float(real)
        self.imaginary = float(imaginary)

    @staticmethod
    def _coerce(value: object) -> Complex | None:
        if isinstance(value, Complex):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Complex(value)
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.real == rhs.real and self.imaginary == rhs.imaginary

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.real + rhs.real, self.imaginary + rhs.imaginary)

    def __truediv__(self, other: object) -> Complex:
        """Divide the real parts only; dividing by zero raises ValueError."""
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs == Complex():
            raise ValueError("rhs is zero")
        return Complex(_ieee_divide(self.real, rhs.real))

    def __str__(self) -> str:
        return f"{self.real:g} + {self.imaginary:g}i"

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imaginary!r})"