"""Movies, rentals and customer statements for a small video store."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import IntEnum


class PriceCode(IntEnum):
    """How a movie is priced."""

    REGULAR = 0
    NEW_RELEASE = 1
    CHILDRENS = 2


def _format_amount(amount: float) -> str:
    return f"{amount:g}"


@dataclass
class Movie:
    """A title together with the price code it rents under."""

    title: str
    price_code: PriceCode | int

    def __post_init__(self) -> None:
        try:
            self.price_code = PriceCode(self.price_code)
        except ValueError:
            pass

    def charge(self, days_rented: int) -> float:
        """Rental charge for keeping this movie ``days_rented`` days.

        An unknown price code costs nothing.
        """
        if self.price_code == PriceCode.REGULAR:
            amount = 2.0
            if days_rented > 2:
                amount += (days_rented - 2) * 1.5
            return amount
        if self.price_code == PriceCode.NEW_RELEASE:
            return float(days_rented * 3)
        if self.price_code == PriceCode.CHILDRENS:
            amount = 1.5
            if days_rented > 3:
                amount += (days_rented - 3) * 1.5
            return amount
        return 0.0

    def frequent_renter_points(self, days_rented: int) -> int:
        """One point per rental, plus a bonus for new releases kept over a day."""
        if self.price_code == PriceCode.NEW_RELEASE and days_rented > 1:
            return 2
        return 1


@dataclass
class Rental:
    """A movie rented for a number of days."""

    movie: Movie
    days_rented: int

    def charge(self) -> float:
        """Charge for this rental."""
        return self.movie.charge(self.days_rented)

    def frequent_renter_points(self) -> int:
        """Frequent renter points earned by this rental."""
        return self.movie.frequent_renter_points(self.days_rented)


@dataclass
class Customer:
    """A named customer and the rentals made."""

    name: str
    rentals: list[Rental] = field(default_factory=list)

    def add_rental(self, rental: Rental) -> None:
        """Record a new rental."""
        self.rentals.append(rental)

    def total_charge(self) -> float:
        """Sum of the charges of every rental."""
        return sum((rental.charge() for rental in self.rentals), 0.0)

    def total_frequent_renter_points(self) -> int:
        """Sum of the frequent renter points of every rental."""
        return sum(rental.frequent_renter_points() for rental in self.rentals)

    def statement(self) -> str:
        """Printable rental record with one line per rental and totals."""
        lines = [f"Rental Record for {self.name}\n"]
        lines.extend(
            f"\t{rental.movie.title}\t{_format_amount(rental.charge())}\n"
            for rental in self.rentals
        )
        lines.append(f"Amount owed is: {_format_amount(self.total_charge())}\n")
        lines.append(
            f"You earned: {self.total_frequent_renter_points()} frequent renter points\n"
        )
        return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print the statement of a sample customer."""
    lotr = Movie("Lord of the Rings", PriceCode.REGULAR)
    hp = Movie("Harry Potter", PriceCode.CHILDRENS)

    customer = Customer("Fred")
    customer.add_rental(Rental(lotr, 10))
    customer.add_rental(Rental(hp, 5))

    sys.stdout.write(customer.statement())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())