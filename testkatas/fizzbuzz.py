"""The fizzbuzz exercise."""


def fizzbuzz(number: int) -> str:
    """"fizz" for multiples of 3, "buzz" for 5, "fizzbuzz" for both, else the number."""
    if number % 15 == 0:
        return "fizzbuzz"
    if number % 3 == 0:
        return "fizz"
    if number % 5 == 0:
        return "buzz"
    return str(number)