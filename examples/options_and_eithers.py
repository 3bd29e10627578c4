"""
Lifting Optional Values and Outcomes into Described Computations
"""

from treelog import Failure, Success, described, from_either, from_optional, success
from treelog.log_setup import setup_logging


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


@described
def simple():
    x = yield success(11, lambda v: f"x = {v}")
    y = yield success(2, lambda v: f"y = {v}")
    total = yield success(x + y, lambda v: f"Sum is {v}")
    return total


@described
def option_sum(maybe_x, maybe_y):
    x = yield from_optional(maybe_x, "No x", lambda v: f"x = {v}")
    y = yield from_optional(maybe_y, "No y", lambda v: f"y = {v}")
    total = yield success(x + y, lambda v: f"Sum is {v}")
    return total


@described
def either_sum(either_x, either_y):
    x = yield from_either(either_x, lambda v: f"x = {v}")
    y = yield from_either(either_y, lambda v: f"y = {v}")
    total = yield success(x + y, lambda v: f"Sum is {v}")
    return total


def main():
    setup_logging(level="WARNING")

    print_section("Plain values")
    print(simple().describe("Calculating sum").show())

    print_section("Optional values")
    print(option_sum(11, 2).describe("Calculating option sum").show())
    print()
    print(option_sum(11, None).describe("Calculating no option sum").show())

    print_section("Outcomes")
    print(either_sum(Success(11), Success(2)).describe("Calculating either sum").show())
    print()
    left = either_sum(Success(11), Failure("fubar")).describe("Calculating left either sum")
    print(left.show())
    print(left.outcome.fold(lambda message: f"Failure: {message}", lambda value: f"Success: {value}"))


if __name__ == "__main__":
    main()
