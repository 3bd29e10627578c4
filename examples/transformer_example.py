"""
Described Computations Inside Other Effects

The same chain written over an optional value and over a list of
alternatives; the list version logs every combination separately.
"""

from treelog import LIST_EFFECT, OPTIONAL_EFFECT, DescribedComputationT, draw_tree, leaf, node
from treelog.log_setup import setup_logging


def main():
    setup_logging(level="WARNING")

    def lift_option(value, description):
        return DescribedComputationT.lift(OPTIONAL_EFFECT, value, description)

    option_example = lift_option(1, "1").and_then(
        lambda one: lift_option(2, "2").and_then(
            lambda two: lift_option(one + two, lambda v: f"1 + 2: {v}")
        )
    )
    print(option_example.run.show())
    print()

    def lift_list(values, description):
        return DescribedComputationT.lift(LIST_EFFECT, values, description)

    list_example = lift_list([1, 2, 3, 4], lambda v: f"v1: {v}").and_then(
        lambda v1: lift_list([10, 20], lambda v: f"v2: {v}").and_then(
            lambda v2: lift_list([v1 + v2], lambda v: f"v1+v2: {v}")
        )
    )
    print(",\n".join(dc.show() for dc in list_example.run))
    print()

    # Any Tree can be drawn, not only log trees
    print(draw_tree(node(1, [leaf(2), leaf(3)])))


if __name__ == "__main__":
    main()
