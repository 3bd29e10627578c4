"""
Persisting a Described Computation as JSON and Carrying On

A computation is serialized, read back, and then extended with more
steps; the restored log becomes part of the new one:

    FTW!
      Some things that have been serialized and deserialized
        Here are some things
          Here I described Thing1 - [1]
          Here I described Thing2 - [2]
      Things that have not been serialized and deserialized
        Here I described Thing3 - [3]
        Here I described Thing4 - [4]
"""

from dataclasses import dataclass

from treelog import described, dumps, loads, map_each, success
from treelog.log_setup import setup_logging


@dataclass(frozen=True)
class Thing:
    id: int
    name: str


def things(thing: Thing):
    return success(f"Hello {thing.name}", f"Here I described {thing.name}").annotate_with(thing.id)


def show_computation(dc):
    print("The log is:")
    print(dc.show())
    print()
    print("The value is:")
    print(dc.outcome)


def main():
    setup_logging(level="INFO", format_style="compact", library_level="DEBUG")

    result = map_each("Here are some things", [Thing(1, "Thing1"), Thing(2, "Thing2")], things)

    print("Before serialization:")
    show_computation(result)

    text = dumps(result, indent=2)
    print()
    print("Serialized:")
    print(text)

    restored = loads(text)
    print()
    print("After serializing and deserializing:")
    show_computation(restored)

    @described
    def more_stuff():
        first = yield restored.describe("Some things that have been serialized and deserialized")
        second = yield map_each(
            "Things that have not been serialized and deserialized",
            [Thing(3, "Thing3"), Thing(4, "Thing4")],
            things,
        )
        return first + second

    print()
    print("After adding some things:")
    show_computation(more_stuff().describe("FTW!"))


if __name__ == "__main__":
    main()
