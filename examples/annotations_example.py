"""
Annotating Log Nodes with Domain Keys

Each greeting node carries the key of the person greeted, so the log can
be searched for everything that touched a given record.
"""

import uuid
from dataclasses import dataclass, field

from treelog import map_each, success
from treelog.log_setup import setup_logging


@dataclass(frozen=True)
class PersonKey:
    uuid: uuid.UUID = field(default_factory=uuid.uuid4)

    def __str__(self):
        return str(self.uuid)


@dataclass(frozen=True)
class Person:
    key: PersonKey
    name: str


def greet(person: Person):
    return success(f"Hello, {person.name}", f"Said hello to {person.name}").annotate_with(person.key)


def people_to_greet():
    return [Person(PersonKey(), "Lance"), Person(PersonKey(), "Channing")]


def main():
    setup_logging(level="WARNING")

    result = map_each("Greeting everybody", people_to_greet(), greet)

    # Greeting everybody
    #   Said hello to Lance - [5f08d72a-08c1-4bc5-8750-7639c1f0b2a5]
    #   Said hello to Channing - [eec2a576-1e87-4dbd-a97a-8e770c3ae85e]
    print(result.show())
    print()
    print(result.value)
    print(sorted(str(key) for key in result.all_annotations()))


if __name__ == "__main__":
    main()
