"""
Person model
"""

from dataclasses import dataclass, field
from typing import Optional

from .base_model import Record


@dataclass(repr=False)
class Person(Record):
    """
    A person's name record.

    Positional construction takes the last name first: ``Person("Smith", "Jane")``.
    Prefer keywords, ``Person(first_name="Jane", last_name="Smith")``.
    """

    last_name: Optional[str] = field(default=None, metadata={'alias': 'lastName'})
    first_name: Optional[str] = field(default=None, metadata={'alias': 'firstName'})

    def __str__(self) -> str:
        return f"firstName: {self.first_name}, lastName: {self.last_name}"
