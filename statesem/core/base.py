from dataclasses import dataclass


@dataclass(eq=False)
class StateBase:
    """Base class for state identity"""

    name: str

    def __hash__(self) -> int:
        """Make states hashable based on their name and memory address."""
        return hash((self.name, id(self)))

    def __eq__(self, other: object) -> bool:
        """States are equal if they are the same object."""
        if not isinstance(other, StateBase):
            return NotImplemented
        return id(self) == id(other)
