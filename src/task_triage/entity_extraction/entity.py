"""
Entity dataclass for entity extraction.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Entity:
    """
    A text fragment found by one extraction pass.

    Attributes:
        text: Fragment as emitted in the classification result
        label: Pattern family that produced it ("date", "person", "location", "domain")
        start: Character start position in the scanned text
        end: Character end position in the scanned text
        source: Which text variant was scanned ("normalized" | "original")
    """

    text: str
    label: str
    start: int
    end: int
    source: str = "normalized"

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"Entity('{self.text}', {self.label}, [{self.start},{self.end}], {self.source})"

    def length(self) -> int:
        """
        Get entity span length.

        Returns:
            Number of characters in entity span
        """
        return self.end - self.start
