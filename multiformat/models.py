"""
Pydantic model for the demo record rendered by every output format.
"""

from typing import Any

from pydantic import BaseModel


class Record(BaseModel):
    """A name/value pair shown by every subcommand."""

    name: str
    value: str

    model_config = {"frozen": True}

    def as_dict(self) -> dict[str, Any]:
        """Fields as a mapping, in declaration order."""
        return self.model_dump()

    def table_headers(self) -> list[str]:
        """Column headers derived from the field names."""
        return [field.replace("_", " ").title() for field in type(self).model_fields]

    def table_row(self) -> list[str]:
        """Field values as strings, in declaration order."""
        return [str(value) for value in self.as_dict().values()]


def demo_record() -> Record:
    """Build the fixed record shown by the CLI."""
    return Record(name="Hello", value="world")
