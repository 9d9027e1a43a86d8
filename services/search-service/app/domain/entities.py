"""
Domain entities for catalog search.

A catalog record is one listing (course, subject, class) that a query can be
scored against.
"""

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from .exceptions import InvalidRecordException


@dataclass(frozen=True)
class CatalogRecord:
    """
    Value object representing one catalog listing.

    Attributes:
        title: Listing title (e.g., "Mathematics 101")
        description: Free-text description
        subject: Subject name (e.g., "Maths")
        record_id: Caller's identifier for the listing, if any
    """

    title: str
    description: str = ""
    subject: str = ""
    record_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CatalogRecord":
        """
        Build a record from a plain mapping.

        Missing or None description/subject become empty strings.

        Args:
            data: Mapping with "title" and optionally "description",
                  "subject" and "id"

        Returns:
            CatalogRecord

        Raises:
            InvalidRecordException: If title is missing or a field is not text
        """
        if data.get("title") is None:
            raise InvalidRecordException("title", "is required")

        fields = {}
        for field in ("title", "description", "subject"):
            value = data.get(field)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise InvalidRecordException(
                    field, f"expected text, got {type(value).__name__}"
                )
            fields[field] = value

        record_id = data.get("id")
        return cls(
            record_id=str(record_id) if record_id is not None else None, **fields
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)
