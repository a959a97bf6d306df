"""Domain value objects for the bulletin board.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from pathlib import PurePath

from pydantic import field_validator

from bulletin.domain.value.common import ValueObject


class DatabaseType(str, Enum):
    """Backing database a request is routed to."""

    MARIADB = "MARIADB"
    ORACLE = "ORACLE"

    @classmethod
    def parse(cls, name: str) -> "DatabaseType":
        """Parse a database type name, ignoring case.

        Raises:
            ValueError: If the name is not a known database type
        """
        try:
            return cls(name.strip().upper())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Invalid database type. Valid types are: {valid}"
            ) from None


class CardPosition(str, Enum):
    """Slot a card occupies in the screen layout."""

    LEFT_1 = "LEFT_1"
    LEFT_2 = "LEFT_2"
    RIGHT_1 = "RIGHT_1"
    RIGHT_2 = "RIGHT_2"


class DatabaseSelection(ValueObject):
    """Database chosen for the current request.

    Resolved once per request and passed explicitly to whatever opens the
    database session.
    """

    database_type: DatabaseType


class UploadedFile(ValueObject):
    """A file received from a client, not yet stored."""

    original_filename: str
    content_type: str | None = None
    data: bytes

    @field_validator("original_filename")
    @classmethod
    def strip_directories(cls, v: str) -> str:
        """Keep only the final path component of the client filename."""
        name = PurePath(v.replace("\\", "/")).name
        if not name:
            raise ValueError("Filename must not be empty")
        return name

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_empty(self) -> bool:
        return not self.data

    @property
    def extension(self) -> str:
        """Extension including the leading dot, or an empty string."""
        return PurePath(self.original_filename).suffix
