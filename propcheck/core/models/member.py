"""
MemberDescriptor model identifying the member a rule compares against.
"""

from pydantic import BaseModel, Field


class MemberDescriptor(BaseModel):
    """
    Opaque description of a compared member, carried only for error messages
    and introspection. Validators store and forward it; they never use it to
    read values.

    Attributes:
        name: Last segment of the member path ("start_date")
        path: Full dotted path from the validated instance ("booking.start_date")
    """

    name: str = Field(..., min_length=1)
    path: str = Field(..., min_length=1)

    @classmethod
    def from_path(cls, path: str) -> "MemberDescriptor":
        """Build a descriptor from a dotted member path."""
        return cls(name=path.rsplit(".", 1)[-1], path=path)

    def __str__(self) -> str:
        return self.path

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "start_date",
                "path": "booking.start_date",
            }
        }
