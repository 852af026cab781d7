"""Base entity class for named, identifiable objects."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Base class for all identifiable objects in thermowatch.

    Every monitor, source, sink and runner carries a UUID and a
    human-readable name. The name also keys the object's logger, so
    two monitors with different names log to different channels.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    uuid: UUID = Field(
        default_factory=uuid4,
        description="Unique identifier for this entity",
    )
    name: str = Field(
        min_length=1, description="Human-readable name for this entity"
    )

    def __repr__(self) -> str:
        """Return the class name and entity name."""
        return f"{self.__class__.__name__}(name='{self.name}')"
