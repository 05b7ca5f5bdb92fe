from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity with a storage-assigned integer identifier.

    Entities are immutable. The identifier is ``None`` until a repository
    persists the entity and hands back a copy carrying the assigned id.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = PydanticField(
        default=None,
        description="Identifier assigned by the storage layer on save",
    )


class EntityTable(SQLModel, table=False):
    """Base table with an autoincrement integer primary key."""

    id: int | None = Field(default=None, primary_key=True)
