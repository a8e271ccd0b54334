"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the edge of the API payloads, with self-documenting
  fields, without coupling the core to any I/O library.
- Payload keys (``userId``, nested ``company.name``) are mapped once here so
  views only ever see Python names.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from pydantic import AliasPath, BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class User(BaseModel):
    """A primary entity: one listable user.

    Only the fields the views render are kept; the rest of the payload
    (address, phone, ...) is ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: int = Field(..., description="Stable unique identifier.")
    name: str = Field(..., description="Display name.")
    email: str = Field(..., description="Contact email.")
    company_name: str = Field(
        default="",
        validation_alias=AliasPath("company", "name"),
        description="Name of the user's company (payload: company.name).",
    )
    website: str = Field(default="", description="Personal website.")


class Post(BaseModel):
    """A secondary entity owned by a user; also the CRUD resource."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = Field(..., description="Identifier, unique within its owner.")
    owner_id: int = Field(
        ...,
        alias="userId",
        description="Foreign key to User.id (payload: userId).",
    )
    title: str = Field(default="", description="Post title.")
    body: str = Field(default="", description="Post body.")


class PostDraft(BaseModel):
    """Form-bound draft for the CRUD view."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    title: str = Field(default="", description="Draft title.")
    body: str = Field(default="", description="Draft body.")
    owner_id: int = Field(
        default=1,
        alias="userId",
        description="Owner the post is written for.",
    )

    @field_validator("title", "body")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    def missing_fields(self) -> list[str]:
        """Names of required fields that are still blank."""

        return [name for name in ("title", "body") if not getattr(self, name)]

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)
