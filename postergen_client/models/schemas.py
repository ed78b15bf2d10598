"""Domain schemas returned by the poster client.

Backend records are loosely typed, so display fields are optional and unknown
keys are kept on the model (``model_extra``). The backend's ORM rows serialize
their primary key as ``ID``; both spellings are accepted.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Logos are opaque records; only the surrounding collection is checked.
Logo = Any


class FieldDescriptor(BaseModel):
    """One entry of a template's ``required_fields``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    label: str | None = None
    type: str | None = None
    pattern: str | None = None
    max_length: int | None = Field(default=None, alias="maxLength")
    pattern_title: str | None = Field(default=None, alias="patternTitle")


class Template(BaseModel):
    """Poster layout with its decoded field list and styling defaults."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # Display fields are passed through with whatever type the backend sends.
    id: Any = Field(default=None, validation_alias=AliasChoices("id", "ID"))
    name: Any = None
    type: Any = None
    price: Any = None
    thumbnail_url: Any = None
    is_active: Any = None
    layout_id: Any = None
    layout: Any = None
    required_fields: list[Any] = Field(default_factory=list)
    customization_data: dict[str, Any] = Field(default_factory=dict)

    def field_descriptors(self) -> list[FieldDescriptor]:
        """Return the object entries of ``required_fields`` as descriptors."""
        return [
            FieldDescriptor.model_validate(entry)
            for entry in self.required_fields
            if isinstance(entry, dict)
        ]


class GenerationResult(BaseModel):
    """Absolute link to a generated poster artifact."""

    pdf_url: str


class GeneratedPoster(BaseModel):
    """``datapayload.data`` of a generation response; only ``pdf_url`` is read."""

    model_config = ConfigDict(extra="allow")

    pdf_url: Any = None


class PosterRecord(BaseModel):
    """A stored poster as returned by ``GET /posters/{id}``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = Field(default=None, validation_alias=AliasChoices("id", "ID"))
    template_id: Any = None
    business_name: Any = None
    pdf_url: str | None = None
    status: Any = None
