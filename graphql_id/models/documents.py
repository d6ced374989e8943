from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .identifiers import ID


class IdentifiedDocument(BaseModel):
    """Base model for MongoDB documents keyed by a polymorphic ``_id``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: ID = Field(alias="_id")

    @field_validator("id", mode="before")
    @classmethod
    def _read_stored_id(cls, value: Any, info: ValidationInfo) -> Any:
        # Raw documents carry BSON values; JSON input keeps the text codec rules.
        if info.mode == "python" and not isinstance(value, ID):
            return ID.with_bson(value)
        return value

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "IdentifiedDocument":
        return cls.model_validate(dict(document))

    def to_document(self) -> Dict[str, Any]:
        """Return a dict ready for insertion, with ``_id`` as a native BSON value."""
        document = self.model_dump(by_alias=True)
        document["_id"] = self.id.to_bson()
        return document


__all__ = ["IdentifiedDocument"]
