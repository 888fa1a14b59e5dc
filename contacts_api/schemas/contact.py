"""
Pydantic schemas for contacts.

Request bodies accept field names in any casing (``Name``, ``name``,
``contact_id``, ``ContactId``); responses are emitted in camelCase.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Base for request bodies: match incoming keys to fields ignoring case and underscores."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        lookup = {name.replace("_", "").lower(): name for name in cls.model_fields}
        normalized = {}
        for key, value in data.items():
            field = lookup.get(str(key).replace("_", "").lower())
            normalized[field or key] = value
        return normalized


class ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class ContactRequest(RequestModel):
    """Body for creating or updating a contact. Fund membership is not settable here."""

    name: Optional[str] = Field(None, description="Contact name, required, up to 100 characters")
    email: Optional[str] = Field(None, description="Optional e-mail address")
    phone: Optional[str] = Field(None, description="Optional phone number")


class ContactRead(ResponseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    fund_id: Optional[int] = None


def dump_contact(entity) -> dict:
    return ContactRead.model_validate(entity).model_dump(by_alias=True)


def dump_contacts(entities) -> list[dict]:
    return [dump_contact(entity) for entity in entities]
