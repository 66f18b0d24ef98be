"""Pydantic schemas for responders."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import AnyHttpUrl, BaseModel, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from app.constants.responders import ResponderKind

_http_url = TypeAdapter(AnyHttpUrl)


class ResponderCreate(BaseModel):
    """Responder definition used by seeding. Enforces the kind/endpoint_url pairing."""

    name: str = Field(..., min_length=1, max_length=64)
    kind: ResponderKind
    endpoint_url: Optional[str] = None
    model_name: Optional[str] = Field(None, max_length=128)

    model_config = {"use_enum_values": True}

    @model_validator(mode="after")
    def check_endpoint(self) -> "ResponderCreate":
        if self.kind == ResponderKind.HTTP_GENERATE:
            if not self.endpoint_url:
                raise ValueError("http-generate responders require an endpoint_url")
            try:
                _http_url.validate_python(self.endpoint_url)
            except PydanticValidationError as e:
                raise ValueError(
                    f"endpoint_url must be an absolute http(s) URL: {self.endpoint_url!r}"
                ) from e
        elif self.kind == ResponderKind.NONE and self.endpoint_url is not None:
            raise ValueError("responders of kind 'none' must not have an endpoint_url")
        return self


class ResponderRead(BaseModel):
    """Public view of a responder (no endpoint details)."""

    id: UUID
    name: str
    kind: str

    model_config = {"from_attributes": True}


class ResponderInDB(ResponderRead):
    endpoint_url: Optional[str] = None
    model_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime
