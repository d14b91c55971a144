from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from marketplace.schemas.common import NonEmptyStr, WorkerCategory, blank_to_none


def _dedupe(tags: list[str] | None) -> list[str] | None:
    if tags is None:
        return None
    return list(dict.fromkeys(tags))


class ProviderCreate(BaseModel):
    model_config = {"use_enum_values": True}

    user_id: str | None = None
    company_name: NonEmptyStr
    contact_person: NonEmptyStr
    phone: NonEmptyStr
    email: NonEmptyStr
    address: NonEmptyStr
    specialization: list[WorkerCategory] = Field(min_length=1)
    years_in_business: int = Field(ge=0)
    description: NonEmptyStr

    @field_validator("specialization")
    @classmethod
    def unique_tags(cls, v):
        return _dedupe(v)

    @field_validator("user_id")
    @classmethod
    def strip_user_id(cls, v: str | None) -> str | None:
        return blank_to_none(v)


class ProviderUpdate(BaseModel):
    # id and user_id are deliberately absent; unknown keys are rejected
    model_config = {"use_enum_values": True, "extra": "forbid"}

    company_name: NonEmptyStr | None = None
    contact_person: NonEmptyStr | None = None
    phone: NonEmptyStr | None = None
    email: NonEmptyStr | None = None
    address: NonEmptyStr | None = None
    specialization: Annotated[list[WorkerCategory], Field(min_length=1)] | None = None
    years_in_business: int | None = Field(default=None, ge=0)
    description: NonEmptyStr | None = None

    @field_validator("specialization")
    @classmethod
    def unique_tags(cls, v):
        return _dedupe(v)


class ProviderPublic(BaseModel):
    id: str
    company_name: str
    contact_person: str
    phone: str
    email: str
    years_in_business: int
    specialization: list[str]


class ProviderResponse(BaseModel):
    id: str
    user_id: str
    company_name: str
    contact_person: str
    phone: str
    email: str
    address: str
    specialization: list[str]
    years_in_business: int
    description: str
    created_at: str
