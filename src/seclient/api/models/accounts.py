"""Pydantic models for account responses."""

from pydantic import Field

from seclient.api.models.base import ApiModel
from seclient.api.models.site import Location


class Account(ApiModel):
    """A sub-account visible to the API key."""

    id: int
    name: str
    location: Location | None = None
    company_website: str | None = Field(default=None, alias="companyWebSite")
    contact_person: str | None = None
    email: str | None = None
    phone_number: str | None = None
    fax_number: str | None = None
    notes: str | None = None
    parent_id: int | None = None
    uris: list[str]
