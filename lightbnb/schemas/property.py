"""
Pydantic schemas for property requests.
Handles new property listings and the search filters used by the listing query.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from decimal import Decimal


class PropertyCreate(BaseModel):
    """
    Schema for creating a new property.

    Numeric fields accept the strings submitted by HTML forms and are coerced
    to integers. ``cost_per_night`` is stored as given, in cents.
    """

    owner_id: int = Field(..., description="ID of the owning user")
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field("", description="Free-form listing description")
    thumbnail_photo_url: str = Field(..., description="Small listing photo")
    cover_photo_url: str = Field(..., description="Large listing photo")
    cost_per_night: int = Field(..., ge=0, description="Nightly price in cents")
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    @field_validator("title", "city")
    @classmethod
    def validate_not_blank(cls, v):
        """Validate and clean required text."""
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()


class PropertySearchFilters(BaseModel):
    """
    Optional search filters for the property listing.

    Prices are in major currency units (dollars). Keys other than the five
    declared here are ignored, and blank form values count as not supplied.
    Values are not range checked; that belongs to the caller.
    """

    model_config = ConfigDict(extra="ignore")

    city: Optional[str] = Field(None, description="Substring of the city name", examples=["Van"])
    owner_id: Optional[int] = Field(None, description="Only listings owned by this user")
    minimum_price_per_night: Optional[Decimal] = Field(None, examples=[50])
    maximum_price_per_night: Optional[Decimal] = Field(None, examples=[250])
    minimum_rating: Optional[Decimal] = Field(None, examples=[4])

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty form fields as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("city", mode="before")
    @classmethod
    def city_to_str(cls, v):
        """Accept non-string city values such as numbers."""
        if v is None or isinstance(v, str):
            return v
        return str(v) if v else None
