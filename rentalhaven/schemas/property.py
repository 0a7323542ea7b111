"""Property Pydantic schemas for request/response validation."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rentalhaven.models.enums import PropertyType
from rentalhaven.schemas.user import UserResponse


class PropertyBase(BaseModel):
    """Base property schema. JSON keys are camelCase."""

    title: str
    description: str
    price_per_night: float = Field(gt=0)
    city: str
    state: str
    # Open set; PropertyType lists the common values
    type: str = Field(examples=[t.value for t in PropertyType])
    images: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PropertyCreate(PropertyBase):
    """Schema for creating a listing. Derived fields are computed server-side."""

    pass


class PropertyResponse(PropertyBase):
    """Schema for property response."""

    id: int
    price: float
    rating: float
    review_count: int
    owner: UserResponse

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
