from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


class ProductCreate(BaseModel):
    # JSON numbers are accepted for text columns, the database stores them as text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    # name/price NOT NULL is left to the database
    name: str | None = None
    price: Decimal | None = None
    description: str | None = None
    release_date: date | None = None
    image_url: str | None = None

    @field_validator("price", "release_date", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        # HTML forms post empty strings for untouched inputs
        if isinstance(value, str) and not value.strip():
            return None
        return value
