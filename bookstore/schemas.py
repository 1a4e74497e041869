# bookstore/schemas.py
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from .converters import INT64_MAX, INT64_MIN
from .errors import ValidationError


class BookRequest(BaseModel):
    # Отсутствующие поля и null получают нулевые значения, лишние игнорируются
    title: str = ""
    isbn: str = ""
    description: str = ""
    author_id: int = Field(0, ge=INT64_MIN, le=INT64_MAX)
    published_date: str = ""

    class Config:
        strict = True

    @model_validator(mode="before")
    @classmethod
    def null_body_is_empty(cls, data):
        return {} if data is None else data

    @field_validator("title", "isbn", "description", "published_date", mode="before")
    @classmethod
    def null_text_is_empty(cls, value):
        return "" if value is None else value

    @field_validator("author_id", mode="before")
    @classmethod
    def null_id_is_zero(cls, value):
        return 0 if value is None else value

    def validate_fields(self):
        if not self.title:
            raise ValidationError("title is required")
        if not self.isbn:
            raise ValidationError("isbn is required")
        if self.price is not None and self.price < 0:
            raise ValidationError("price must be non-negative")
        if self.author_id == 0:
            raise ValidationError("author_id is required")
        if not self.published_date:
            raise ValidationError("published_date is required")


class CreateBookRequest(BookRequest):
    price: float = 0.0

    @field_validator("price", mode="before")
    @classmethod
    def null_price_is_zero(cls, value):
        return 0.0 if value is None else value


class UpdateBookRequest(BookRequest):
    price: Optional[float] = None


class AuthorResponse(BaseModel):
    id: int
    name: str
    bio: Optional[str] = None

    class Config:
        from_attributes = True


class AuthorStatsResponse(BaseModel):
    author_id: int
    name: str
    book_count: int
    average_price: Optional[Decimal] = None
    first_published: Optional[date] = None
    last_published: Optional[date] = None

    class Config:
        from_attributes = True


class BookResponse(BaseModel):
    id: int
    title: str
    isbn: str
    description: Optional[str] = None
    price: Decimal
    author_id: int
    published_date: date

    class Config:
        from_attributes = True
