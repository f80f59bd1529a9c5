"""
Input validation schemas using Pydantic for the admin menu endpoints.

Request bodies are camelCase JSON; `to_row` dumps them with the snake_case
column names of the database.
"""
from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from feast.utilities.constants import (
    EVENT_STATUSES,
    EVENT_TYPES,
    ITEM_TYPES,
    MENU_ITEM_CATEGORIES,
    PROTEIN_CATEGORIES,
)


def _one_of(values) -> str:
    return '^(' + '|'.join(values) + ')$'


EVENT_TYPE_PATTERN = _one_of(EVENT_TYPES)
EVENT_STATUS_PATTERN = _one_of(EVENT_STATUSES)
ITEM_TYPE_PATTERN = _one_of(ITEM_TYPES)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def to_row(model: BaseModel, partial: bool = False) -> Dict[str, Any]:
    """Dump a validated model as a database row; partial keeps only the fields sent."""
    return model.model_dump(mode="json", exclude_unset=partial)


def _required_name(v):
    if v is None or not v.strip():
        raise ValueError('Name is required')
    return v.strip()


def check_menu_item_rules(item_type: str, category: Optional[str],
                          distribution_percentage: Optional[float],
                          grams_per_person: Optional[float]) -> Optional[str]:
    """Return the violated rule for a menu item's type-specific fields, or None."""
    if category is not None and category not in MENU_ITEM_CATEGORIES:
        return f'Invalid category: {category}'
    if item_type == 'protein':
        if category not in PROTEIN_CATEGORIES:
            return 'Category is required for protein items'
        if distribution_percentage is None:
            return 'Distribution percentage is required for protein items'
    if item_type == 'fixed' and not grams_per_person:
        return 'Grams per person is required for fixed items'
    return None


class EventInput(CamelModel):
    """Schema for creating an event."""
    name: str = Field(..., min_length=1, max_length=200)
    event_type: str = Field(..., pattern=EVENT_TYPE_PATTERN)
    event_date: Optional[date] = None
    total_persons: Optional[int] = Field(None, gt=0, le=100000)
    status: str = Field('draft', pattern=EVENT_STATUS_PATTERN)
    notes: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _required_name(v)


class EventUpdateInput(CamelModel):
    """Schema for updating an event; only the fields sent are changed."""
    name: Optional[str] = Field(None, max_length=200)
    event_type: Optional[str] = Field(None, pattern=EVENT_TYPE_PATTERN)
    event_date: Optional[date] = None
    total_persons: Optional[int] = Field(None, gt=0, le=100000)
    status: Optional[str] = Field(None, pattern=EVENT_STATUS_PATTERN)
    notes: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _required_name(v)


class CourseInput(CamelModel):
    """Schema for creating a course."""
    name: str = Field(..., min_length=1, max_length=200)
    sort_order: int = Field(0, ge=0)
    grams_per_person: float = Field(..., gt=0, le=10000)
    notes: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _required_name(v)


class CourseUpdateInput(CamelModel):
    name: Optional[str] = Field(None, max_length=200)
    sort_order: Optional[int] = Field(None, ge=0)
    grams_per_person: Optional[float] = Field(None, gt=0, le=10000)
    notes: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _required_name(v)

    @field_validator('sort_order', 'grams_per_person')
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError('Value cannot be empty')
        return v


class MenuItemInput(CamelModel):
    """Schema for creating a menu item."""
    name: str = Field(..., min_length=1, max_length=200)
    item_type: str = Field(..., pattern=ITEM_TYPE_PATTERN)
    category: Optional[str] = None
    yield_percentage: float = Field(100, gt=0, le=100)
    waste_description: Optional[str] = None
    unit_weight_grams: Optional[float] = Field(None, gt=0)
    unit_label: Optional[str] = Field(None, max_length=50)
    rounding_grams: Optional[float] = Field(100, gt=0)
    distribution_percentage: Optional[float] = Field(None, ge=0, le=100)
    grams_per_person: Optional[float] = Field(None, gt=0)
    purchased_quantity: Optional[float] = Field(None, ge=0)
    sort_order: int = Field(0, ge=0)
    is_active: bool = True

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _required_name(v)

    @model_validator(mode='after')
    def validate_type_fields(self):
        problem = check_menu_item_rules(self.item_type, self.category,
                                        self.distribution_percentage, self.grams_per_person)
        if problem:
            raise ValueError(problem)
        return self


class MenuItemUpdateInput(CamelModel):
    """Schema for updating a menu item; type rules are checked against the stored item."""
    name: Optional[str] = Field(None, max_length=200)
    category: Optional[str] = None
    yield_percentage: Optional[float] = Field(None, gt=0, le=100)
    waste_description: Optional[str] = None
    unit_weight_grams: Optional[float] = Field(None, gt=0)
    unit_label: Optional[str] = Field(None, max_length=50)
    rounding_grams: Optional[float] = Field(None, gt=0)
    distribution_percentage: Optional[float] = Field(None, ge=0, le=100)
    grams_per_person: Optional[float] = Field(None, gt=0)
    purchased_quantity: Optional[float] = Field(None, ge=0)
    sort_order: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _required_name(v)

    @field_validator('yield_percentage', 'sort_order', 'is_active')
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError('Value cannot be empty')
        return v
