"""
Client-side models for documents read from the ``books`` collection.

The database enforces no schema, so every field is optional and accepts
whatever type the stored document carries: projected documents (e.g.
``{title, author, price}``) still validate, a numeric ``title`` is shown as
is, and unknown fields such as ``_id`` are ignored. BSON ``Decimal128``
values are converted to ``decimal.Decimal`` so they format like numbers.
"""

from typing import Annotated, Any, Optional, Union

from bson.decimal128 import Decimal128
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def plain_value(value: Any) -> Any:
    """Unwrap BSON-specific scalars into their Python equivalents."""
    if isinstance(value, Decimal128):
        return value.to_decimal()
    return value


Loose = Annotated[Optional[Any], BeforeValidator(plain_value)]


class Book(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Loose = None
    author: Loose = None
    genre: Loose = None
    published_year: Loose = None
    price: Loose = None
    in_stock: Loose = None


NOT_AVAILABLE = "N/A"

StatValue = Union[int, str]


class ExplainSummary(BaseModel):
    """Execution statistics pulled out of an ``explain("executionStats")`` result."""

    nReturned: StatValue = Field(default=NOT_AVAILABLE)
    executionTimeMillis: StatValue = Field(default=NOT_AVAILABLE)
    totalDocsExamined: StatValue = Field(default=NOT_AVAILABLE)
    totalKeysExamined: StatValue = Field(default=NOT_AVAILABLE)
