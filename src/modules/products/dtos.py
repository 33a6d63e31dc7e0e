"""Product request schemas for the Validation Stage.

Framework-agnostic data transfer objects using Pydantic v2.  Each DTO is
the constraint table of one operation: body fields and the ``id`` path
parameter are declared side by side, so a single validation pass reports
every violation of a request.  DTOs are immutable (``frozen=True``).

- ``ProductIdDTO``: get-by-id, toggle and delete (path ``id`` only).
- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for the full update (path ``id`` + body).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic_core import PydanticCustomError

from modules.products.constants import VIOLATION_MESSAGES
from modules.products.models import NAME_MAX_LENGTH

# Upper bound of a BigAutoField primary key.
MAX_PRODUCT_ID = 2**63 - 1


def _check_name_not_blank(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("blank_name", VIOLATION_MESSAGES["name"]["blank_name"])
    return value


class ProductIdDTO(BaseModel):
    """Path parameter of the single-product routes."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0, le=MAX_PRODUCT_ID)


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-blank string of at most 100 characters.
    - ``price`` is numeric and greater than zero.
    - ``availability``, when supplied, is a JSON boolean (defaults to ``True``).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(max_length=NAME_MAX_LENGTH)
    price: float = Field(gt=0, allow_inf_nan=False)
    availability: StrictBool = True

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        return _check_name_not_blank(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for full product updates.

    Every writable field is required: the update overwrites the record.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0, le=MAX_PRODUCT_ID)
    name: str = Field(max_length=NAME_MAX_LENGTH)
    price: float = Field(gt=0, allow_inf_nan=False)
    availability: StrictBool

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        return _check_name_not_blank(v)

    def changes(self) -> dict:
        """Fields written by the update (everything but the key)."""
        return self.model_dump(exclude={"id"})
