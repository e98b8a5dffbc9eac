"""
Base models shared by all Renderbase resources.
"""

from __future__ import annotations

import math
from typing import Any, Generic, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from renderbase.exceptions import RequestValidationError

T = TypeVar("T")


class ApiModel(BaseModel):
    """
    Base for API payloads.

    Wire names are camelCase, attributes are snake_case. Both are accepted
    on input; unknown fields from newer API versions are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @classmethod
    def build(cls, **fields: Any):
        """
        Construct from caller arguments.

        Raises:
            RequestValidationError: If the arguments do not fit the model
        """
        try:
            return cls(**fields)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or cls.__name__}: {err['msg']}"
                for err in e.errors()
            )
            raise RequestValidationError(
                f"Invalid {cls.__name__}: {problems}", cause=e
            ) from e

    def to_api(self) -> dict[str, Any]:
        """Serialize with wire names, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ListResponse(ApiModel, Generic[T]):
    """
    One page of a paginated listing.

    page/limit are whatever the server applied, which may differ from the
    values that were requested.
    """

    data: list[T] = Field(default_factory=list)
    page: int = 1
    limit: int = 0
    total: int = 0

    @model_validator(mode="before")
    @classmethod
    def _flatten_pagination(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        meta = values.get("pagination") or values.get("meta")
        if isinstance(meta, dict):
            values = {**values}
            for key in ("page", "limit", "total"):
                if key not in values and key in meta:
                    values[key] = meta[key]
        return values

    @property
    def total_pages(self) -> int:
        """Number of pages given total and limit."""
        if self.limit <= 0:
            return 1 if self.total else 0
        return math.ceil(self.total / self.limit)

    @property
    def has_more(self) -> bool:
        """Whether pages exist after this one."""
        return self.page < self.total_pages

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)


__all__ = ["ApiModel", "ListResponse"]
