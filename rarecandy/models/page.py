"""
Response envelopes for the Pokémon TCG API.

List endpoints answer with ``{data, page, pageSize, count, totalCount}``;
single-item endpoints answer with ``{data}``.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """
    Base for all decoded API records.

    Wire names are camelCase, attributes are snake_case. Unknown fields are
    ignored and records are immutable once decoded.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


T = TypeVar("T")


class Page(CatalogModel, Generic[T]):
    """One page of a list endpoint, in server order."""

    data: tuple[T, ...]
    page: int
    page_size: int
    count: int
    total_count: int

    @property
    def has_more(self) -> bool:
        """True if pages beyond this one hold more results."""
        return self.page * self.page_size < self.total_count


class Single(CatalogModel, Generic[T]):
    """Envelope of a single-item endpoint."""

    data: T
