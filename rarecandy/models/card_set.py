from datetime import date, datetime

from rarecandy.models.page import CatalogModel

RELEASE_DATE_FORMAT = "%Y/%m/%d"


class Legalities(CatalogModel):
    """Format legality as reported by the API ("Legal", "Banned", or absent)."""

    unlimited: str | None = None
    standard: str | None = None
    expanded: str | None = None


class SetImages(CatalogModel):
    symbol: str | None = None
    logo: str | None = None


class CardSet(CatalogModel):
    """
    A named release grouping of cards.

    Also used for the ``set`` block embedded in every card. Equality and
    hashing are by id only.

    Attributes:
        id: Set identifier (e.g., "swsh4")
        name: Display name (e.g., "Vivid Voltage")
        series: Series the set belongs to (e.g., "Sword & Shield")
        printed_total: Card count printed on the cards
        total: Card count including secret rares
        ptcgo_code: Online game code (e.g., "VIV")
        release_date: Release date as sent by the API ("YYYY/MM/DD")
    """

    id: str
    name: str | None = None
    series: str | None = None
    printed_total: int | None = None
    total: int | None = None
    legalities: Legalities | None = None
    ptcgo_code: str | None = None
    release_date: str | None = None
    updated_at: str | None = None
    images: SetImages | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardSet):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def released_on(self) -> date | None:
        """Release date parsed from release_date, or None if absent or malformed."""
        if not self.release_date:
            return None
        try:
            return datetime.strptime(self.release_date, RELEASE_DATE_FORMAT).date()
        except ValueError:
            return None
