"""
Display projection of a card.

Flattens the nested card record into the fields a card screen shows and
derives the formatted strings. The projection is lossy: legalities, retreat
cost, abilities and the rest of the wire record are dropped, so
``CardView.from_card(card).to_card()`` only preserves the flattened fields.
"""

from dataclasses import dataclass

from rarecandy.models.card import Attack, Card, Images, TCGPlayer, TCGPlayerPrices
from rarecandy.models.card_set import CardSet
from rarecandy.models.energy import RGB, color_for_type, icon_for_type

SHARE_URL_BASE = "https://pokemontcg.io/card"


@dataclass(frozen=True, slots=True)
class CardView:
    """
    A card flattened for display.

    Attributes:
        id: Card identifier
        name: Card name, empty when the API sent none
        types: Energy types, empty when absent
        attacks: Attacks, empty when absent
        set_name: Name of the set, None when the card has no set block
        set_total: Total cards in the set
        market_price: TCGplayer market price in USD
    """

    id: str
    name: str = ""
    hp: str | None = None
    number: str | None = None
    rarity: str | None = None
    artist: str | None = None
    supertype: str | None = None
    types: tuple[str, ...] = ()
    attacks: tuple[Attack, ...] = ()
    small_image_url: str | None = None
    large_image_url: str | None = None
    set_name: str | None = None
    set_series: str | None = None
    set_total: int | None = None
    set_release_date: str | None = None
    market_price: float | None = None

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        set_info = card.set_info
        images = card.images
        return cls(
            id=card.id,
            name=card.name or "",
            hp=card.hp,
            number=card.number,
            rarity=card.rarity,
            artist=card.artist,
            supertype=card.supertype,
            types=card.types or (),
            attacks=card.attacks or (),
            small_image_url=images.small if images else None,
            large_image_url=images.large if images else None,
            set_name=set_info.name if set_info else None,
            set_series=set_info.series if set_info else None,
            set_total=set_info.total if set_info else None,
            set_release_date=set_info.release_date if set_info else None,
            market_price=card.market_price,
        )

    def to_card(self) -> Card:
        """
        Rebuild a card record from the flattened fields.

        Empty types and attacks become None. The set block is rebuilt only
        when a set name is known (with an empty id) and the TCGplayer block
        only when a market price is known.
        """
        set_info = None
        if self.has_set_info:
            set_info = CardSet(
                id="",
                name=self.set_name,
                series=self.set_series,
                total=self.set_total,
                release_date=self.set_release_date,
            )

        tcgplayer = None
        if self.has_market_price:
            tcgplayer = TCGPlayer(prices=TCGPlayerPrices(market=self.market_price))

        return Card(
            id=self.id,
            name=self.name,
            supertype=self.supertype,
            hp=self.hp,
            types=self.types or None,
            attacks=self.attacks or None,
            set_info=set_info,
            number=self.number,
            artist=self.artist,
            rarity=self.rarity,
            images=Images(small=self.small_image_url, large=self.large_image_url),
            tcgplayer=tcgplayer,
        )

    @property
    def share_url(self) -> str:
        return f"{SHARE_URL_BASE}/{self.id}"

    @property
    def card_number(self) -> str | None:
        """Collector number with a leading "#", e.g. "#1"."""
        if self.number is None:
            return None
        return f"#{self.number}"

    @property
    def display_set_name(self) -> str | None:
        if self.set_name is None:
            return None
        return self.set_name.upper()

    @property
    def card_identifier(self) -> str:
        """Short label such as "#1 • XY", falling back to whichever part is known."""
        card_number = self.card_number
        if card_number is not None and self.set_name is not None:
            return f"{card_number} • {self.set_name}"
        if card_number is not None:
            return card_number
        if self.set_name is not None:
            return self.set_name
        return self.name

    @property
    def formatted_market_price(self) -> str | None:
        """Market price truncated to whole dollars, e.g. 12.5 -> "$12"."""
        if self.market_price is None:
            return None
        return f"${int(self.market_price)}"

    @property
    def types_text(self) -> str:
        return ", ".join(self.types)

    @property
    def has_types(self) -> bool:
        return bool(self.types)

    @property
    def has_attacks(self) -> bool:
        return bool(self.attacks)

    @property
    def has_set_info(self) -> bool:
        return self.set_name is not None

    @property
    def has_market_price(self) -> bool:
        return self.market_price is not None

    @property
    def primary_type(self) -> str | None:
        return self.types[0] if self.types else None

    @property
    def attack_count(self) -> int:
        return len(self.attacks)

    @property
    def primary_color(self) -> RGB:
        """Colour of the primary type, grey when the card has no type."""
        return color_for_type(self.primary_type or "")

    @property
    def primary_icon(self) -> str:
        return icon_for_type(self.primary_type or "")
