from pydantic import Field

from rarecandy.models.card_set import CardSet, Legalities
from rarecandy.models.page import CatalogModel


class Ability(CatalogModel):
    name: str | None = None
    text: str | None = None
    type: str | None = None


class Attack(CatalogModel):
    """
    An attack printed on a card.

    Attributes:
        name: Attack name (e.g., "Solar Beam")
        cost: Energy types required, one entry per energy
        converted_energy_cost: Total energy count
        damage: Damage as printed, may carry a suffix (e.g., "30+", "20×")
        text: Effect text
    """

    name: str | None = None
    cost: tuple[str, ...] | None = None
    converted_energy_cost: int | None = None
    damage: str | None = None
    text: str | None = None


class Weakness(CatalogModel):
    """Weakness or resistance: an energy type and a modifier such as "×2" or "-30"."""

    type: str | None = None
    value: str | None = None


class Images(CatalogModel):
    small: str | None = None
    large: str | None = None


class TCGPlayerPrices(CatalogModel):
    low: float | None = None
    mid: float | None = None
    high: float | None = None
    market: float | None = None
    direct_low: float | None = None


class TCGPlayer(CatalogModel):
    url: str | None = None
    updated_at: str | None = None
    prices: TCGPlayerPrices | None = None


class CardMarketPrices(CatalogModel):
    average_sell_price: float | None = None
    low_price: float | None = None
    trend_price: float | None = None
    german_pro_low: float | None = None
    suggested_price: float | None = None
    reverse_holo_sell: float | None = None
    reverse_holo_low: float | None = None
    reverse_holo_trend: float | None = None
    low_price_ex_plus: float | None = None
    avg1: float | None = None
    avg7: float | None = None
    avg30: float | None = None
    reverse_holo_avg1: float | None = None
    reverse_holo_avg7: float | None = None
    reverse_holo_avg30: float | None = None


class CardMarket(CatalogModel):
    url: str | None = None
    updated_at: str | None = None
    prices: CardMarketPrices | None = None


class Card(CatalogModel):
    """
    A single card from the catalog.

    Only ``id`` is required; every other field decodes to None when the API
    omits it or sends null. Equality and hashing are by id only, so two
    decodings of the same card compare equal even if prices moved.

    Attributes:
        id: Card identifier (e.g., "xy1-1")
        name: Card name (e.g., "Venusaur-EX")
        supertype: "Pokémon", "Trainer" or "Energy"
        hp: Hit points as a numeric string (e.g., "180")
        types: Energy types of the card (e.g., ["Grass"])
        set_info: The set this card was printed in (wire name "set")
        number: Collector number within the set
        tcgplayer: TCGplayer listing with USD prices
        cardmarket: Cardmarket listing with EUR prices
    """

    id: str
    name: str | None = None
    supertype: str | None = None
    subtypes: tuple[str, ...] | None = None
    hp: str | None = None
    types: tuple[str, ...] | None = None
    evolves_from: str | None = None
    evolves_to: tuple[str, ...] | None = None
    rules: tuple[str, ...] | None = None
    abilities: tuple[Ability, ...] | None = None
    attacks: tuple[Attack, ...] | None = None
    weaknesses: tuple[Weakness, ...] | None = None
    resistances: tuple[Weakness, ...] | None = None
    retreat_cost: tuple[str, ...] | None = None
    converted_retreat_cost: int | None = None
    set_info: CardSet | None = Field(default=None, alias="set")
    number: str | None = None
    artist: str | None = None
    rarity: str | None = None
    flavor_text: str | None = None
    national_pokedex_numbers: tuple[int, ...] | None = None
    legalities: Legalities | None = None
    images: Images | None = None
    tcgplayer: TCGPlayer | None = None
    cardmarket: CardMarket | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def market_price(self) -> float | None:
        """TCGplayer market price in USD, if listed."""
        if self.tcgplayer is None or self.tcgplayer.prices is None:
            return None
        return self.tcgplayer.prices.market
