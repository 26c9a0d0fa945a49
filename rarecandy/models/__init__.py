from rarecandy.models.card import (
    Ability,
    Attack,
    Card,
    CardMarket,
    CardMarketPrices,
    Images,
    TCGPlayer,
    TCGPlayerPrices,
    Weakness,
)
from rarecandy.models.card_set import CardSet, Legalities, SetImages
from rarecandy.models.card_view import CardView
from rarecandy.models.energy import color_for_type, icon_for_type
from rarecandy.models.failure import (
    ApiError,
    CatalogError,
    DecodingError,
    FailureKind,
    InvalidRequestError,
    TransportError,
)
from rarecandy.models.page import CatalogModel, Page, Single

__all__ = [
    "Ability",
    "ApiError",
    "Attack",
    "Card",
    "CardMarket",
    "CardMarketPrices",
    "CardSet",
    "CardView",
    "CatalogError",
    "CatalogModel",
    "DecodingError",
    "FailureKind",
    "Images",
    "InvalidRequestError",
    "Legalities",
    "Page",
    "SetImages",
    "Single",
    "TCGPlayer",
    "TCGPlayerPrices",
    "TransportError",
    "Weakness",
    "color_for_type",
    "icon_for_type",
]
