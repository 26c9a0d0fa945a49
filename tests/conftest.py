from typing import Any

import pytest


@pytest.fixture
def venusaur_payload() -> dict[str, Any]:
    """Full card payload for Venusaur-EX (xy1-1)."""
    return {
        "id": "xy1-1",
        "name": "Venusaur-EX",
        "supertype": "Pokémon",
        "subtypes": ["Basic", "EX"],
        "hp": "180",
        "types": ["Grass"],
        "evolvesFrom": None,
        "rules": ["Pokémon-EX rule: When a Pokémon-EX has been Knocked Out, ..."],
        "attacks": [
            {
                "name": "Poison Powder",
                "cost": ["Grass", "Grass", "Colorless"],
                "convertedEnergyCost": 3,
                "damage": "60",
                "text": "Your opponent's Active Pokémon is now Poisoned.",
            },
            {
                "name": "Jungle Hammer",
                "cost": ["Grass", "Grass", "Grass", "Colorless"],
                "convertedEnergyCost": 4,
                "damage": "90",
                "text": "Heal 30 damage from this Pokémon.",
            },
        ],
        "weaknesses": [{"type": "Fire", "value": "×2"}],
        "retreatCost": ["Colorless", "Colorless", "Colorless", "Colorless"],
        "convertedRetreatCost": 4,
        "set": {
            "id": "xy1",
            "name": "XY",
            "series": "XY",
            "printedTotal": 146,
            "total": 146,
            "legalities": {"unlimited": "Legal", "expanded": "Legal"},
            "ptcgoCode": "XY",
            "releaseDate": "2014/02/05",
            "updatedAt": "2020/08/14 09:35:00",
            "images": {
                "symbol": "https://images.pokemontcg.io/xy1/symbol.png",
                "logo": "https://images.pokemontcg.io/xy1/logo.png",
            },
        },
        "number": "1",
        "artist": "Eske Yoshinob",
        "rarity": "Rare Holo EX",
        "nationalPokedexNumbers": [3],
        "legalities": {"unlimited": "Legal", "expanded": "Legal"},
        "images": {
            "small": "https://images.pokemontcg.io/xy1/1.png",
            "large": "https://images.pokemontcg.io/xy1/1_hires.png",
        },
        "tcgplayer": {
            "url": "https://prices.pokemontcg.io/tcgplayer/xy1-1",
            "updatedAt": "2024/01/01",
            "prices": {"low": 3.0, "mid": 9.0, "market": 12.5},
        },
        "cardmarket": {
            "url": "https://prices.pokemontcg.io/cardmarket/xy1-1",
            "updatedAt": "2024/01/01",
            "prices": {"averageSellPrice": 3.2, "trendPrice": 3.5, "avg30": 3.1},
        },
    }


@pytest.fixture
def vivid_voltage_payload() -> dict[str, Any]:
    """Set payload for Vivid Voltage (swsh4)."""
    return {
        "id": "swsh4",
        "name": "Vivid Voltage",
        "series": "Sword & Shield",
        "printedTotal": 185,
        "total": 203,
        "legalities": {"unlimited": "Legal", "standard": "Legal", "expanded": "Legal"},
        "ptcgoCode": "VIV",
        "releaseDate": "2020/11/13",
        "updatedAt": "2020/11/13 16:20:00",
        "images": {
            "symbol": "https://images.pokemontcg.io/swsh4/symbol.png",
            "logo": "https://images.pokemontcg.io/swsh4/logo.png",
        },
    }
