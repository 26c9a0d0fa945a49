"""
RareCandy services.

API access and list-screen orchestration.
"""

from rarecandy.services.card_list import (
    CardListController,
    CardListState,
    CardSource,
    Operation,
    apply_failure,
    apply_page,
    begin_fetch,
)
from rarecandy.services.tcg_client import TCGClient, build_name_query, build_page_params

__all__ = [
    "CardListController",
    "CardListState",
    "CardSource",
    "Operation",
    "TCGClient",
    "apply_failure",
    "apply_page",
    "begin_fetch",
    "build_name_query",
    "build_page_params",
]
