"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - NotationString marks text that is already rendered notation (never a Python value)
    - EventKind values are the exact keys the engine uses in event-log records
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: event kinds compare equal to the engine's raw keys
"""

from enum import Enum, IntEnum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

NotationString = NewType("NotationString", str)   # e.g. "(ok u1)", "{ a: u1 }"
Principal = NewType("Principal", str)             # bare, no leading quote
AssetIdentifier = NewType("AssetIdentifier", str) # "<contract>::<asset-name>"


# ─── Enums ───────────────────────────────────────────────────────

class EventKind(str, Enum):
    """Event-log record kinds — each names the record's field group key."""
    STX_TRANSFER = "stx_transfer_event"
    FT_TRANSFER = "ft_transfer_event"
    FT_MINT = "ft_mint_event"
    FT_BURN = "ft_burn_event"
    NFT_TRANSFER = "nft_transfer_event"
    NFT_MINT = "nft_mint_event"
    NFT_BURN = "nft_burn_event"


class TxType(IntEnum):
    """Transaction payload tags understood by the simulation engine."""
    TRANSFER_STX = 1
    CONTRACT_CALL = 2
    DEPLOY_CONTRACT = 3
