"""Event Records — pydantic shapes for the field group of each event-log record kind.

Invariants:
    - One model per EventKind; the model's fields are exactly the group the engine emits
    - amount/value are kept as notation text (numbers coerced to str) for the Scoped Decoder
    - Unknown extra fields are ignored: engines may add fields without breaking matching

Design Decisions:
    - Pydantic over manual dict probing: a missing or mistyped field is one
      ValidationError, which the matcher turns into a per-record miss
"""

from pydantic import BaseModel, ConfigDict

from clarity_testkit.core.domain_types import EventKind


class _EventFields(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore", frozen=True)


class StxTransferFields(_EventFields):
    amount: str
    sender: str
    recipient: str


class FtTransferFields(_EventFields):
    amount: str
    sender: str
    recipient: str
    asset_identifier: str


class FtMintFields(_EventFields):
    amount: str
    recipient: str
    asset_identifier: str


class FtBurnFields(_EventFields):
    amount: str
    sender: str
    asset_identifier: str


class NftTransferFields(_EventFields):
    value: str
    sender: str
    recipient: str
    asset_identifier: str


class NftMintFields(_EventFields):
    value: str
    recipient: str
    asset_identifier: str


class NftBurnFields(_EventFields):
    value: str
    sender: str
    asset_identifier: str


# ADR: every kind mapped explicitly — adding a kind requires editing this dict
EVENT_FIELD_MODELS: dict[EventKind, type[_EventFields]] = {
    EventKind.STX_TRANSFER: StxTransferFields,
    EventKind.FT_TRANSFER: FtTransferFields,
    EventKind.FT_MINT: FtMintFields,
    EventKind.FT_BURN: FtBurnFields,
    EventKind.NFT_TRANSFER: NftTransferFields,
    EventKind.NFT_MINT: NftMintFields,
    EventKind.NFT_BURN: NftBurnFields,
}
