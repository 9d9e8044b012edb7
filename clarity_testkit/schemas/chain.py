"""Chain Schemas — shapes of what the simulation engine hands back to a test.

Invariants:
    - TxReceipt.result is a notation string, decoded on demand with core/expect_values
    - TxReceipt.events keeps engine order; the Event Matcher relies on it
    - Block.receipts order matches the submitted transaction order

Design Decisions:
    - events kept as raw dicts: each kind's field group is validated lazily by
      core/event_records at match time, so unknown kinds never fail a block
"""

from pydantic import BaseModel, Field


class TxReceipt(BaseModel):
    """Per-transaction outcome."""
    result: str
    events: list[dict] = Field(default_factory=list)


class Block(BaseModel):
    """Result of mining one block."""
    height: int = Field(ge=0)
    receipts: list[TxReceipt] = Field(default_factory=list)


class ReadOnlyResult(BaseModel):
    """Result of a read-only function call."""
    result: str
    events: list[dict] = Field(default_factory=list)


class Account(BaseModel):
    """Pre-funded test account provisioned by setup_chain."""
    address: str
    balance: int = 0
    name: str
    mnemonic: str = ""
    derivation: str = ""
