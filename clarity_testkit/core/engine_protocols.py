"""Boundary Protocols — contracts between the codec core and the simulation engine.

Invariants:
    - Core NEVER imports an engine implementation — dependency arrows point inward only
    - Every engine call is synchronous and returns a JSON-like dict
    - Notation arguments cross the boundary already rendered (encode_values)

Design Decisions:
    - Protocol over ABC: structural subtyping, any engine binding with these methods
      plugs in (an in-process REPL, a subprocess bridge, a test fake)
    - Transactions passed as plain dicts (Tx.to_engine()): the engine never sees pydantic
"""

from typing import Protocol


class EngineSession(Protocol):
    """Contract for a ledger-simulation engine — implemented outside this package."""

    def setup_chain(self, transactions: list[dict]) -> dict:
        """Returns {"session_id": int, "accounts": [account dicts]}."""
        ...

    def mine_block(self, session_id: int, transactions: list[dict]) -> dict:
        """Returns {"block_height": int, "receipts": [{"result": str, "events": [...]}]}."""
        ...

    def mine_empty_blocks(self, session_id: int, count: int) -> dict:
        """Returns {"block_height": int}."""
        ...

    def call_read_only_fn(
        self, session_id: int, contract: str, method: str,
        args: list[str], sender: str,
    ) -> dict:
        """Returns {"result": str, "events": [...]}."""
        ...

    def get_assets_maps(self, session_id: int) -> dict: ...
