"""Chain Binding — forwards a test's chain operations to an engine session.

Invariants:
    - Every call is synchronous and carries this chain's session_id
    - Engine payloads are validated into schemas/chain models before returning
    - Malformed engine payloads raise EngineCallError (core/errors.py), never KeyError
    - Every engine call logged at DEBUG with session_id for observability

Design Decisions:
    - Engine injected as an EngineSession Protocol: the binding is testable with a
      fake and never imports a concrete engine (ADR: dependency arrows point inward)
    - mine_empty_block returns the new height only, like the engine itself
"""

import logging
from collections.abc import Iterable

from pydantic import ValidationError

from clarity_testkit.core.engine_protocols import EngineSession
from clarity_testkit.core.errors import EngineCallError, ErrorContext
from clarity_testkit.schemas.chain import Block, ReadOnlyResult
from clarity_testkit.schemas.transaction import Tx

logger = logging.getLogger(__name__)


class Chain:
    """One simulated chain session. Created by services/harness.setup_chain."""

    def __init__(self, session_id: int, engine: EngineSession):
        self.session_id = session_id
        self._engine = engine

    def mine_block(self, transactions: Iterable[Tx]) -> Block:
        """Submit transactions in one block. Receipts follow submission order."""
        payload = [tx.to_engine() for tx in transactions]
        result = self._engine.mine_block(self.session_id, payload)
        try:
            block = Block(height=result["block_height"], receipts=result["receipts"])
        except (KeyError, TypeError, ValidationError) as e:
            raise EngineCallError(
                str(e), "mine_block", ErrorContext(session_id=self.session_id),
            ) from e
        logger.debug(
            f"Mined block with {len(payload)} transaction(s)",
            extra={"session_id": self.session_id, "block_height": block.height},
        )
        return block

    def mine_empty_block(self, count: int) -> int:
        """Advance count empty blocks. Returns the new block height."""
        result = self._engine.mine_empty_blocks(self.session_id, count)
        try:
            height = int(result["block_height"])
        except (KeyError, TypeError, ValueError) as e:
            raise EngineCallError(
                str(e), "mine_empty_blocks", ErrorContext(session_id=self.session_id),
            ) from e
        logger.debug(
            f"Mined {count} empty block(s)",
            extra={"session_id": self.session_id, "block_height": height},
        )
        return height

    def call_read_only_fn(
        self, contract: str, method: str, args: list[str], sender: str,
    ) -> ReadOnlyResult:
        """Evaluate a read-only function. args are notation strings."""
        result = self._engine.call_read_only_fn(
            self.session_id, contract, method, list(args), sender,
        )
        try:
            read_only = ReadOnlyResult.model_validate(result)
        except ValidationError as e:
            raise EngineCallError(
                str(e), "call_read_only_fn", ErrorContext(session_id=self.session_id),
            ) from e
        logger.debug(
            f"Read-only call {contract}.{method}",
            extra={"session_id": self.session_id},
        )
        return read_only

    def get_assets_maps(self) -> dict:
        """Engine-defined balances structure, passed through untouched."""
        return self._engine.get_assets_maps(self.session_id)
