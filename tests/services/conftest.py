"""Service test fixtures — in-memory fake of the simulation engine.

Invariants:
    - FakeEngine satisfies core/engine_protocols.EngineSession structurally
    - Every call is recorded in FakeEngine.calls for assertions
    - Canned responses are queued per method; defaults mimic a healthy engine

Design Decisions:
    - Flat fake class (no inheritance, no mock library): simple, explicit, easy to debug
"""

import pytest

DEPLOYER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
WALLET_1 = "ST1SJ3DTE5DN7X54YDH5D64R3BCB6A2AG2ZQ8YPD5"


class FakeEngine:
    """Records calls and replays queued responses."""

    def __init__(self, session_id: int = 1):
        self.session_id = session_id
        self.height = 1
        self.calls: list[tuple] = []
        self.responses: dict[str, list[dict]] = {}

    def queue(self, method: str, response: dict) -> None:
        self.responses.setdefault(method, []).append(response)

    def _next(self, method: str, default: dict) -> dict:
        queued = self.responses.get(method)
        return queued.pop(0) if queued else default

    def setup_chain(self, transactions):
        self.calls.append(("setup_chain", transactions))
        return self._next("setup_chain", {
            "session_id": self.session_id,
            "accounts": [
                {"address": DEPLOYER, "balance": 1_000_000, "name": "deployer"},
                {"address": WALLET_1, "balance": 1_000_000, "name": "wallet_1"},
            ],
        })

    def mine_block(self, session_id, transactions):
        self.calls.append(("mine_block", session_id, transactions))
        self.height += 1
        return self._next("mine_block", {
            "block_height": self.height,
            "receipts": [{"result": "(ok true)", "events": []} for _ in transactions],
        })

    def mine_empty_blocks(self, session_id, count):
        self.calls.append(("mine_empty_blocks", session_id, count))
        self.height += count
        return self._next("mine_empty_blocks", {"block_height": self.height})

    def call_read_only_fn(self, session_id, contract, method, args, sender):
        self.calls.append(("call_read_only_fn", session_id, contract, method, args, sender))
        return self._next("call_read_only_fn", {"result": "(ok u0)", "events": []})

    def get_assets_maps(self, session_id):
        self.calls.append(("get_assets_maps", session_id))
        return self._next("get_assets_maps", {"assets": {"STX": {DEPLOYER: 1_000_000}}})


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def engine_class() -> type[FakeEngine]:
    return FakeEngine
