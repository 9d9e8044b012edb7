"""Test Harness — registers chain-backed test functions for pytest.

Invariants:
    - Each decorated test gets a fresh engine session (engine_factory called per run)
    - pre_setup transactions are applied by setup_chain before the test body runs
    - Accounts are keyed by name ("deployer", "wallet_1", ...) in engine order
    - The wrapped test takes no arguments, so pytest collects it as a plain test

Design Decisions:
    - Decorator over a registry: pytest already owns discovery and lifecycle
    - engine_factory instead of an engine instance: sessions never leak between tests
"""

import functools
import logging
from collections.abc import Callable, Iterable

from pydantic import ValidationError

from clarity_testkit.core.engine_protocols import EngineSession
from clarity_testkit.core.errors import EngineCallError
from clarity_testkit.schemas.chain import Account
from clarity_testkit.schemas.transaction import Tx
from clarity_testkit.services.chain import Chain

logger = logging.getLogger(__name__)

TestFunction = Callable[[Chain, dict[str, Account]], None]
PreSetupFunction = Callable[[], Iterable[Tx]]


def setup_chain(
    engine: EngineSession, transactions: Iterable[Tx] = (),
) -> tuple[Chain, dict[str, Account]]:
    """Open an engine session, apply setup transactions, return chain + accounts."""
    result = engine.setup_chain([tx.to_engine() for tx in transactions])
    try:
        session_id = int(result["session_id"])
        accounts = [Account.model_validate(a) for a in result["accounts"]]
    except (KeyError, TypeError, ValueError, ValidationError) as e:
        raise EngineCallError(str(e), "setup_chain") from e

    logger.debug(
        f"Chain session opened with {len(accounts)} account(s)",
        extra={"session_id": session_id},
    )
    return Chain(session_id, engine), {a.name: a for a in accounts}


def clarity_test(
    engine_factory: Callable[[], EngineSession],
    *,
    pre_setup: PreSetupFunction | None = None,
) -> Callable[[TestFunction], Callable[[], None]]:
    """Decorate fn(chain, accounts) into a zero-argument test."""

    def decorator(fn: TestFunction) -> Callable[[], None]:
        @functools.wraps(fn)
        def run() -> None:
            transactions = list(pre_setup()) if pre_setup else []
            chain, accounts = setup_chain(engine_factory(), transactions)
            fn(chain, accounts)

        # pytest would otherwise read fn's (chain, accounts) parameters as fixtures
        del run.__wrapped__
        return run

    return decorator
