"""Event Matcher — first-match-wins search of an ordered event log.

Invariants:
    - Records are scanned in log order; the FIRST record passing every check wins,
      even when a later record would also match
    - A record is checked in order: field group present and well-formed, amount
      (or NFT token), principals, then asset identifier suffix
    - match_event never raises for a non-matching record: it returns an EventMatch miss
    - EventExpectation only accepts fields the kind's records carry (UnsupportedValueError)
    - Only the aggregate outcome is raised: EventNotFoundError after the whole log
      is exhausted, carrying kind, expected values and the number of records scanned

Design Decisions:
    - Explicit success-or-miss value per record instead of exceptions as control
      flow: the scan loop reads as a plain search (ADR: no swallowed exceptions)
    - Amount compared with expect_int, not expect_uint: engine event fields carry
      bare digits ("100"), not "u100"
    - asset_id matches by suffix so callers can pass "::token-name" without the
      deploying principal
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from pydantic import ValidationError

from clarity_testkit.core.domain_types import EventKind
from clarity_testkit.core.errors import (
    EventNotFoundError, TokenMismatchError, UnsupportedValueError,
)
from clarity_testkit.core.event_records import EVENT_FIELD_MODELS
from clarity_testkit.core.expect_values import consume, expect_int, expect_principal

logger = logging.getLogger(__name__)

_KIND_LABELS = {
    EventKind.STX_TRANSFER: "STXTransferEvent",
    EventKind.FT_TRANSFER: "FungibleTokenTransferEvent",
    EventKind.FT_MINT: "FungibleTokenMintEvent",
    EventKind.FT_BURN: "FungibleTokenBurnEvent",
    EventKind.NFT_TRANSFER: "NonFungibleTokenTransferEvent",
    EventKind.NFT_MINT: "NonFungibleTokenMintEvent",
    EventKind.NFT_BURN: "NonFungibleTokenBurnEvent",
}

# Expectation attribute -> record field it is checked against
_EXPECTATION_FIELDS = {
    "amount": "amount",
    "token": "value",
    "sender": "sender",
    "recipient": "recipient",
    "asset_id": "asset_identifier",
}


@dataclass(frozen=True)
class EventExpectation:
    """Expected field values for one match call. Unset fields are not checked."""
    kind: EventKind
    amount: int | None = None
    token: str | None = None
    sender: str | None = None
    recipient: str | None = None
    asset_id: str | None = None

    def __post_init__(self):
        """Reject expectations the kind's records can never carry."""
        record_fields = EVENT_FIELD_MODELS[self.kind].model_fields
        for attr, record_field in _EXPECTATION_FIELDS.items():
            if getattr(self, attr) is not None and record_field not in record_fields:
                raise UnsupportedValueError(
                    f"{self.kind.value} records have no {record_field} field",
                    field=attr,
                )

    def criteria(self) -> dict[str, object]:
        """Set expectations only, in check order. Used in not-found diagnostics."""
        candidates = {
            "amount": self.amount,
            "token": self.token,
            "sender": self.sender,
            "recipient": self.recipient,
            "asset_id": self.asset_id,
        }
        return {k: v for k, v in candidates.items() if v is not None}


@dataclass(frozen=True)
class EventMatch:
    """Outcome of checking one record: decoded fields on success, a reason on miss."""
    fields: dict[str, object] | None = None
    reason: str | None = None

    @property
    def matched(self) -> bool:
        return self.fields is not None

    @classmethod
    def miss(cls, reason: str) -> "EventMatch":
        return cls(fields=None, reason=reason)


def match_event(record: object, expectation: EventExpectation) -> EventMatch:
    """Check a single event-log record against an expectation. Never raises on mismatch."""
    kind = expectation.kind
    group = record.get(kind.value) if isinstance(record, Mapping) else None
    if not isinstance(group, Mapping):
        return EventMatch.miss(f"record has no {kind.value} field group")

    try:
        parsed = EVENT_FIELD_MODELS[kind].model_validate(group)
    except ValidationError as e:
        return EventMatch.miss(f"malformed {kind.value}: {e.error_count()} invalid field(s)")

    fields: dict[str, object] = {}
    try:
        if expectation.amount is not None:
            fields["amount"] = expect_int(parsed.amount, expectation.amount)
        if expectation.token is not None:
            consume(parsed.value, expectation.token, False)
            fields["token"] = expectation.token
        if expectation.sender is not None:
            fields["sender"] = expect_principal(parsed.sender, expectation.sender)
        if expectation.recipient is not None:
            fields["recipient"] = expect_principal(parsed.recipient, expectation.recipient)
    except TokenMismatchError as e:
        return EventMatch.miss(e.message)

    if expectation.asset_id is not None:
        if not parsed.asset_identifier.endswith(expectation.asset_id):
            return EventMatch.miss(
                f"asset {parsed.asset_identifier} does not end with {expectation.asset_id}"
            )
        fields["asset_id"] = parsed.asset_identifier

    return EventMatch(fields=fields)


def find_event(events: Sequence, expectation: EventExpectation) -> dict[str, object]:
    """Return the decoded fields of the first matching record, or raise EventNotFoundError."""
    for index, record in enumerate(events):
        outcome = match_event(record, expectation)
        if outcome.matched:
            return outcome.fields
        logger.debug(
            f"Event #{index} skipped: {outcome.reason}",
            extra={"event_kind": expectation.kind.value},
        )

    logger.info(
        f"No {expectation.kind.value} matched in {len(events)} event(s)",
        extra={"event_kind": expectation.kind.value, "error_code": "EVENT_NOT_FOUND"},
    )
    raise EventNotFoundError(_KIND_LABELS[expectation.kind], expectation.criteria(), len(events))


# ─── Per-kind entry points ───────────────────────────────────────

def expect_stx_transfer_event(
    events: Sequence, amount: int, sender: str, recipient: str,
) -> dict[str, object]:
    return find_event(events, EventExpectation(
        EventKind.STX_TRANSFER, amount=amount, sender=sender, recipient=recipient,
    ))


def expect_fungible_token_transfer_event(
    events: Sequence, amount: int, sender: str, recipient: str, asset_id: str,
) -> dict[str, object]:
    return find_event(events, EventExpectation(
        EventKind.FT_TRANSFER, amount=amount, sender=sender,
        recipient=recipient, asset_id=asset_id,
    ))


def expect_fungible_token_mint_event(
    events: Sequence, amount: int, recipient: str, asset_id: str,
) -> dict[str, object]:
    return find_event(events, EventExpectation(
        EventKind.FT_MINT, amount=amount, recipient=recipient, asset_id=asset_id,
    ))


def expect_fungible_token_burn_event(
    events: Sequence, amount: int, sender: str, asset_id: str,
) -> dict[str, object]:
    return find_event(events, EventExpectation(
        EventKind.FT_BURN, amount=amount, sender=sender, asset_id=asset_id,
    ))


def expect_non_fungible_token_transfer_event(
    events: Sequence, token: str, sender: str, recipient: str, asset_id: str,
) -> dict[str, object]:
    """token is the NFT identifier in notation, e.g. uint(1) -> "u1"."""
    return find_event(events, EventExpectation(
        EventKind.NFT_TRANSFER, token=token, sender=sender,
        recipient=recipient, asset_id=asset_id,
    ))


def expect_non_fungible_token_mint_event(
    events: Sequence, token: str, recipient: str, asset_id: str,
) -> dict[str, object]:
    return find_event(events, EventExpectation(
        EventKind.NFT_MINT, token=token, recipient=recipient, asset_id=asset_id,
    ))


def expect_non_fungible_token_burn_event(
    events: Sequence, token: str, sender: str, asset_id: str,
) -> dict[str, object]:
    return find_event(events, EventExpectation(
        EventKind.NFT_BURN, token=token, sender=sender, asset_id=asset_id,
    ))
