"""Event Matcher — tests for first-match-wins scanning of event logs.

Tests cover:
    - STX transfer: match in second record, first-match-wins, not-found diagnostics
    - Fungible token transfer/mint/burn with asset identifier suffix matching
    - Non-fungible token transfer/mint/burn matched on the token value
    - Per-record misses never raise (missing group, malformed group, wrong values)
    - Numeric amounts from the engine are coerced to notation text
    - Expectations naming a field the kind never carries are rejected up front
"""

import pytest

from clarity_testkit.core.domain_types import EventKind
from clarity_testkit.core.errors import EventNotFoundError, UnsupportedValueError
from clarity_testkit.core.match_events import (
    EventExpectation,
    match_event,
    find_event,
    expect_stx_transfer_event,
    expect_fungible_token_transfer_event,
    expect_fungible_token_mint_event,
    expect_fungible_token_burn_event,
    expect_non_fungible_token_transfer_event,
    expect_non_fungible_token_mint_event,
    expect_non_fungible_token_burn_event,
)

DEPLOYER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
WALLET_1 = "ST1SJ3DTE5DN7X54YDH5D64R3BCB6A2AG2ZQ8YPD5"
WALLET_2 = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
TOKEN_ASSET = f"{DEPLOYER}.coin::coin"
NFT_ASSET = f"{DEPLOYER}.badge::badge"


def _stx(amount, sender, recipient) -> dict:
    return {
        "type": "stx_transfer_event",
        "stx_transfer_event": {"amount": amount, "sender": sender, "recipient": recipient},
    }


def _ft(kind: str, asset: str = TOKEN_ASSET, **fields) -> dict:
    return {"type": kind, kind: {"asset_identifier": asset, **fields}}


# ─── STX transfer ────────────────────────────────────────────────

def test_stx_transfer_matches_second_record():
    events = [
        _stx("50", DEPLOYER, WALLET_1),
        _stx("100", WALLET_1, WALLET_2),
    ]
    fields = expect_stx_transfer_event(events, 100, WALLET_1, WALLET_2)
    assert fields == {"amount": 100, "sender": WALLET_1, "recipient": WALLET_2}


def test_stx_transfer_first_match_wins():
    events = [
        _ft("ft_mint_event", amount="100", recipient=WALLET_2),
        _stx("100", WALLET_1, WALLET_2),
        _stx("100", WALLET_1, WALLET_2),
    ]
    expectation = EventExpectation(
        EventKind.STX_TRANSFER, amount=100, sender=WALLET_1, recipient=WALLET_2,
    )
    assert not match_event(events[0], expectation).matched
    assert match_event(events[1], expectation).matched
    assert find_event(events, expectation)["amount"] == 100


def test_stx_transfer_not_found_names_criteria():
    events = [_stx("50", DEPLOYER, WALLET_1)]
    with pytest.raises(EventNotFoundError) as exc_info:
        expect_stx_transfer_event(events, 100, WALLET_1, WALLET_2)
    error = exc_info.value
    assert error.code == "EVENT_NOT_FOUND"
    assert error.kind == "STXTransferEvent"
    assert error.expected == {"amount": 100, "sender": WALLET_1, "recipient": WALLET_2}
    assert error.scanned == 1
    assert "amount=100" in str(error)
    assert WALLET_1 in str(error)
    assert error.context.event_kind == "STXTransferEvent"


def test_empty_log_is_not_found():
    with pytest.raises(EventNotFoundError) as exc_info:
        expect_stx_transfer_event([], 1, DEPLOYER, WALLET_1)
    assert exc_info.value.scanned == 0


def test_numeric_amount_is_coerced():
    events = [_stx(100, WALLET_1, WALLET_2)]
    assert expect_stx_transfer_event(events, 100, WALLET_1, WALLET_2)["amount"] == 100


# ─── Per-record misses ───────────────────────────────────────────

def test_missing_field_group_is_a_miss():
    expectation = EventExpectation(EventKind.STX_TRANSFER, amount=1)
    outcome = match_event({"type": "print_event", "print_event": {}}, expectation)
    assert not outcome.matched
    assert "stx_transfer_event" in outcome.reason


def test_malformed_field_group_is_a_miss():
    expectation = EventExpectation(EventKind.STX_TRANSFER, amount=1, sender=DEPLOYER)
    outcome = match_event({"stx_transfer_event": {"amount": "1"}}, expectation)
    assert not outcome.matched
    assert "malformed" in outcome.reason


def test_non_mapping_record_is_a_miss():
    expectation = EventExpectation(EventKind.STX_TRANSFER, amount=1)
    assert not match_event("stx_transfer_event", expectation).matched


def test_malformed_records_are_skipped_during_scan():
    events = [
        None,
        {"stx_transfer_event": "garbage"},
        {"stx_transfer_event": {"amount": "7"}},
        _stx("7", DEPLOYER, WALLET_1),
    ]
    assert expect_stx_transfer_event(events, 7, DEPLOYER, WALLET_1)["sender"] == DEPLOYER


# ─── Fungible tokens ─────────────────────────────────────────────

def test_ft_transfer_matches_asset_suffix():
    events = [
        _ft("ft_transfer_event", asset=f"{DEPLOYER}.other::other",
            amount="10", sender=DEPLOYER, recipient=WALLET_1),
        _ft("ft_transfer_event", amount="10", sender=DEPLOYER, recipient=WALLET_1),
    ]
    fields = expect_fungible_token_transfer_event(events, 10, DEPLOYER, WALLET_1, "::coin")
    assert fields == {
        "amount": 10, "sender": DEPLOYER, "recipient": WALLET_1, "asset_id": TOKEN_ASSET,
    }


def test_ft_transfer_wrong_asset_not_found():
    events = [_ft("ft_transfer_event", amount="10", sender=DEPLOYER, recipient=WALLET_1)]
    with pytest.raises(EventNotFoundError) as exc_info:
        expect_fungible_token_transfer_event(events, 10, DEPLOYER, WALLET_1, "::gold")
    assert exc_info.value.expected["asset_id"] == "::gold"


def test_ft_mint():
    events = [_ft("ft_mint_event", amount="500", recipient=WALLET_2)]
    fields = expect_fungible_token_mint_event(events, 500, WALLET_2, "coin::coin")
    assert fields == {"amount": 500, "recipient": WALLET_2, "asset_id": TOKEN_ASSET}


def test_ft_burn():
    events = [
        _ft("ft_mint_event", amount="5", recipient=WALLET_1),
        _ft("ft_burn_event", amount="5", sender=WALLET_1),
    ]
    fields = expect_fungible_token_burn_event(events, 5, WALLET_1, "::coin")
    assert fields == {"amount": 5, "sender": WALLET_1, "asset_id": TOKEN_ASSET}


def test_ft_burn_wrong_amount_not_found():
    events = [_ft("ft_burn_event", amount="5", sender=WALLET_1)]
    with pytest.raises(EventNotFoundError) as exc_info:
        expect_fungible_token_burn_event(events, 6, WALLET_1, "::coin")
    assert exc_info.value.kind == "FungibleTokenBurnEvent"


# ─── Non-fungible tokens ─────────────────────────────────────────

def test_nft_transfer_matches_token():
    events = [
        _ft("nft_transfer_event", asset=NFT_ASSET, value="u2", sender=DEPLOYER, recipient=WALLET_1),
        _ft("nft_transfer_event", asset=NFT_ASSET, value="u1", sender=DEPLOYER, recipient=WALLET_1),
    ]
    fields = expect_non_fungible_token_transfer_event(events, "u1", DEPLOYER, WALLET_1, "::badge")
    assert fields == {
        "token": "u1", "sender": DEPLOYER, "recipient": WALLET_1, "asset_id": NFT_ASSET,
    }


def test_nft_mint_and_burn():
    events = [
        _ft("nft_mint_event", asset=NFT_ASSET, value="u9", recipient=WALLET_2),
        _ft("nft_burn_event", asset=NFT_ASSET, value="u9", sender=WALLET_2),
    ]
    assert expect_non_fungible_token_mint_event(events, "u9", WALLET_2, "::badge")["token"] == "u9"
    assert expect_non_fungible_token_burn_event(events, "u9", WALLET_2, "::badge")["sender"] == WALLET_2


def test_nft_not_found_names_token():
    with pytest.raises(EventNotFoundError) as exc_info:
        expect_non_fungible_token_mint_event([], "u1", WALLET_1, "::badge")
    assert exc_info.value.kind == "NonFungibleTokenMintEvent"
    assert "token=u1" in str(exc_info.value)


# ─── Expectation shape ───────────────────────────────────────────

def test_asset_id_rejected_for_stx_transfer():
    with pytest.raises(UnsupportedValueError) as exc_info:
        EventExpectation(EventKind.STX_TRANSFER, asset_id="::coin")
    assert exc_info.value.field == "asset_id"
    assert "asset_identifier" in str(exc_info.value)


def test_amount_rejected_for_nft_mint():
    with pytest.raises(UnsupportedValueError) as exc_info:
        EventExpectation(EventKind.NFT_MINT, amount=1)
    assert exc_info.value.field == "amount"


def test_token_rejected_for_fungible_kinds():
    with pytest.raises(UnsupportedValueError):
        EventExpectation(EventKind.FT_BURN, token="u1")


def test_valid_expectation_scans_to_not_found():
    expectation = EventExpectation(EventKind.NFT_MINT, token="u1", asset_id="::badge")
    events = [
        _stx("1", DEPLOYER, WALLET_1),
        _ft("nft_mint_event", asset=NFT_ASSET, value="u2", recipient=WALLET_1),
    ]
    assert not match_event(events[1], expectation).matched
    with pytest.raises(EventNotFoundError):
        find_event(events, expectation)
