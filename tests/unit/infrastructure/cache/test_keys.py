"""Tests for cache-key derivation."""

from datetime import datetime, timezone
from uuid import UUID

from repocache.domain.models import Criteria, CursorRequest, PagingInfo, SortSpec
from repocache.infrastructure.cache.keys import (
    all_key,
    entity_key,
    operation_key,
    serialize_arguments,
    stable_hash,
)

_ID = UUID("6f1c2a4e-8d2b-4c1e-9a57-0d4b1f3e2c10")


def test_entity_key_is_prefix_and_id():
    assert entity_key("assets", _ID) == f"assets:{_ID}"


def test_all_key_is_fixed():
    assert all_key("assets") == "assets:all"


def test_operation_key_layout():
    key = operation_key("assets", "get", (Criteria.of(ticker="SPY"),))
    prefix, tag, digest = key.split(":")
    assert (prefix, tag) == ("assets", "get")
    assert len(digest) == 32


def test_equal_arguments_hash_identically():
    first = (PagingInfo(page=2, page_size=10), Criteria.of(ticker="SPY", currency="USD"))
    second = (PagingInfo(page=2, page_size=10), Criteria.of(ticker="SPY", currency="USD"))
    assert stable_hash(first) == stable_hash(second)


def test_hash_is_stable_across_calls_for_rich_values():
    args = (
        _ID,
        datetime(2026, 1, 2, tzinfo=timezone.utc),
        CursorRequest(sort=SortSpec(field="ticker")),
    )
    assert stable_hash(args) == stable_hash(args)


def test_reordered_positional_arguments_hash_differently():
    assert stable_hash((1, 2)) != stable_hash((2, 1))


def test_reordered_criteria_hash_differently():
    first = Criteria.of(ticker="SPY", currency="USD")
    second = Criteria.of(currency="USD", ticker="SPY")
    assert stable_hash((first,)) != stable_hash((second,))


def test_different_values_hash_differently():
    assert stable_hash((Criteria.of(ticker="SPY"),)) != stable_hash((Criteria.of(ticker="QQQ"),))


def test_keyword_arguments_are_serialized_by_name():
    assert serialize_arguments((), {"b": 2, "a": 1}) == serialize_arguments((), {"a": 1, "b": 2})


def test_keyword_and_positional_arguments_do_not_collide():
    assert stable_hash((1,)) != stable_hash((), {"x": 1})
