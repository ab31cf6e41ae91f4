"""
Tests for hotel read operations and hotel id coercion.
"""

from types import SimpleNamespace

import pytest

from hotel_api.core.errors import NotFoundError
from hotel_api.repositories import hotel_repository
from hotel_api.services.hotel_service import get_hotel, list_hotels, parse_hotel_id


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1", 1),
        ("42", 42),
        (" 7 ", 7),
        ("0", None),
        ("-3", None),
        ("abc", None),
        ("1.5", None),
        ("", None),
        ("1e3", None),
        ("2147483647", 2147483647),
        ("2147483648", None),
        ("99999999999999999999", None),
        ("١", None),  # Arabic-Indic one
        ("１", None),  # fullwidth one
        ("²", None),  # superscript two
    ],
)
def test_parse_hotel_id(raw, expected):
    assert parse_hotel_id(raw) == expected


@pytest.mark.asyncio
async def test_list_hotels_empty_is_not_found(monkeypatch):
    async def fake_find_all(db):
        return []

    monkeypatch.setattr(hotel_repository, "find_all_hotels", fake_find_all)
    with pytest.raises(NotFoundError):
        await list_hotels(None)


@pytest.mark.asyncio
async def test_list_hotels_returns_all_in_order(monkeypatch):
    hotels = [SimpleNamespace(id=3), SimpleNamespace(id=1)]

    async def fake_find_all(db):
        return hotels

    monkeypatch.setattr(hotel_repository, "find_all_hotels", fake_find_all)
    assert await list_hotels(None) == hotels


@pytest.mark.asyncio
async def test_get_hotel_without_id_skips_lookup(monkeypatch):
    async def fail_lookup(db, hotel_id):
        raise AssertionError("should not query")

    monkeypatch.setattr(hotel_repository, "find_hotel_with_rooms", fail_lookup)
    with pytest.raises(NotFoundError):
        await get_hotel(None, None)


@pytest.mark.asyncio
async def test_get_hotel_missing_is_not_found(monkeypatch):
    async def fake_lookup(db, hotel_id):
        return None

    monkeypatch.setattr(hotel_repository, "find_hotel_with_rooms", fake_lookup)
    with pytest.raises(NotFoundError):
        await get_hotel(None, 99)


@pytest.mark.asyncio
async def test_get_hotel_with_zero_rooms_is_found(monkeypatch):
    hotel = SimpleNamespace(id=5, rooms=[])

    async def fake_lookup(db, hotel_id):
        assert hotel_id == 5
        return hotel

    monkeypatch.setattr(hotel_repository, "find_hotel_with_rooms", fake_lookup)
    assert await get_hotel(None, 5) is hotel
