import pytest

from prosys7800.cartridge import Cartridge, CartridgeType
from prosys7800.database import GAME_LIST, DatabaseEntry, find_entry, load_into
from prosys7800.memory import Memory


@pytest.fixture
def cartridge():
    cart = Cartridge(Memory())
    cart.type = CartridgeType.NORMAL
    cart.pokey = False
    cart.controller = [0, 0]
    cart.region = 0
    cart.flags = 0
    return cart


def test_every_digest_is_lowercase_hex_md5_and_findable():
    hexdigits = set("0123456789abcdef")
    for entry in GAME_LIST:
        found = find_entry(entry.digest)
        assert found.digest == entry.digest
        assert len(found.digest) == 32
        assert set(found.digest) <= hexdigits


def test_find_known_entry():
    entry = find_entry("877dcc97a775ed55081864b2dbf5f1e2")
    assert entry == DatabaseEntry(
        "877dcc97a775ed55081864b2dbf5f1e2", 2, False, 3, 3, 0, 0, "Alien Brigade"
    )


def test_find_unknown_and_empty():
    assert find_entry("0" * 32) is None
    assert find_entry("") is None


def test_lookup_is_case_sensitive():
    assert find_entry("877DCC97A775ED55081864B2DBF5F1E2") is None


def test_duplicate_digest_returns_first_entry():
    entry = find_entry("1745feadabb24e7cefc375904c73fa4c")
    assert entry.title == "Impossible Mission"
    matches = [e for e in GAME_LIST if e.digest == entry.digest]
    assert len(matches) == 2
    assert matches[0] is entry


def test_load_into_applies_settings(cartridge):
    cartridge.digest = "017066f522908081ec3ee624f5e4a8aa"
    entry = load_into(cartridge, True)
    assert entry.title == "Missing in Action"
    assert cartridge.type == CartridgeType.SUPERCART_LARGE
    assert cartridge.pokey is False
    assert cartridge.controller == [1, 1]
    assert cartridge.region == 0
    assert cartridge.flags == 3


def test_load_into_pokey_and_lightgun(cartridge):
    cartridge.digest = "5469b4de0608f23a5c4f98f331c9e75f"
    load_into(cartridge, True)
    assert cartridge.type == CartridgeType.SUPERCART_ROM
    assert cartridge.pokey is True
    assert cartridge.controller == [2, 2]
    assert cartridge.region == 1


def test_load_into_disabled_changes_nothing(cartridge):
    cartridge.digest = "2251a6a0f3aec84cc0aff66fc9fa91e8"
    assert load_into(cartridge, False) is None
    assert cartridge.type == CartridgeType.NORMAL
    assert cartridge.controller == [0, 0]


def test_load_into_unknown_digest_changes_nothing(cartridge):
    cartridge.digest = "f" * 32
    cartridge.region = 1
    assert load_into(cartridge, True) is None
    assert cartridge.region == 1
    assert cartridge.type == CartridgeType.NORMAL


def test_every_entry_round_trips_through_cartridge(cartridge):
    for entry in GAME_LIST:
        cartridge.digest = entry.digest
        applied = load_into(cartridge, True)
        assert applied is find_entry(entry.digest)
        assert cartridge.type == applied.cartridge_type
        assert cartridge.controller == [applied.controller1, applied.controller2]
        assert cartridge.flags == applied.flags