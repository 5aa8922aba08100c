import os

import pytest

from erc20types.errors import InvalidAddressError, ValidationError
from erc20types.validation import (
    acc_address_from_bech32,
    bech32_decode,
    bech32_encode,
    hex_to_address,
    is_hex_address,
    to_checksum_address,
    validate_address,
    validate_denom,
    validate_erc20_denom,
    validate_ibc_denom,
)

USDT = "0xdac17f958d2ee523a2206206994597c13d831ec7"


@pytest.mark.parametrize(
    "address,expected",
    [
        (USDT, True),
        ("0xB8c77482e45F1F44dE1745F52C74426C631bDD52", True),
        ("0x5dCA2483280D9727c80b5518faC4556617fb19ZZ", False),
        ("0x5dCA2483280D9727c80b5518faC4556617fb19", False),
        ("0x5dCA2483280D9727c80b5518faC4556617fb194FFF", False),
        ("0x0000", False),
    ],
)
def test_is_hex_address(address, expected):
    assert is_hex_address(address) is expected


def test_validate_address_raises():
    with pytest.raises(InvalidAddressError):
        validate_address("0xinvalidaddress")


def test_checksum_known_example():
    addr = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
    assert to_checksum_address(addr.lower()) == addr


def test_checksum_round_trip():
    raw = os.urandom(20)
    text = to_checksum_address(raw)
    assert hex_to_address(text) == raw
    assert is_hex_address(text)


def test_hex_to_address_pads_short():
    assert hex_to_address("0x1") == bytes(19) + b"\x01"


@pytest.mark.parametrize("denom", ["", "a", "1test", "(test", "^test", "-test", "a" * 129])
def test_validate_denom_rejects(denom):
    with pytest.raises(ValidationError):
        validate_denom(denom)


def test_validate_denom_accepts_erc20_denom():
    assert validate_denom("erc20/" + USDT) is None


@pytest.mark.parametrize(
    "denom",
    ["coin", "ibc/7F1D3FCF4AE79E1554D670D1AD949A9BA4E4A3C76C63093E17E446A46061A7A2"],
)
def test_validate_ibc_denom_accepts(denom):
    assert validate_ibc_denom(denom) is None


@pytest.mark.parametrize("denom", ["", "ibc", "ibc/", "ibc/zz", "ibc/abcd", "erc20/" + USDT])
def test_validate_ibc_denom_rejects(denom):
    with pytest.raises(ValidationError):
        validate_ibc_denom(denom)


def test_validate_erc20_denom():
    assert validate_erc20_denom("erc20/" + USDT) is None
    with pytest.raises(ValidationError):
        validate_erc20_denom("coin")
    with pytest.raises(InvalidAddressError):
        validate_erc20_denom("erc20/0x0000")


def test_bech32_round_trip():
    raw = os.urandom(20)
    encoded = bech32_encode("evmos", raw)
    assert bech32_decode(encoded) == ("evmos", raw)
    assert acc_address_from_bech32(encoded) == raw


def test_bech32_bad_checksum():
    encoded = bech32_encode("evmos", bytes(20))
    broken = encoded[:-1] + ("q" if encoded[-1] != "q" else "p")
    with pytest.raises(ValidationError):
        bech32_decode(broken)


def test_acc_address_errors():
    with pytest.raises(InvalidAddressError):
        acc_address_from_bech32("")
    with pytest.raises(InvalidAddressError):
        acc_address_from_bech32("evmosinvalid")
    with pytest.raises(InvalidAddressError):
        acc_address_from_bech32(bech32_encode("cosmos", bytes(20)))
    with pytest.raises(InvalidAddressError):
        acc_address_from_bech32(bech32_encode("evmos", b""))