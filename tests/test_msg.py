import hashlib
import json

import pytest

from erc20types.errors import InvalidAddressError, InvalidCoinsError, ValidationError
from erc20types.keys import ROUTER_KEY
from erc20types.msg import (
    TYPE_MSG_CONVERT_COIN,
    TYPE_MSG_CONVERT_ERC20,
    Coin,
    MsgConvertCoin,
    MsgConvertERC20,
    new_msg_convert_coin,
    new_msg_convert_erc20,
)
from erc20types.validation import bech32_encode, to_checksum_address


def _address(seed: str) -> bytes:
    return hashlib.sha256(seed.encode()).digest()[:20]


def _hex(seed: str) -> str:
    return to_checksum_address(_address(seed))


def _bech(seed: str) -> str:
    return bech32_encode("evmos", _address(seed))


def test_msg_convert_coin_getters():
    invalid = MsgConvertCoin()
    sender = _address("sender")
    msg = new_msg_convert_coin(Coin("test", 100), _address("receiver"), sender)
    assert msg.route() == ROUTER_KEY
    assert msg.type() == TYPE_MSG_CONVERT_COIN
    assert json.loads(invalid.get_sign_bytes())["receiver"] == ""
    assert invalid.get_signers() == []
    assert msg.get_signers() == [sender]


def test_msg_convert_coin_new_passes():
    msg = new_msg_convert_coin(Coin("test", 100), _address("a"), _address("b"))
    assert msg.validate_basic() is None
    assert msg.receiver == _hex("a")


@pytest.mark.parametrize(
    "coin, receiver, sender, error",
    [
        (Coin("", 100), "0x0000", _hex("s"), ValidationError),
        (Coin("coin", -100), "0x0000", _hex("s"), InvalidCoinsError),
        (Coin("coin", 100), _hex("r"), "evmosinvalid", InvalidAddressError),
        (Coin("coin", 100), "0x0000", _bech("s"), InvalidAddressError),
    ],
)
def test_msg_convert_coin_invalid(coin, receiver, sender, error):
    with pytest.raises(error):
        MsgConvertCoin(coin, receiver, sender).validate_basic()


@pytest.mark.parametrize(
    "denom",
    [
        "coin",
        "erc20/0xdac17f958d2ee523a2206206994597c13d831ec7",
        "ibc/7F1D3FCF4AE79E1554D670D1AD949A9BA4E4A3C76C63093E17E446A46061A7A2",
    ],
)
def test_msg_convert_coin_passes(denom):
    msg = MsgConvertCoin(Coin(denom, 100), _hex("r"), _bech("s"))
    assert msg.validate_basic() is None
    assert msg.get_signers() == [_address("s")]


def test_msg_convert_coin_sign_bytes_sorted():
    msg = MsgConvertCoin(Coin("coin", 100), _hex("r"), _bech("s"))
    raw = msg.get_sign_bytes()
    assert raw.startswith(b'{"coin":{"amount":"100","denom":"coin"}')
    assert json.loads(raw)["sender"] == _bech("s")


def test_msg_convert_erc20_getters():
    invalid = MsgConvertERC20()
    sender = _address("sender")
    msg = new_msg_convert_erc20(100, _address("receiver"), _address("contract"), sender)
    assert msg.route() == ROUTER_KEY
    assert msg.type() == TYPE_MSG_CONVERT_ERC20
    assert json.loads(invalid.get_sign_bytes())["amount"] == "0"
    assert msg.get_signers() == [sender]


def test_msg_convert_erc20_new_passes():
    msg = new_msg_convert_erc20(100, _address("r"), _address("c"), _address("s"))
    assert msg.validate_basic() is None
    assert msg.contract_address == _hex("c")
    assert msg.receiver == _bech("r")


@pytest.mark.parametrize(
    "amount, receiver, contract, sender, error",
    [
        (100, _bech("r"), "", _hex("s"), InvalidAddressError),
        (-100, _bech("r"), _hex("c"), _hex("s"), InvalidCoinsError),
        (100, "", _hex("c"), _hex("s"), InvalidAddressError),
        (100, _bech("r"), _hex("c"), "", InvalidAddressError),
    ],
)
def test_msg_convert_erc20_invalid(amount, receiver, contract, sender, error):
    with pytest.raises(error):
        MsgConvertERC20(contract, amount, receiver, sender).validate_basic()


def test_msg_convert_erc20_passes():
    msg = MsgConvertERC20(_hex("c"), 100, _bech("r"), _hex("s"))
    assert msg.validate_basic() is None
    assert msg.get_signers() == [_address("s")]