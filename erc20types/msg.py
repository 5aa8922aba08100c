"""Messages converting between coins and ERC20 tokens."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from .errors import InvalidAddressError, InvalidCoinsError, ValidationError
from .keys import ROUTER_KEY
from .validation import (
    DEFAULT_BECH32_PREFIX,
    acc_address_from_bech32,
    bech32_encode,
    hex_to_address,
    is_hex_address,
    to_checksum_address,
    validate_erc20_denom,
    validate_ibc_denom,
)

TYPE_MSG_CONVERT_COIN = "convert_coin"
TYPE_MSG_CONVERT_ERC20 = "convert_ERC20"


def _sorted_json(document: dict) -> bytes:
    return json.dumps(document, sort_keys=True, separators=(",", ":")).encode()


@dataclass(frozen=True)
class Coin:
    denom: str = ""
    amount: int = 0

    def to_json(self) -> dict:
        return {"denom": self.denom, "amount": str(self.amount)}


@dataclass
class MsgConvertCoin:
    """Convert a coin into its ERC20 representation."""

    coin: Coin = field(default_factory=Coin)
    receiver: str = ""
    sender: str = ""

    def route(self) -> str:
        return ROUTER_KEY

    def type(self) -> str:
        return TYPE_MSG_CONVERT_COIN

    def validate_basic(self) -> None:
        """Run stateless checks; raise ValidationError on failure."""
        try:
            validate_erc20_denom(self.coin.denom)
        except ValidationError:
            validate_ibc_denom(self.coin.denom)
        if self.coin.amount <= 0:
            raise InvalidCoinsError("cannot mint a non-positive amount")
        try:
            acc_address_from_bech32(self.sender)
        except ValidationError as exc:
            raise InvalidAddressError(f"invalid sender address: {exc}") from exc
        if not is_hex_address(self.receiver):
            raise InvalidAddressError(f"invalid receiver hex address {self.receiver}")

    def get_sign_bytes(self) -> bytes:
        return _sorted_json(
            {"coin": self.coin.to_json(), "receiver": self.receiver, "sender": self.sender}
        )

    def get_signers(self) -> list[bytes]:
        """The sender account; empty when the sender does not decode."""
        try:
            return [acc_address_from_bech32(self.sender)]
        except ValidationError:
            return []


@dataclass
class MsgConvertERC20:
    """Convert ERC20 tokens into their coin representation."""

    contract_address: str = ""
    amount: int = 0
    receiver: str = ""
    sender: str = ""

    def route(self) -> str:
        return ROUTER_KEY

    def type(self) -> str:
        return TYPE_MSG_CONVERT_ERC20

    def validate_basic(self) -> None:
        """Run stateless checks; raise ValidationError on failure."""
        if not is_hex_address(self.contract_address):
            raise InvalidAddressError(
                f"invalid contract hex address '{self.contract_address}'"
            )
        if self.amount <= 0:
            raise InvalidCoinsError("cannot mint a non-positive amount")
        try:
            acc_address_from_bech32(self.receiver)
        except ValidationError as exc:
            raise InvalidAddressError(f"invalid reciver address: {exc}") from exc
        if not is_hex_address(self.sender):
            raise InvalidAddressError(f"invalid sender hex address {self.sender}")

    def get_sign_bytes(self) -> bytes:
        return _sorted_json(
            {
                "contract_address": self.contract_address,
                "amount": str(self.amount),
                "receiver": self.receiver,
                "sender": self.sender,
            }
        )

    def get_signers(self) -> list[bytes]:
        return [hex_to_address(self.sender)]


def new_msg_convert_coin(coin: Coin, receiver: bytes | str, sender: bytes) -> MsgConvertCoin:
    """Build a MsgConvertCoin from raw receiver and sender addresses."""
    return MsgConvertCoin(
        coin=coin,
        receiver=to_checksum_address(receiver),
        sender=bech32_encode(DEFAULT_BECH32_PREFIX, sender) if sender else "",
    )


def new_msg_convert_erc20(
    amount: int,
    receiver: bytes,
    contract: bytes | str,
    sender: bytes | str,
) -> MsgConvertERC20:
    """Build a MsgConvertERC20 from raw addresses."""
    return MsgConvertERC20(
        contract_address=to_checksum_address(contract),
        amount=amount,
        receiver=bech32_encode(DEFAULT_BECH32_PREFIX, receiver) if receiver else "",
        sender=to_checksum_address(sender),
    )