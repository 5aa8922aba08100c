"""Token pairs mapping an ERC20 contract to a coin denomination."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import IntEnum

from .validation import (
    hex_to_address,
    to_checksum_address,
    validate_address,
    validate_denom,
)


class Owner(IntEnum):
    UNSPECIFIED = 0
    MODULE = 1
    EXTERNAL = 2


@dataclass
class TokenPair:
    erc20_address: str
    denom: str
    enabled: bool = False
    contract_owner: Owner = Owner.UNSPECIFIED

    def get_id(self) -> bytes:
        """SHA-256 of 'address|denom'."""
        return hashlib.sha256(f"{self.erc20_address}|{self.denom}".encode()).digest()

    def erc20_contract(self) -> bytes:
        """The 20-byte ERC20 contract address."""
        return hex_to_address(self.erc20_address)

    def validate(self) -> None:
        validate_denom(self.denom)
        validate_address(self.erc20_address)

    def is_native_coin(self) -> bool:
        return self.contract_owner == Owner.MODULE

    def is_native_erc20(self) -> bool:
        return self.contract_owner == Owner.EXTERNAL


def new_token_pair(
    erc20_address: bytes | str,
    denom: str,
    enabled: bool,
    contract_owner: Owner,
) -> TokenPair:
    """Create an enabled token pair; the enabled argument is not consulted."""
    return TokenPair(
        erc20_address=to_checksum_address(erc20_address),
        denom=denom,
        enabled=True,
        contract_owner=contract_owner,
    )