"""Module name, store keys and key prefixes."""

from __future__ import annotations

import hashlib

MODULE_NAME = "erc20"
STORE_KEY = MODULE_NAME
ROUTER_KEY = MODULE_NAME


def module_address(name: str) -> bytes:
    """Return the 20-byte account address derived from a module name."""
    return hashlib.sha256(name.encode()).digest()[:20]


MODULE_ADDRESS = module_address(MODULE_NAME)

KEY_PREFIX_TOKEN_PAIR = bytes([1])
KEY_PREFIX_TOKEN_PAIR_BY_ERC20 = bytes([2])
KEY_PREFIX_TOKEN_PAIR_BY_DENOM = bytes([3])