"""ERC20 token details and contract call responses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ERC20Data:
    """ERC20 token details used to map the token to a coin."""

    name: str
    symbol: str
    decimals: int

    def __post_init__(self) -> None:
        if not 0 <= self.decimals <= 255:
            raise ValueError(f"decimals out of range: {self.decimals}")


@dataclass(frozen=True)
class ERC20StringResponse:
    value: str


@dataclass(frozen=True)
class ERC20Uint8Response:
    value: int


@dataclass(frozen=True)
class ERC20BoolResponse:
    value: bool