"""Module parameters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable

from .errors import ValidationError

PARAM_STORE_KEY_ENABLE_ERC20 = b"EnableErc20"
PARAM_STORE_KEY_TOKEN_PAIR_VOTING_PERIOD = b"TokenPairVotingPeriod"
PARAM_STORE_KEY_ENABLE_EVM_HOOK = b"EnableEVMHook"

DEFAULT_VOTING_PERIOD = timedelta(days=2)


def validate_bool(value: Any) -> None:
    if not isinstance(value, bool):
        raise TypeError(f"invalid parameter type: {type(value).__name__}")


def validate_period(value: Any) -> None:
    if not isinstance(value, timedelta):
        raise TypeError(f"invalid parameter type: {type(value).__name__}")
    if value <= timedelta(0):
        raise ValidationError(f"voting period must be positive: {value}")


@dataclass
class Params:
    enable_erc20: bool = False
    token_pair_voting_period: timedelta = timedelta(0)
    enable_evm_hook: bool = False

    def param_set_pairs(self) -> list[tuple[bytes, Any, Callable[[Any], None]]]:
        """Return (store key, value, validator) for each parameter."""
        return [
            (PARAM_STORE_KEY_ENABLE_ERC20, self.enable_erc20, validate_bool),
            (PARAM_STORE_KEY_TOKEN_PAIR_VOTING_PERIOD, self.token_pair_voting_period, validate_period),
            (PARAM_STORE_KEY_ENABLE_EVM_HOOK, self.enable_evm_hook, validate_bool),
        ]

    def validate(self) -> None:
        if self.token_pair_voting_period <= timedelta(0):
            raise ValidationError(
                f"voting period must be positive: {self.token_pair_voting_period}"
            )


def default_params() -> Params:
    return Params(
        enable_erc20=True,
        token_pair_voting_period=DEFAULT_VOTING_PERIOD,
        enable_evm_hook=True,
    )