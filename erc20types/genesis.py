"""Genesis state of the erc20 module."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ValidationError
from .params import Params, default_params
from .token_pair import TokenPair


@dataclass
class GenesisState:
    """Module parameters and registered token pairs at genesis."""

    params: Params = field(default_factory=Params)
    token_pairs: list[TokenPair] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ValidationError on duplicated or malformed pairs or bad params."""
        seen_erc20: set[str] = set()
        seen_denom: set[str] = set()
        for pair in self.token_pairs:
            if pair.erc20_address in seen_erc20:
                raise ValidationError(
                    f"token ERC20 contract duplicated on genesis '{pair.erc20_address}'"
                )
            if pair.denom in seen_denom:
                raise ValidationError(
                    f"coin denomination duplicated on genesis: '{pair.denom}'"
                )
            pair.validate()
            seen_erc20.add(pair.erc20_address)
            seen_denom.add(pair.denom)
        self.params.validate()


def default_genesis_state() -> GenesisState:
    """Genesis state with default parameters and no token pairs."""
    return GenesisState(params=default_params())