"""Governance proposals handled by the erc20 module."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import InvalidAddressError, ValidationError
from .keys import MODULE_NAME, ROUTER_KEY
from .utils import Metadata
from .validation import (
    IBC_DENOM_PREFIX,
    hex_to_address,
    validate_address,
    validate_denom,
    validate_ibc_denom,
)

PROPOSAL_TYPE_REGISTER_COIN = "RegisterCoin"
PROPOSAL_TYPE_REGISTER_ERC20 = "RegisterERC20"
PROPOSAL_TYPE_TOGGLE_TOKEN_RELAY = "ToggleTokenRelay"
PROPOSAL_TYPE_UPDATE_TOKEN_PAIR_ERC20 = "UpdateTokenPairERC20"

MAX_TITLE_LENGTH = 140
MAX_DESCRIPTION_LENGTH = 5000

_PROPOSAL_TYPES = frozenset(
    {
        PROPOSAL_TYPE_REGISTER_COIN,
        PROPOSAL_TYPE_REGISTER_ERC20,
        PROPOSAL_TYPE_TOGGLE_TOKEN_RELAY,
        PROPOSAL_TYPE_UPDATE_TOKEN_PAIR_ERC20,
    }
)


def create_denom_description(address: str) -> str:
    return f"Cosmos coin token representation of {address}"


def create_denom(address: str) -> str:
    """Module name plus address, so the denom never starts with a digit."""
    return f"{MODULE_NAME}/{address}"


def validate_abstract(proposal) -> None:
    """Check the title, description, type and route common to all proposals."""
    if not proposal.title.strip():
        raise ValidationError("proposal title cannot be blank")
    if len(proposal.title) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"proposal title is longer than max length of {MAX_TITLE_LENGTH}"
        )
    if not proposal.description.strip():
        raise ValidationError("proposal description cannot be blank")
    if len(proposal.description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"proposal description is longer than max length of {MAX_DESCRIPTION_LENGTH}"
        )
    if proposal.proposal_type() not in _PROPOSAL_TYPES:
        raise ValidationError(f"invalid proposal type: {proposal.proposal_type()}")
    if not proposal.proposal_route().strip():
        raise ValidationError("proposal routing key cannot be empty")


def validate_ibc(metadata: Metadata) -> None:
    """Check the name and symbol of metadata whose base is an 'ibc/' denom."""
    parts = metadata.base.split("/", 1)
    if parts[0] == metadata.base and metadata.base.strip():
        return
    if len(parts) != 2 or parts[0] != IBC_DENOM_PREFIX:
        raise ValidationError(
            f"invalid metadata. {metadata.base} denomination should be prefixed "
            "with the format 'ibc/"
        )
    if "channel-" not in metadata.name:
        raise ValidationError(
            f"invalid metadata (Name) for ibc. {metadata.name} should include channel"
        )
    if not metadata.symbol.startswith("ibc"):
        raise ValidationError(
            f'invalid metadata (Symbol) for ibc. {metadata.symbol} should include "ibc" prefix'
        )


def _wrapped_address(address: str, label: str) -> None:
    try:
        validate_address(address)
    except ValidationError as exc:
        raise InvalidAddressError(f"{label}: {exc}") from exc


@dataclass
class RegisterCoinProposal:
    title: str = ""
    description: str = ""
    metadata: Metadata = field(default_factory=Metadata)

    def proposal_route(self) -> str:
        return ROUTER_KEY

    def proposal_type(self) -> str:
        return PROPOSAL_TYPE_REGISTER_COIN

    def validate_basic(self) -> None:
        self.metadata.validate()
        validate_ibc_denom(self.metadata.base)
        validate_ibc(self.metadata)
        validate_abstract(self)


@dataclass
class RegisterERC20Proposal:
    title: str = ""
    description: str = ""
    erc20_address: str = ""

    def proposal_route(self) -> str:
        return ROUTER_KEY

    def proposal_type(self) -> str:
        return PROPOSAL_TYPE_REGISTER_ERC20

    def validate_basic(self) -> None:
        _wrapped_address(self.erc20_address, "ERC20 address")
        validate_abstract(self)


@dataclass
class ToggleTokenRelayProposal:
    title: str = ""
    description: str = ""
    token: str = ""

    def proposal_route(self) -> str:
        return ROUTER_KEY

    def proposal_type(self) -> str:
        return PROPOSAL_TYPE_TOGGLE_TOKEN_RELAY

    def validate_basic(self) -> None:
        """The token is either a hex address or a valid denomination."""
        try:
            validate_address(self.token)
        except ValidationError:
            validate_denom(self.token)
        validate_abstract(self)


@dataclass
class UpdateTokenPairERC20Proposal:
    title: str = ""
    description: str = ""
    erc20_address: str = ""
    new_erc20_address: str = ""

    def proposal_route(self) -> str:
        return ROUTER_KEY

    def proposal_type(self) -> str:
        return PROPOSAL_TYPE_UPDATE_TOKEN_PAIR_ERC20

    def validate_basic(self) -> None:
        _wrapped_address(self.erc20_address, "ERC20 address")
        _wrapped_address(self.new_erc20_address, "new ERC20 address")
        validate_abstract(self)

    def erc20_contract(self) -> bytes:
        return hex_to_address(self.erc20_address)

    def new_erc20_contract(self) -> bytes:
        return hex_to_address(self.new_erc20_address)