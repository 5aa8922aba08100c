"""Error types raised by the erc20 module types."""

from __future__ import annotations

MODULE_CODESPACE = "erc20"


class ValidationError(ValueError):
    """A stateless validation check failed."""


class InvalidAddressError(ValidationError):
    """An address is malformed."""


class InvalidCoinsError(ValidationError):
    """A coin or amount is not acceptable."""


class Erc20Error(Exception):
    """Base class for the errors registered by the erc20 module."""

    codespace: str = MODULE_CODESPACE
    code: int = 1
    description: str = "internal erc20 module error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = f"{detail}: {self.description}" if detail else self.description
        super().__init__(message)


class InvalidErc20AddressError(Erc20Error):
    code = 2
    description = "invalid erc20 address"


class UnmatchingCosmosDenomError(Erc20Error):
    code = 3
    description = "unmatching cosmos denom"


class NotAllowedBridgeError(Erc20Error):
    code = 4
    description = "not allowed bridge"


class InternalEthMintingError(Erc20Error):
    code = 5
    description = "internal ethereum minting error"


class WritingEthTxPayloadError(Erc20Error):
    code = 6
    description = "writing ethereum tx payload error"


class InternalTokenPairError(Erc20Error):
    code = 7
    description = "internal ethereum token mapping error"


class UndefinedOwnerError(Erc20Error):
    code = 8
    description = "undefined owner of contract pair"