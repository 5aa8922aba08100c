"""Types and stateless validation for an ERC20 to native coin bridge module."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "keys",
    "validation",
    "evm",
    "utils",
    "params",
    "token_pair",
    "genesis",
    "msg",
    "proposal",
]