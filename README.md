# erc20types

This package provides data types and stateless validation for a module that
bridges ERC20 tokens and native coins. It covers token pairs, module
parameters, genesis state, conversion messages and governance proposals.
It also includes helpers for hex addresses, EIP-55 checksums, bech32 account
addresses and coin denominations.

## Installation

```
pip install erc20types
```

To run the tests, install the `test` extra first:

```
pip install "erc20types[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `erc20types.errors` | Exception classes. `ValidationError` is a `ValueError`. `InvalidAddressError` and `InvalidCoinsError` derive from `ValidationError`. `Erc20Error` is a separate base class. Its subclasses (`InvalidErc20AddressError`, `UnmatchingCosmosDenomError`, `NotAllowedBridgeError`, `InternalEthMintingError`, `WritingEthTxPayloadError`, `InternalTokenPairError`, `UndefinedOwnerError`) each carry a `codespace`, a numeric `code` and a `description`. |
| `erc20types.keys` | `MODULE_NAME`, `STORE_KEY` and `ROUTER_KEY` (all `"erc20"`), plus the three store key prefixes. `module_address(name)` returns the first 20 bytes of SHA-256 of the name. `MODULE_ADDRESS` is that value for `"erc20"`. |
| `erc20types.validation` | `is_hex_address`, `validate_address`, `hex_to_address`, `to_checksum_address` (EIP-55, using Keccak-256). Denom checks: `validate_denom`, `validate_ibc_denom`, `validate_erc20_denom`. Bech32 helpers: `bech32_encode`, `bech32_decode`, `acc_address_from_bech32`, whose default prefix is `"evmos"`. |
| `erc20types.evm` | `ERC20Data` (name, symbol, decimals in 0–255), `ERC20StringResponse`, `ERC20Uint8Response`, `ERC20BoolResponse`. |
| `erc20types.utils` | `DenomUnit`, `Metadata` (with `validate()`), `sanitize_erc20_name`, `equal_metadata`. |
| `erc20types.params` | `Params` (with `validate()` and `param_set_pairs()`), `default_params()`, `validate_bool`, `validate_period`. |
| `erc20types.token_pair` | `Owner` (`UNSPECIFIED`, `MODULE`, `EXTERNAL`), `TokenPair`, `new_token_pair`. |
| `erc20types.genesis` | `GenesisState` (with `validate()`), `default_genesis_state()`. |
| `erc20types.msg` | `Coin`, `MsgConvertCoin`, `MsgConvertERC20`, `new_msg_convert_coin`, `new_msg_convert_erc20`. |
| `erc20types.proposal` | `RegisterCoinProposal`, `RegisterERC20Proposal`, `ToggleTokenRelayProposal`, `UpdateTokenPairERC20Proposal`. Also `validate_abstract`, `validate_ibc`, `create_denom` and `create_denom_description`. |

Each `validate()` and `validate_basic()` returns `None` on success. On failure
it raises `ValidationError` or one of its subclasses. The parameter
validators `validate_bool` and `validate_period` raise `TypeError` when the
value has the wrong type.

## Examples

Create and check a token pair:

```python
from erc20types.token_pair import Owner, new_token_pair

pair = new_token_pair(
    "0xdac17f958d2ee523a2206206994597c13d831ec7", "usdt", True, Owner.MODULE
)
pair.validate()
print(pair.erc20_address)      # EIP-55 checksummed form
print(pair.is_native_coin())   # True
print(pair.get_id().hex())     # SHA-256 of "<address>|<denom>"
```

`new_token_pair` always creates an enabled pair, whatever value is passed for
`enabled`.

Validate a genesis state:

```python
from erc20types.errors import ValidationError
from erc20types.genesis import GenesisState, default_genesis_state
from erc20types.params import default_params
from erc20types.token_pair import TokenPair

default_genesis_state().validate()

state = GenesisState(
    params=default_params(),
    token_pairs=[
        TokenPair("0xdac17f958d2ee523a2206206994597c13d831ec7", "usdt", True),
        TokenPair("0xdac17f958d2ee523a2206206994597c13d831ec7", "usdt2", True),
    ],
)
try:
    state.validate()
except ValidationError as exc:
    print(exc)  # token ERC20 contract duplicated on genesis '0xdac1...'
```

An empty `GenesisState()` fails validation. Its parameters have a zero voting
period, and the period must be positive. The default period is two days.

Build a conversion message:

```python
from erc20types.msg import new_msg_convert_erc20

msg = new_msg_convert_erc20(
    100,
    bytes(range(1, 21)),                               # receiver account bytes
    "0xdac17f958d2ee523a2206206994597c13d831ec7",      # contract
    "0x5dca2483280d9727c80b5518fac4556617fb194f",      # sender
)
msg.validate_basic()
print(msg.route(), msg.type())   # erc20 convert_ERC20
print(msg.get_sign_bytes())      # compact JSON with sorted keys
```

Normalise an ERC20 token name into a denom-friendly form:

```python
from erc20types.utils import sanitize_erc20_name

sanitize_erc20_name("Lucky Token")                 # "lucky"
sanitize_erc20_name("Hextris Early Access Demo")   # "hextris_early_access_demo"
```

Build a proposal and check it:

```python
from erc20types.proposal import RegisterERC20Proposal

proposal = RegisterERC20Proposal(
    title="Register USDT",
    description="Bridge the USDT contract",
    erc20_address="0xdac17f958d2ee523a2206206994597c13d831ec7",
)
proposal.validate_basic()
print(proposal.proposal_type())  # "RegisterERC20"
```

## What this package does not do

The package holds types and stateless checks only. The following are not
included:

- a store, keeper or state machine that registers token pairs or carries out conversions
- a network node, RPC or gRPC service
- protobuf or amino encoding
- compiled ERC20 contracts or EVM execution

Sign bytes are plain sorted JSON produced by this package.