"""Address and denomination checks shared by the module types."""

from __future__ import annotations

import re

from Crypto.Hash import keccak

from .errors import InvalidAddressError, ValidationError
from .keys import MODULE_NAME

ADDRESS_LENGTH = 20
IBC_DENOM_PREFIX = "ibc"
DEFAULT_BECH32_PREFIX = "evmos"

_HEX_BODY = re.compile(r"[0-9a-fA-F]*")
_HEX_PAIRS = re.compile(r"(?:[0-9a-fA-F]{2})*")
_DENOM = re.compile(r"[a-zA-Z][a-zA-Z0-9/:._-]{2,127}")
_BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_BECH32_GEN = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


def _strip_0x(text: str) -> str:
    return text[2:] if text[:2] in ("0x", "0X") else text


def is_hex_address(address: str) -> bool:
    """Whether the string is 40 hex digits, optionally prefixed with 0x."""
    body = _strip_0x(address)
    return len(body) == 2 * ADDRESS_LENGTH and _HEX_BODY.fullmatch(body) is not None


def validate_address(address: str) -> None:
    """Raise InvalidAddressError unless the string is an Ethereum hex address."""
    if not is_hex_address(address):
        raise InvalidAddressError(
            f"address '{address}' is not a valid ethereum hex address"
        )


def hex_to_address(address: str) -> bytes:
    """Decode a hex string leniently into a 20-byte address."""
    body = _strip_0x(address)
    if len(body) % 2:
        body = "0" + body
    raw = bytes.fromhex(_HEX_PAIRS.match(body).group(0))
    return raw[-ADDRESS_LENGTH:].rjust(ADDRESS_LENGTH, b"\x00")


def to_checksum_address(address: bytes | str) -> str:
    """Return the EIP-55 mixed-case hex form of an address."""
    raw = hex_to_address(address) if isinstance(address, str) else bytes(address)
    if len(raw) != ADDRESS_LENGTH:
        raise InvalidAddressError(f"address must be {ADDRESS_LENGTH} bytes")
    lower = raw.hex()
    digest = keccak.new(digest_bits=256, data=lower.encode()).hexdigest()
    return "0x" + "".join(
        ch.upper() if ch.isalpha() and int(h, 16) >= 8 else ch
        for ch, h in zip(lower, digest)
    )


def validate_denom(denom: str) -> None:
    """Raise ValidationError unless the denomination is well formed."""
    if _DENOM.fullmatch(denom) is None:
        raise ValidationError(f"invalid denom: {denom}")


def validate_ibc_denom(denom: str) -> None:
    """Accept a plain base denom or an 'ibc/{hash}' denom."""
    parts = denom.split("/", 1)
    bad_format = (
        not denom.strip()
        or (len(parts) == 1 and parts[0] == IBC_DENOM_PREFIX)
        or (len(parts) == 2 and (parts[0] != IBC_DENOM_PREFIX or not parts[1].strip()))
    )
    if bad_format:
        raise ValidationError(
            "denomination should be prefixed with the format "
            f"'ibc/{{hash(trace + \"/\" + {denom})}}'"
        )
    if len(parts) == 1:
        return
    try:
        digest = bytes.fromhex(parts[1])
    except ValueError as exc:
        raise ValidationError(f"invalid denom trace hash {parts[1]}") from exc
    if len(digest) != 32:
        raise ValidationError(f"invalid denom trace hash {parts[1]}")


def validate_erc20_denom(denom: str) -> None:
    """Accept only denominations of the form 'erc20/<hex address>'."""
    parts = denom.split("/", 1)
    if len(parts) != 2 or parts[0] != MODULE_NAME:
        raise ValidationError(
            f"invalid denom. {denom} denomination should be prefixed with the format 'erc20/"
        )
    validate_address(parts[1])


def _polymod(values) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i, gen in enumerate(_BECH32_GEN):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data, from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = bits = 0
    out: list[int] = []
    maxv = (1 << to_bits) - 1
    for value in data:
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or (acc << (to_bits - bits)) & maxv:
        raise ValidationError("invalid padding in bech32 data")
    return out


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode bytes as a bech32 string with the given human-readable part."""
    values = _convert_bits(data, 8, 5, True)
    poly = _polymod(_hrp_expand(hrp) + values + [0] * 6) ^ 1
    checksum = [(poly >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(_BECH32_CHARSET[v] for v in values + checksum)


def bech32_decode(address: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and bytes."""
    if len(address) > 90:
        raise ValidationError("bech32 string too long")
    if address.lower() != address and address.upper() != address:
        raise ValidationError("bech32 string has mixed case")
    address = address.lower()
    pos = address.rfind("1")
    if pos < 1 or pos + 7 > len(address):
        raise ValidationError("invalid bech32 separator position")
    hrp, body = address[:pos], address[pos + 1 :]
    if any(c not in _BECH32_CHARSET for c in body):
        raise ValidationError("invalid character in bech32 data")
    values = [_BECH32_CHARSET.index(c) for c in body]
    if _polymod(_hrp_expand(hrp) + values) != 1:
        raise ValidationError("invalid bech32 checksum")
    return hrp, bytes(_convert_bits(values[:-6], 5, 8, False))


def acc_address_from_bech32(address: str, prefix: str = DEFAULT_BECH32_PREFIX) -> bytes:
    """Decode and check an account address with the expected prefix."""
    if not address.strip():
        raise InvalidAddressError("empty address string is not allowed")
    try:
        hrp, raw = bech32_decode(address)
    except ValidationError as exc:
        raise InvalidAddressError(f"decoding bech32 failed: {exc}") from exc
    if hrp != prefix:
        raise InvalidAddressError(f"invalid Bech32 prefix; expected {prefix}, got {hrp}")
    if not raw:
        raise InvalidAddressError("addresses cannot be empty")
    if len(raw) > 255:
        raise InvalidAddressError("address max length is 255")
    return raw