"""Coin metadata and name helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ValidationError
from .validation import validate_denom


@dataclass(frozen=True)
class DenomUnit:
    denom: str
    exponent: int = 0
    aliases: tuple[str, ...] = ()

    def validate(self) -> None:
        validate_denom(self.denom)
        seen: set[str] = set()
        for alias in self.aliases:
            if alias in seen:
                raise ValidationError(f"duplicated denomination unit alias {alias}")
            if not alias.strip():
                raise ValidationError(f"alias for denom unit {self.denom} cannot be blank")
            seen.add(alias)


@dataclass
class Metadata:
    description: str = ""
    denom_units: list[DenomUnit] = field(default_factory=list)
    base: str = ""
    display: str = ""
    name: str = ""
    symbol: str = ""

    def validate(self) -> None:
        """Raise ValidationError unless the metadata is consistent."""
        if not self.name.strip():
            raise ValidationError("name field cannot be blank")
        if not self.symbol.strip():
            raise ValidationError("symbol field cannot be blank")
        try:
            validate_denom(self.base)
        except ValidationError as exc:
            raise ValidationError(f"invalid metadata base denom: {exc}") from exc
        try:
            validate_denom(self.display)
        except ValidationError as exc:
            raise ValidationError(f"invalid metadata display denom: {exc}") from exc

        has_display = False
        current = 0
        seen: set[str] = set()
        for position, unit in enumerate(self.denom_units):
            if position == 0:
                if unit.denom != self.base:
                    raise ValidationError(
                        "metadata's first denomination unit must be the one with "
                        f"base denom '{self.base}'"
                    )
                if unit.exponent != 0:
                    raise ValidationError(
                        f"the exponent for base denomination unit {unit.denom} must be 0"
                    )
            elif current >= unit.exponent:
                raise ValidationError("the denomination units must be sorted in ascending order")
            current = unit.exponent
            if unit.denom in seen:
                raise ValidationError(f"duplicate denomination unit {unit.denom}")
            if unit.denom == self.display:
                has_display = True
            unit.validate()
            seen.add(unit.denom)

        if not has_display:
            raise ValidationError(
                f"metadata must contain a denomination unit with display denom '{self.display}'"
            )


def sanitize_erc20_name(name: str) -> str:
    """Lower-case, drop ' token'/' coin' and join words with underscores."""
    name = name.lower().replace(" token", "").replace(" coin", "").strip()
    return name.replace(" ", "_")


def equal_metadata(a: Metadata, b: Metadata) -> None:
    """Raise ValidationError unless both metadata records match field by field."""
    same = (a.base, a.description, a.display, a.name, a.symbol) == (
        b.base,
        b.description,
        b.display,
        b.name,
        b.symbol,
    )
    if not same:
        raise ValidationError("metadata provided is different from stored")
    if len(a.denom_units) != len(b.denom_units):
        raise ValidationError(
            "metadata provided has different denom units from stored, "
            f"{len(a.denom_units)} ≠ {len(b.denom_units)}"
        )
    for left, right in zip(a.denom_units, b.denom_units):
        if left != right:
            raise ValidationError(
                f"metadata provided has different denom unit from stored, {left} ≠ {right}"
            )