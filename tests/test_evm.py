import pytest

from erc20types.evm import (
    ERC20BoolResponse,
    ERC20Data,
    ERC20StringResponse,
    ERC20Uint8Response,
)


def test_new_erc20_data():
    data = ERC20Data("test", "ERC20", 18)
    assert data == ERC20Data(name="test", symbol="ERC20", decimals=0x12)


def test_decimals_out_of_range():
    with pytest.raises(ValueError):
        ERC20Data("test", "ERC20", 256)


def test_responses_hold_values():
    assert ERC20StringResponse("x").value == "x"
    assert ERC20Uint8Response(6).value == 6
    assert ERC20BoolResponse(True).value is True