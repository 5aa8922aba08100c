from erc20types import keys


def test_module_address_length_and_determinism():
    addr = keys.module_address("erc20")
    assert len(addr) == 20
    assert addr == keys.module_address("erc20")


def test_module_address_differs_by_name():
    assert keys.module_address("erc20") != keys.module_address("bank")


def test_module_address_constant():
    assert keys.MODULE_ADDRESS == keys.module_address(keys.MODULE_NAME)


def test_names_and_prefixes():
    assert keys.STORE_KEY == "erc20"
    assert keys.ROUTER_KEY == keys.MODULE_NAME
    assert keys.module_address(keys.STORE_KEY) == keys.MODULE_ADDRESS
    assert keys.module_address(keys.ROUTER_KEY) == keys.MODULE_ADDRESS
    assert [
        keys.KEY_PREFIX_TOKEN_PAIR,
        keys.KEY_PREFIX_TOKEN_PAIR_BY_ERC20,
        keys.KEY_PREFIX_TOKEN_PAIR_BY_DENOM,
    ] == [b"\x01", b"\x02", b"\x03"]