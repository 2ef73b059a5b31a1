import pytest


_ADDRESS_1 = "0xd9FF26d1b97d3f2e942D026645332336cBb27bda"
_KEY_1 = "ffe362b740d2c187894fcfb1bbe684b1c1ee4caee6b3478f2e69d78d02f22b34"
_ADDRESS_2 = "0xcE9a2A71dC12F79DF3B30EA1e6355C576E4f632f"
_KEY_2 = "59ce4a71b0785c64992b7317da7185ae32be960c7af0f988ca8b39026779fd85"
_BALANCE = "100000000000000000000"


@pytest.fixture
def test_source() -> dict[str, str | None]:
    """Two prefixes, an unset account under each and unrelated variables."""
    return {
        "ACCOUNT_GROUP1_USER1": f"{_ADDRESS_1}:{_KEY_1}:{_BALANCE}",
        "ACCOUNT_GROUP1_USER2": f"{_ADDRESS_2}:{_KEY_2}",
        "ACCOUNT_GROUP1_USER3": None,
        "ACCOUNT_GROUP2_USER1": f"{_ADDRESS_1}:{_KEY_1}:{_BALANCE}",
        "ACCOUNT_GROUP2_USER2": (
            "0xcE9a2A71dC12F79DF3B30EA1e6355C576E4f2232:"
            "59ce4a71b0785c64992b7317da7185ae32be960c7af0f988aa8b39026779fd85:"
            f"{_BALANCE}"
        ),
        "ACCOUNT_GROUP2_USER3": (
            "0xcE9a2A71dC12F23DF3B30EA1e6355C576E4f2232:"
            "59ce4a71b0785c62392b7317da7185ae32be960c7af0f988aa8b39026779fd85"
        ),
        "ACC_GROUP1_USER1": f"{_ADDRESS_1}:{_KEY_1}:{_BALANCE}",
        "ACC_GROUP1_USER2": f"{_ADDRESS_2}:{_KEY_2}",
        "ACC_GROUP1_USER3": None,
        "OTHER_1": "1",
        "OTHER_2": "2",
        "OTHER_3": "3",
    }


@pytest.fixture
def scenario_source() -> dict[str, str | None]:
    return {
        "ACC_G1_U1": "0xA:0xP:100",
        "ACC_G1_U2": "0xB:0xQ",
        "ACC_G2_U1": "0xC:0xR",
    }
