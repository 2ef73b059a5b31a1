from collections.abc import Callable
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from env_accounts.errors import DuplicateKeyError, NotParsedError, SourceInvalidError
from env_accounts.key_mapping import AccountProps
from env_accounts.parser import EnvParser


_NAME_PART = st.text(alphabet="abcdefghij", min_size=1, max_size=4)


def test_get_source_returns_source_unaltered() -> None:
    source = {"test1": "1", "test2": "2"}
    assert EnvParser(source).get_source() is source


@pytest.mark.parametrize("source", [[], None, "ACC_G_U=a:b", 42, ("ACC_G_U", "a:b")])
def test_non_mapping_source_is_rejected(source: Any) -> None:
    with pytest.raises(SourceInvalidError, match="source shall be a key-value mapping"):
        _ = EnvParser(source)


def test_empty_separator_and_divider_are_rejected() -> None:
    with pytest.raises(ValueError, match="separator must not be empty"):
        _ = EnvParser({}, separator="")
    with pytest.raises(ValueError, match="divider must not be empty"):
        _ = EnvParser({}, divider="")


def test_is_parsed_flips_after_parse(test_source: dict[str, str | None]) -> None:
    parser = EnvParser(test_source)
    assert not parser.is_parsed()
    assert parser.parse("ACCOUNT_") is parser
    assert parser.is_parsed()


def test_raw_is_empty_before_parse(test_source: dict[str, str | None]) -> None:
    assert dict(EnvParser(test_source).get_raw()) == {}


@pytest.mark.parametrize(
    ("prefix", "expected_keys"),
    [
        ("ACCOUNT_", ["GROUP1_USER1", "GROUP1_USER2", "GROUP2_USER1", "GROUP2_USER2", "GROUP2_USER3"]),
        ("ACC_", ["GROUP1_USER1", "GROUP1_USER2"]),
    ],
)
def test_raw_keeps_prefixed_non_empty_entries_in_source_order(
    test_source: dict[str, str | None], prefix: str, expected_keys: list[str]
) -> None:
    parser = EnvParser(test_source).parse(prefix)
    assert parser.get_raw_account_keys() == expected_keys
    assert list(parser.get_raw().values()) == [test_source[prefix + key] for key in expected_keys]


def test_prefix_match_is_case_sensitive(test_source: dict[str, str | None]) -> None:
    parser = EnvParser(test_source).parse("acc_")
    assert parser.get_raw_account_keys() == []
    assert parser.get_groups() == []


def test_two_groups_scenario(scenario_source: dict[str, str | None]) -> None:
    parser = EnvParser(scenario_source).parse("ACC_")
    assert parser.get_groups() == ["g1", "g2"]
    assert parser.get_group_users("g1") == ["u1", "u2"]
    assert parser.get_group_users("G1") == ["u1", "u2"]
    assert parser.get_user_groups("U1") == ["g1", "g2"]
    assert parser.get_group_map().get_data("g1", "u1") == AccountProps(address="0xA", private_key="0xP", balance="100")
    assert parser.get_group_map().get_data("g1", "u2").balance is None


def test_empty_and_unset_values_are_skipped() -> None:
    source = {"ACC_G1_U1": "0xA:0xP", "ACC_G1_U2": "", "ACC_G1_U3": None}
    parser = EnvParser(source).parse("ACC_")
    assert parser.get_raw_account_keys() == ["G1_U1"]
    assert parser.get_group_users("g1") == ["u1"]
    assert not parser.get_user_map().has_l1("u2")
    assert not parser.get_user_map().has_l1("u3")


def test_case_folded_names_collide() -> None:
    source = {"ACC_Group1_User1": "0xA:0xP", "ACC_GROUP1_USER1": "0xB:0xQ"}
    with pytest.raises(DuplicateKeyError, match=r"Duplicate user1\.group1"):
        _ = EnvParser(source).parse("ACC_")


def test_maps_share_payloads(test_source: dict[str, str | None]) -> None:
    parser = EnvParser(test_source).parse("ACCOUNT_")
    group_map = parser.get_group_map()
    user_map = parser.get_user_map()
    for group in group_map.get_l1_keys():
        for user in group_map.get_l2_keys(group):
            assert group_map.get_data(group, user) is user_map.get_data(user, group)


def test_second_parse_fails_with_duplicate(scenario_source: dict[str, str | None]) -> None:
    parser = EnvParser(scenario_source).parse("ACC_")
    with pytest.raises(DuplicateKeyError):
        _ = parser.parse("ACC_")


def test_custom_separator_and_divider() -> None:
    source = {"NET.LOCAL.DEPLOYER": "0xA|0xP|7"}
    parser = EnvParser(source, separator=".", divider="|").parse("NET.")
    assert parser.get_group_map().get_data("local", "deployer").balance == "7"


@pytest.mark.parametrize(
    "query",
    [
        lambda parser: parser.get_groups(),
        lambda parser: parser.get_group_users("g1"),
        lambda parser: parser.get_user_groups("u1"),
        lambda parser: parser.get_group_map(),
        lambda parser: parser.get_user_map(),
        lambda parser: parser.get_raw_account_keys(),
        lambda parser: parser.check_if_parsed(),
    ],
)
def test_queries_are_gated_until_parsed(
    scenario_source: dict[str, str | None], query: Callable[[EnvParser], Any]
) -> None:
    parser = EnvParser(scenario_source)
    with pytest.raises(NotParsedError, match="before being parsed"):
        _ = query(parser)

    _ = parser.parse("ACC_")
    _ = query(parser)


@given(st.dictionaries(st.tuples(_NAME_PART, _NAME_PART), st.text(alphabet="0123456789", max_size=3), max_size=15))
def test_group_and_user_maps_mirror_each_other(accounts: dict[tuple[str, str], str]) -> None:
    source = {f"ACC_{group}_{user}": f"0x{group}:0x{user}:{balance}" for (group, user), balance in accounts.items()}
    source["OTHER_X_Y"] = "0x1:0x2"
    parser = EnvParser(source).parse("ACC_")
    group_map = parser.get_group_map()
    user_map = parser.get_user_map()

    assert sorted(parser.get_raw_account_keys()) == sorted(f"{group}_{user}" for group, user in accounts)
    for group, user in accounts:
        assert group_map.has_l2(group, user)
        assert user_map.has_l2(user, group)
        assert group_map.get_data(group, user) == user_map.get_data(user, group)
    assert sum(len(inner) for inner in group_map.values()) == len(accounts)
    assert sum(len(inner) for inner in user_map.values()) == len(accounts)
