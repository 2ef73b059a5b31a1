"""Minimal example building hardhat-style named accounts from environment variables."""

from env_accounts import AccountsConfig, EnvAccounts


def main() -> None:
    """Parse an in-memory source and print the common views."""
    source = {
        "ACC_LOCAL_DEPLOYER": "0xd9FF26d1b97d3f2e942D026645332336cBb27bda:0xffe3:100000000000000000000",
        "ACC_LOCAL_ALICE": "0xcE9a2A71dC12F79DF3B30EA1e6355C576E4f632f:0x59ce",
        "ACC_GOERLI_DEPLOYER": "0xcE9a2A71dC12F23DF3B30EA1e6355C576E4f2232:0x59cf",
    }
    config = AccountsConfig(
        prefix="ACC_",
        required_accounts=("local_deployer",),
        network_aliases={"local": ["hardhat", "localhost"]},
    )
    accounts = EnvAccounts(config, source).parse()

    print("groups:", accounts.groups)
    print("named accounts:", accounts.get_user_network_props(lambda props: props.address))
    print("alice balance:", accounts.get_prop("local", "alice", "balance"))
    print("hardhat accounts:", [props.with_balance(accounts.get_default_balance()) for props in accounts.group_array("local")])


if __name__ == "__main__":
    main()
