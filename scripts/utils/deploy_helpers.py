import os

import dotenv
from eth_account import Account

from config.BluePrint import PARAMS
from scripts.utils import log

dotenv.load_dotenv()


# first account of a local anvil/hardhat node
TEST_PRIVATE_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'


def get_account(account_name, chain="local"):
    log.h1(f'Connecting to deployer account {account_name}')

    key = os.environ.get(f'{account_name}_PRIVATE_KEY')
    if not key:
        if chain != "local":
            raise ValueError(f"{account_name}_PRIVATE_KEY is not set")
        key = TEST_PRIVATE_KEY
    account = Account.from_key(key)
    log.h2(f'Deployer account {account_name} connected: {account.address}')

    return account


def get_rpc(chain, rpc=""):
    # --rpc, then <CHAIN>_RPC_URL, then the blueprint default
    if rpc:
        return rpc
    env_name = f"{chain.upper().replace('-', '_')}_RPC_URL"
    return os.environ.get(env_name) or PARAMS[chain]["RPC_URL"]
