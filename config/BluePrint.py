# gas limit used for every transaction when running against a fork
FORK_GAS_LIMIT = 2_000_000

# blocks to wait on the last transaction of a batch
BATCH_CONFIRMATIONS = 3

DEFAULT_CONFIG_FILE = ".mainnet.json"
DEFAULT_ARTIFACTS_DIR = "./artifacts"


PARAMS = {
    "bsc-mainnet": {
        "CHAIN_ID": 56,
        "RPC_URL": "https://bsc-dataseed.bnbchain.org",
        "CONFIG_FILE": ".mainnet.json",
        "CONFIRMATIONS": 1,
    },
    "local": {
        "CHAIN_ID": 31337,
        "RPC_URL": "http://127.0.0.1:8545",
        "CONFIG_FILE": ".mainnet.json",
        "CONFIRMATIONS": 1,
    },
}

CHAINS = list(PARAMS.keys())
