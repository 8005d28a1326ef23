from config.abis import PANCAKE_V3_VAULT_ORACLE
from scripts.utils.batch import tx_hex
from scripts.utils.operation import Operation

TAGS = ["SetPriceFeedOf"]

# Check all variables below before running
# (token role in the configuration file, price feed address)
PRICE_FEED_LIST = [
    ("tokens.usdc", "0x51597f405303c4377e36123cbc172b13269ea163"),
]


def run(operation: Operation):
    config = operation.config
    oracle = operation.contract(config.require("automatedVault.pancakeV3Vault.vaultOracle.proxy"), PANCAKE_V3_VAULT_ORACLE)

    calls = []
    for token_role, price_feed in PRICE_FEED_LIST:
        token = config.require(token_role)
        operation.log.step(f"Setting price feed of {token} to {price_feed}")
        calls.append(operation.call(oracle, "setPriceFeedOf", token, price_feed))

    _, receipt = operation.submit_batch(calls)
    operation.log.success(f"Done Setting price feed hash: {tx_hex(receipt)}")
