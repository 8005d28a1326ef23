from scripts.utils.operation import Operation

TAGS = ["PancakeV3VaultOracleDeploy"]

# Check all variables below before running
MAX_PRICE_AGE = 60_000
MAX_PRICE_DIFF = 10_500


def run(operation: Operation):
    config = operation.config

    proxy, implementation = operation.deploy_proxy(
        "PancakeV3VaultOracle",
        config.require("dependencies.pancake.positionManager"),
        config.require("automatedVault.bank.proxy"),
        MAX_PRICE_AGE,
        MAX_PRICE_DIFF,
    )

    operation.log.success(f"PancakeV3VaultOracle implementation deployed at: {implementation}")
    operation.log.success(f"PancakeV3VaultOracle proxy deployed at: {proxy}")

    config.set_pancake_v3_vault_oracle(proxy, implementation)
