from scripts.utils.operation import Operation

TAGS = ["PancakeV3VaultReaderDeploy"]


def run(operation: Operation):
    config = operation.config

    reader = operation.deploy(
        "PancakeV3VaultReader",
        config.require("automatedVault.automatedVaultManager.proxy"),
        config.require("automatedVault.bank.proxy"),
        config.require("automatedVault.pancakeV3Vault.vaultOracle.proxy"),
    )
    operation.log.success(f"PancakeV3VaultReader deployed at: {reader}")

    config.set_pancake_v3_vault_reader(reader)
