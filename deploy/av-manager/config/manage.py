from config.abis import AUTOMATED_VAULT_MANAGER, PCS_V3_EXECUTOR
from scripts.utils.batch import tx_hex
from scripts.utils.operation import Operation

TAGS = ["Manage"]

# Check all variables below before running
VAULT_TOKEN_ADDRESS = "0x8Ee3A53720ED344e7CBfAe63292c18E4183CCE8a"
DELEVERAGE_BPS = 10000


def run(operation: Operation):
    config = operation.config
    executor = operation.contract(config.require("automatedVault.pancakeV3Vault.executor01.proxy"), PCS_V3_EXECUTOR)
    manager = operation.contract(config.require("automatedVault.automatedVaultManager.proxy"), AUTOMATED_VAULT_MANAGER)

    commands = [operation.client.encode(executor, "deleverage", DELEVERAGE_BPS)]

    receipt = operation.execute(operation.call(manager, "manage", VAULT_TOKEN_ADDRESS, commands))
    operation.log.done(f"Done at! {tx_hex(receipt)}")
