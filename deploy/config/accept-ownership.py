from scripts.utils.operation import Operation
from scripts.utils.selector import function_selector

TAGS = ["AcceptOwnership"]

# Check all variables below before running
CONTRACT_ROLES = [
    "automatedVault.automatedVaultManager.proxy",
    "automatedVault.pancakeV3Vault.executor01.proxy",
    "automatedVault.pancakeV3Vault.vaultOracle.proxy",
    "automatedVault.bank.proxy",
    "automatedVault.vaults.0.worker",
    "automatedVault.vaults.1.worker",
    "automatedVault.vaults.2.worker",
]


def run(operation: Operation):
    config = operation.config
    contracts = [config.require(role) for role in CONTRACT_ROLES]

    # 0x79ba5097
    data = function_selector("acceptOwnership()")

    for target in contracts:
        safe_tx_hash = operation.propose(target, 0, data)
        operation.log.success(f"Transaction Proposed Tx hash: {safe_tx_hash}")
