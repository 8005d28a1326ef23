from config.abis import OWNABLE_2_STEP
from scripts.utils.batch import tx_hex
from scripts.utils.operation import Operation

TAGS = ["TransferOwnership"]

# Check all variables below before running
CONTRACT_ROLES = [
    "proxyAdmin",
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
    op_multi_sig = config.require("opMultiSig")

    for contract_address in contracts:
        operation.log.step(f"Transfer ownership of {contract_address} to: {op_multi_sig}")
        contract = operation.contract(contract_address, OWNABLE_2_STEP)
        receipt = operation.execute(operation.call(contract, "transferOwnership", op_multi_sig))
        operation.log.success(f"Done | Tx hash: {tx_hex(receipt)}")

    operation.log.info("[Please accept the ownership transfer transaction on multisig wallet]")
    operation.log.done("All Done")
