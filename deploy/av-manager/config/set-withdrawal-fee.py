from config.abis import AUTOMATED_VAULT_MANAGER
from scripts.utils.batch import tx_hex
from scripts.utils.operation import Operation

TAGS = ["SetWithdrawalFeeBps"]

# Check all variables below before running
VAULT_TOKEN_ADDRESS = "0xb08eE41e88A2820cd572B4f2DFc459549790F2D7"
WITHDRAWAL_FEE_BPS = 0


def run(operation: Operation):
    manager = operation.contract(
        operation.config.require("automatedVault.automatedVaultManager.proxy"), AUTOMATED_VAULT_MANAGER)

    operation.log.step(f"Vault Token: {VAULT_TOKEN_ADDRESS}")
    receipt = operation.execute(operation.call(manager, "setWithdrawalFeeBps", VAULT_TOKEN_ADDRESS, WITHDRAWAL_FEE_BPS))
    operation.log.success(f"Done Setting WithdrawFeeBps Tx: {tx_hex(receipt)}")
