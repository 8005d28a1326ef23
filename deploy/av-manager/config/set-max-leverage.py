from config.abis import AUTOMATED_VAULT_MANAGER
from scripts.utils.operation import Operation

TAGS = ["SetMaxLeverage"]

# Check all variables below before running
PARAMS = [
    {
        "vaultTokenAddress": "0xb08eE41e88A2820cd572B4f2DFc459549790F2D7",
        "newMaxLeverage": 8,
    },
]


def run(operation: Operation):
    manager = operation.contract(
        operation.config.require("automatedVault.automatedVaultManager.proxy"), AUTOMATED_VAULT_MANAGER)

    calls = []
    for param in PARAMS:
        operation.log.step(f"Vault Token: {param['vaultTokenAddress']}")
        operation.log.step(f"Setting Max Leverage ... ({param['newMaxLeverage']})")
        calls.append(operation.call(manager, "setMaxLeverage", param["vaultTokenAddress"], param["newMaxLeverage"]))

    operation.submit_batch(calls)
    operation.log.done()
