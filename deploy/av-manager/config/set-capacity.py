from config.abis import AUTOMATED_VAULT_MANAGER
from scripts.utils.operation import Operation

TAGS = ["SetCapacity"]

# Check all variables below before running
PARAMS = [
    {
        "vaultTokenAddress": "0xd99386173CF5A93d83d1958e985f361696A75A3e",
        "newCompressedCapacity": 0,
    },
]


def run(operation: Operation):
    manager = operation.contract(
        operation.config.require("automatedVault.automatedVaultManager.proxy"), AUTOMATED_VAULT_MANAGER)

    calls = []
    for param in PARAMS:
        operation.log.step(f"Vault Token: {param['vaultTokenAddress']}")
        operation.log.step(f"Setting Capacity ... ({param['newCompressedCapacity']})")
        calls.append(operation.call(manager, "setCapacity", param["vaultTokenAddress"], param["newCompressedCapacity"]))

    operation.submit_batch(calls)
    operation.log.done()
