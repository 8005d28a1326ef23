from config.abis import AUTOMATED_VAULT_MANAGER
from scripts.utils.batch import tx_hex
from scripts.utils.operation import Operation

TAGS = ["SetVaultManager"]

# Check all variables below before running
MANAGER = "0xe45216ac4816a5ec5378b1d13de8aa9f262ce9de"
PARAMS = [
    {"vaultTokenAddress": "0xb08eE41e88A2820cd572B4f2DFc459549790F2D7", "manager": MANAGER, "isOk": True},
    {"vaultTokenAddress": "0x8Ee3A53720ED344e7CBfAe63292c18E4183CCE8a", "manager": MANAGER, "isOk": True},
    {"vaultTokenAddress": "0xdEBe96323D54d4D58F4bB526e58627Fb0651Bb00", "manager": MANAGER, "isOk": True},
    {"vaultTokenAddress": "0x0C8ECaE87711d766fAA18047B3450479b4e822d4", "manager": MANAGER, "isOk": True},
]


def run(operation: Operation):
    manager = operation.contract(
        operation.config.require("automatedVault.automatedVaultManager.proxy"), AUTOMATED_VAULT_MANAGER)

    calls = []
    for param in PARAMS:
        operation.log.step(f"Vault Token: {param['vaultTokenAddress']}")
        operation.log.step(f"Setting Manager: ({param['manager']}), isOk: {param['isOk']}")
        calls.append(operation.call(
            manager, "setVaultManager", param["vaultTokenAddress"], param["manager"], param["isOk"]))

    handles, _ = operation.submit_batch(calls)

    # the batch isn't atomic, a reverted call doesn't stop the ones after it
    reverted = operation.check_batch(handles)
    for receipt in reverted:
        operation.log.error(f"Reverted: {tx_hex(receipt)}")
    if not reverted:
        operation.log.done()
