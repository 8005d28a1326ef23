from config.abis import AUTOMATED_VAULT_MANAGER
from scripts.utils.operation import Operation

TAGS = ["SetToleranceBps"]

# Check all variables below before running
PARAMS = [
    {"vaultTokenAddress": "0xb08eE41e88A2820cd572B4f2DFc459549790F2D7", "toleranceBps": 9900},  # 1%
    {"vaultTokenAddress": "0x8Ee3A53720ED344e7CBfAe63292c18E4183CCE8a", "toleranceBps": 9900},  # 1%
    {"vaultTokenAddress": "0xdEBe96323D54d4D58F4bB526e58627Fb0651Bb00", "toleranceBps": 9900},  # 1%
    {"vaultTokenAddress": "0x0C8ECaE87711d766fAA18047B3450479b4e822d4", "toleranceBps": 9900},  # 1%
]


def run(operation: Operation):
    manager = operation.contract(
        operation.config.require("automatedVault.automatedVaultManager.proxy"), AUTOMATED_VAULT_MANAGER)

    calls = []
    for param in PARAMS:
        operation.log.step(f"Setting vaultToken: ({param['vaultTokenAddress']}), toleranceBps: {param['toleranceBps']}")
        calls.append(operation.call(manager, "setToleranceBps", param["vaultTokenAddress"], param["toleranceBps"]))

    operation.submit_batch(calls)
    operation.log.done()
