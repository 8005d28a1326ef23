from config.abis import PCS_V3_EXECUTOR
from scripts.utils.operation import Operation

TAGS = ["SetSkipExposureChecks"]

# Check all variables below before running
PARAMS = [
    {
        "vaultTokenAddress": "0xb08eE41e88A2820cd572B4f2DFc459549790F2D7",
        "isSkip": True,
    },
]


def run(operation: Operation):
    executor = operation.contract(
        operation.config.require("automatedVault.pancakeV3Vault.executor01.proxy"), PCS_V3_EXECUTOR)

    calls = []
    for param in PARAMS:
        operation.log.step(f"Setting Skip Exposure Check: ({param['vaultTokenAddress']}), isSkip: {param['isSkip']}")
        calls.append(operation.call(executor, "setSkipExposureChecks", param["vaultTokenAddress"], param["isSkip"]))

    operation.submit_batch(calls)
    operation.log.done()
