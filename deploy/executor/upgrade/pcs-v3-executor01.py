from scripts.utils.operation import Operation

TAGS = ["PancakeV3Executor01Upgrade"]


def run(operation: Operation):
    config = operation.config
    executor = config.require("automatedVault.pancakeV3Vault.executor01.proxy")

    implementation = operation.upgrade_proxy(executor, "PCSV3Executor01")
    operation.log.success("Done PCSV3Executor01 implementation upgraded")

    config.set_pancake_v3_executor(executor, implementation)
