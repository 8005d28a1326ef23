from scripts.utils.operation import Operation

TAGS = ["BankDeploy"]


def run(operation: Operation):
    config = operation.config

    operation.log.info("> Deploying Bank Contract")
    proxy, implementation = operation.deploy_proxy(
        "Bank",
        config.require("dependencies.moneyMarket"),
        config.require("automatedVault.automatedVaultManager.proxy"),
    )

    operation.log.success(f"bank implementation deployed at: {implementation}")
    operation.log.success(f"bank proxy deployed at: {proxy}")

    config.set_bank(proxy, implementation)
