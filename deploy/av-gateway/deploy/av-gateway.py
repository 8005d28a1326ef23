from scripts.utils.operation import Operation

TAGS = ["AutomatedVaultGatewayDeploy"]


def run(operation: Operation):
    config = operation.config

    gateway = operation.deploy(
        "AVManagerV3Gateway",
        config.require("automatedVault.automatedVaultManager.proxy"),
        config.require("tokens.wbnb"),
    )
    operation.log.success(f"AVManagerV3Gateway deployed at: {gateway}")

    config.set_automated_vault_gateway(gateway)
