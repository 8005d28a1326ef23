from scripts.utils.operation import Operation

TAGS = ["AutomatedVaultManagerDeploy"]

# Check all variables below before running
MANAGEMENT_FEE_TREASURY = ""
WITHDRAWAL_FEE_TREASURY = ""


def run(operation: Operation):
    config = operation.config

    proxy, implementation = operation.deploy_proxy(
        "AutomatedVaultManager",
        config.require("automatedVault.automatedVaultERC20Implementation"),
        MANAGEMENT_FEE_TREASURY,
        WITHDRAWAL_FEE_TREASURY,
    )

    operation.log.success(f"AutomatedVaultManager implementation deployed at: {implementation}")
    operation.log.success(f"AutomatedVaultManager proxy deployed at: {proxy}")

    config.set_automated_vault_manager(proxy, implementation)
