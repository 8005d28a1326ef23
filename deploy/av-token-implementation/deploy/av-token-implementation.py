from scripts.utils.operation import Operation

TAGS = ["AutomatedVaultImplementationDeploy"]


def run(operation: Operation):
    implementation = operation.deploy("AutomatedVaultERC20")
    operation.log.success(f"AutomatedVaultERC20Implementation deployed at: {implementation}")

    operation.config.set_automated_vault_erc20_implementation(implementation)
