from config.abis import PROXY_ADMIN
from scripts.utils.batch import tx_hex
from scripts.utils.operation import Operation

TAGS = ["TransferProxyAdmin"]

# Check all variables below before running
NEW_PROXY_ADMIN = "0xdAb7a2cca461F88eedBadF448C3957Ff20Cea1a7"
CONTRACT_ROLES = [
    "automatedVault.bank.proxy",
    "automatedVault.automatedVaultManager.proxy",
    "automatedVault.pancakeV3Vault.vaultOracle.proxy",
    "automatedVault.pancakeV3Vault.executor01.proxy",
    "automatedVault.vaults.0.worker",
]


def run(operation: Operation):
    config = operation.config
    contracts = [config.require(role) for role in CONTRACT_ROLES]
    proxy_admin = operation.contract(config.require("proxyAdmin"), PROXY_ADMIN)

    # one at a time, each confirmed before the next
    for contract_address in contracts:
        receipt = operation.execute(operation.call(proxy_admin, "changeProxyAdmin", contract_address, NEW_PROXY_ADMIN))
        operation.log.success(f"Done transfer tx {tx_hex(receipt)}")

    config.set_proxy_admin(NEW_PROXY_ADMIN)
