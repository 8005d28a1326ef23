from web3 import Web3

from config.abis import AUTOMATED_VAULT_MANAGER
from scripts.utils.batch import tx_hex
from scripts.utils.operation import Operation

TAGS = ["OpenVault"]

# Check all variables below before running
NAME = "Saving USDT-BNB 250 PCS1"
SYMBOL = "L-USDTBNB250-PCS1"
WORKER = ""
COMPRESSED_MINIMUM_DEPOSIT = 5000  # 50 USD
COMPRESSED_CAPACITY = 500_000  # 500,000 USD
MANAGEMENT_FEE_PER_SEC = 634195840  # 2% per year
WITHDRAWAL_FEE_BPS = 20
TOLERANCE_BPS = 25
MAX_LEVERAGE = 8


def run(operation: Operation):
    config = operation.config

    param = {
        "worker": WORKER,
        "vaultOracle": config.require("automatedVault.pancakeV3Vault.vaultOracle.proxy"),
        "executor": config.require("automatedVault.pancakeV3Vault.executor01.proxy"),
        "compressedMinimumDeposit": COMPRESSED_MINIMUM_DEPOSIT,
        "compressedCapacity": COMPRESSED_CAPACITY,
        "managementFeePerSec": MANAGEMENT_FEE_PER_SEC,
        "withdrawalFeeBps": WITHDRAWAL_FEE_BPS,
        "toleranceBps": TOLERANCE_BPS,
        "maxLeverage": MAX_LEVERAGE,
    }
    operation.log.info(f"Open Vault param {param}")

    manager = operation.contract(config.require("automatedVault.automatedVaultManager.proxy"), AUTOMATED_VAULT_MANAGER)
    open_vault = operation.call(manager, "openVault", NAME, SYMBOL, tuple(param.values()))

    # the new vault token address isn't read back from the logs
    vault_token = Web3.to_checksum_address(operation.simulate(open_vault, ["address"]))
    receipt = operation.execute(open_vault)
    operation.log.success(f"Vault {SYMBOL} opened at {vault_token} | Tx hash: {tx_hex(receipt)}")

    entry = config.find_vault_by_worker(WORKER) or {}
    entry.update(name=NAME, symbol=SYMBOL, vaultToken=vault_token, worker=WORKER)
    config.upsert_vault(entry)
