# Minimal ABI fragments for calls made on already deployed contracts.
# Contracts deployed by the scripts are read from build artifacts instead.


def _fn(name, inputs, outputs=(), mutability="nonpayable"):
    return {
        "type": "function",
        "name": name,
        "stateMutability": mutability,
        "inputs": [{"name": n, "type": t} if isinstance(t, str) else dict(t, name=n) for n, t in inputs],
        "outputs": [{"name": "", "type": t} for t in outputs],
    }


OPEN_VAULT_PARAMS = {
    "type": "tuple",
    "components": [
        {"name": "worker", "type": "address"},
        {"name": "vaultOracle", "type": "address"},
        {"name": "executor", "type": "address"},
        {"name": "compressedMinimumDeposit", "type": "uint32"},
        {"name": "compressedCapacity", "type": "uint32"},
        {"name": "managementFeePerSec", "type": "uint32"},
        {"name": "withdrawalFeeBps", "type": "uint16"},
        {"name": "toleranceBps", "type": "uint16"},
        {"name": "maxLeverage", "type": "uint8"},
    ],
}

AUTOMATED_VAULT_MANAGER = [
    _fn("openVault", [("_name", "string"), ("_symbol", "string"), ("_params", OPEN_VAULT_PARAMS)], ["address"]),
    _fn("setCapacity", [("_vaultToken", "address"), ("_compressedCapacity", "uint32")]),
    _fn("setMaxLeverage", [("_vaultToken", "address"), ("_maxLeverage", "uint8")]),
    _fn("setToleranceBps", [("_vaultToken", "address"), ("_toleranceBps", "uint16")]),
    _fn("setWithdrawalFeeBps", [("_vaultToken", "address"), ("_withdrawalFeeBps", "uint16")]),
    _fn("setVaultManager", [("_vaultToken", "address"), ("_manager", "address"), ("_isOk", "bool")]),
    _fn("manage", [("_vaultToken", "address"), ("_executorParams", "bytes[]")], ["bytes[]"]),
]

PCS_V3_EXECUTOR = [
    _fn("setSkipExposureChecks", [("_vaultToken", "address"), ("_isSkip", "bool")]),
    _fn("deleverage", [("_bps", "uint256")], ["bytes"]),
]

PANCAKE_V3_VAULT_ORACLE = [
    _fn("setPriceFeedOf", [("_token", "address"), ("_newPriceFeed", "address")]),
]

OWNABLE_2_STEP = [
    _fn("owner", [], ["address"], "view"),
    _fn("pendingOwner", [], ["address"], "view"),
    _fn("transferOwnership", [("newOwner", "address")]),
    _fn("acceptOwnership", []),
]

PROXY_ADMIN = [
    _fn("changeProxyAdmin", [("proxy", "address"), ("newAdmin", "address")]),
    _fn("upgrade", [("proxy", "address"), ("implementation", "address")]),
]

PANCAKE_V3_FACTORY = [
    _fn("getPool", [("tokenA", "address"), ("tokenB", "address"), ("fee", "uint24")], ["address"], "view"),
]

COMMON_V3_POOL = [
    _fn("token0", [], ["address"], "view"),
    _fn("token1", [], ["address"], "view"),
]
