from eth_abi.packed import encode_packed

from config.abis import COMMON_V3_POOL, PANCAKE_V3_FACTORY
from scripts.utils.config_store import same_address
from scripts.utils.operation import Operation

TAGS = ["PancakeV3WorkerDeploy"]

# Check all variables below before running
POOL_FEE = 500
BASE_TOKEN = "tokens.wbnb"
OTHER_TOKEN = "tokens.btcb"
TRADING_FEE_PERFORMANCE = 1500
REWARD_FEE_PERFORMANCE = 1500


def run(operation: Operation):
    config = operation.config
    tokens = {role: config.require(f"tokens.{role}") for role in ("cake", "wbnb", "btcb")}
    base_token = config.require(BASE_TOKEN)
    other_token = config.require(OTHER_TOKEN)

    cake_to_token0_path = encode_packed(
        ["address", "uint24", "address"],
        [tokens["cake"], 500, tokens["wbnb"]],
    )
    cake_to_token1_path = encode_packed(
        ["address", "uint24", "address", "uint24", "address"],
        [tokens["cake"], 500, tokens["wbnb"], 500, tokens["btcb"]],
    )

    factory = operation.contract(config.require("dependencies.pancake.factoryV3"), PANCAKE_V3_FACTORY)
    pool_address = operation.read(factory, "getPool", base_token, other_token, POOL_FEE)
    pool = operation.contract(pool_address, COMMON_V3_POOL)
    token0 = operation.read(pool, "token0")
    token1 = operation.read(pool, "token1")

    param = {
        "vaultManager": config.require("automatedVault.automatedVaultManager.proxy"),
        "positionManager": config.require("dependencies.pancake.positionManager"),
        "pool": pool_address,
        "isToken0Base": same_address(base_token, token0),
        "router": config.require("dependencies.pancake.swapRouter"),
        "masterChef": config.require("dependencies.pancake.masterChef"),
        "zapV3": config.require("dependencies.zapV3"),
        "performanceFeeBucket": config.require("performanceFeeBucket"),
        "tradingPerformanceFeeBps": TRADING_FEE_PERFORMANCE,
        "rewardPerformanceFeeBps": REWARD_FEE_PERFORMANCE,
        "cakeToToken0Path": cake_to_token0_path,
        "cakeToToken1Path": cake_to_token1_path,
    }
    operation.log.info(f"Initialize param: {param}")

    proxy, implementation = operation.deploy_proxy("PancakeV3Worker", tuple(param.values()))

    operation.log.success(f"PancakeV3Worker implementation deployed at: {implementation}")
    operation.log.success(f"PancakeV3Worker proxy deployed at: {proxy}")

    config.add_vault_worker(proxy, token0, token1)
