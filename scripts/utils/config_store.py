import copy
import json

from mergedeep import merge

from scripts.utils import json_file
from scripts.utils import log


DEFAULT_CONFIG_FILE = ".mainnet.json"

VAULT_FIELDS = ("name", "symbol", "vaultToken", "worker", "token0", "token1")


class ConfigNotFound(Exception):
    """
    The persisted configuration file is absent or is not a JSON object.
    """

    def __init__(self, filename, reason="missing"):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Configuration file `{filename}` could not be loaded ({reason})")


class MissingRoleAddress(Exception):
    """
    A role the operation depends on has no address recorded yet,
    usually because its deploy script has not been run.
    """

    def __init__(self, path):
        self.path = path
        super().__init__(f"No address recorded for `{path}`")


def same_address(a, b):
    if not a or not b:
        return False
    return a.lower() == b.lower()


def _upgradable():
    return {"proxy": "", "implementation": ""}


def skeleton():
    # canonical schema, every key present
    return {
        "proxyAdmin": "",
        "performanceFeeBucket": "",
        "opMultiSig": "",
        "tokens": {
            "btcb": "",
            "cake": "",
            "eth": "",
            "usdc": "",
            "usdt": "",
            "wbnb": "",
        },
        "readers": {
            "pancakeV3VaultReader": "",
        },
        "automatedVault": {
            "automatedVaultERC20Implementation": "",
            "avManagerV3Gateway": "",
            "automatedVaultManager": _upgradable(),
            "bank": _upgradable(),
            "pancakeV3Vault": {
                "vaultOracle": _upgradable(),
                "executor01": _upgradable(),
            },
            "vaults": [],
        },
        "dependencies": {
            "moneyMarket": "",
            "zapV3": "",
            "pancake": {
                "masterChef": "",
                "positionManager": "",
                "swapRouter": "",
                "factoryV3": "",
                "pools": {},
            },
        },
    }


def vault_entry(**fields):
    entry = {field: "" for field in VAULT_FIELDS}
    entry.update(fields)
    return entry


def _migrate(content):
    # older files kept vaults under `pancakeV3Vault` and had no token0/token1
    automated_vault = content.get("automatedVault", {})
    legacy = automated_vault.get("pancakeV3Vault", {}).pop("vaults", None)
    if legacy:
        vaults = automated_vault.setdefault("vaults", [])
        for entry in legacy:
            if not any(same_address(v.get("worker"), entry.get("worker")) for v in vaults):
                vaults.append(entry)

    if "vaults" in automated_vault:
        automated_vault["vaults"] = [vault_entry(**v) for v in automated_vault["vaults"]]

    return content


class ConfigStore:
    """
    In-memory mirror of the deployment configuration file.

    Every mutator updates exactly the targeted role and then rewrites the
    whole file. There is no locking: two processes mutating the same file
    race and the last flush wins.
    """

    def __init__(self, filename=DEFAULT_CONFIG_FILE):
        self.filename = filename
        self._config = None

    @classmethod
    def load(cls, filename=DEFAULT_CONFIG_FILE):
        store = cls(filename)
        store.reload()
        return store

    def reload(self):
        try:
            content = json_file.load(self.filename)
        except FileNotFoundError as exception:
            raise ConfigNotFound(self.filename) from exception
        except json.JSONDecodeError as exception:
            raise ConfigNotFound(self.filename, f"malformed: {exception.msg}") from exception

        if not isinstance(content, dict):
            raise ConfigNotFound(self.filename, "not a JSON object")

        self._config = merge({}, skeleton(), _migrate(content))
        return self.get()

    def get(self):
        """
        Returns a snapshot of the record. Changing the snapshot does not
        change the store; use the mutators.
        """
        if self._config is None:
            raise ConfigNotFound(self.filename, "not loaded")
        return copy.deepcopy(self._config)

    def require(self, path):
        """
        Resolves a dotted role path such as `automatedVault.bank.proxy`
        (list items by index) and fails if nothing is recorded there.
        """
        node = self.get()
        for key in path.split("."):
            try:
                node = node[int(key)] if isinstance(node, list) else node[key]
            except (KeyError, IndexError, ValueError, TypeError) as exception:
                raise MissingRoleAddress(path) from exception
        if node in ("", None):
            raise MissingRoleAddress(path)
        return node

    def persist(self):
        log.h3(f">> Writing {self.filename}")
        json_file.save(self.filename, self._config)

    # mutators

    def _set(self, path, value):
        self.get()
        node = self._config
        *parents, leaf = path.split(".")
        for key in parents:
            node = node[key]
        node[leaf] = value
        self.persist()

    def _set_upgradable(self, path, proxy, implementation):
        self._set(path, {"proxy": proxy, "implementation": implementation})

    def set_proxy_admin(self, address):
        self._set("proxyAdmin", address)

    def set_automated_vault_erc20_implementation(self, address):
        self._set("automatedVault.automatedVaultERC20Implementation", address)

    def set_automated_vault_gateway(self, address):
        self._set("automatedVault.avManagerV3Gateway", address)

    def set_automated_vault_manager(self, proxy, implementation):
        self._set_upgradable("automatedVault.automatedVaultManager", proxy, implementation)

    def set_bank(self, proxy, implementation):
        self._set_upgradable("automatedVault.bank", proxy, implementation)

    def set_pancake_v3_vault_oracle(self, proxy, implementation):
        self._set_upgradable("automatedVault.pancakeV3Vault.vaultOracle", proxy, implementation)

    def set_pancake_v3_executor(self, proxy, implementation):
        self._set_upgradable("automatedVault.pancakeV3Vault.executor01", proxy, implementation)

    def set_pancake_v3_vault_reader(self, address):
        self._set("readers.pancakeV3VaultReader", address)

    # vaults, keyed by worker

    def _vault_index(self, worker):
        for index, entry in enumerate(self.get()["automatedVault"]["vaults"]):
            if same_address(entry["worker"], worker):
                return index
        return None

    def find_vault_by_worker(self, worker):
        index = self._vault_index(worker)
        if index is None:
            return None
        return self.get()["automatedVault"]["vaults"][index]

    def upsert_vault(self, entry):
        """
        Replaces the entry with the same worker in place, or appends.
        """
        entry = vault_entry(**entry)
        index = self._vault_index(entry["worker"])
        vaults = self._config["automatedVault"]["vaults"]
        if index is None:
            vaults.append(entry)
        else:
            vaults[index] = entry
        self.persist()

    def add_vault_worker(self, worker, token0, token1):
        entry = self.find_vault_by_worker(worker) or vault_entry()
        entry.update(worker=worker, token0=token0, token1=token1)
        self.upsert_vault(entry)
