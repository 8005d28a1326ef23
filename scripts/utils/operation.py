import os

from scripts.utils import json_file
from scripts.utils import log
from scripts.utils.batch import BatchSubmitter, CallSpec, check, failed
from scripts.utils.chain import ChainClient
from scripts.utils.config_store import ConfigStore
from scripts.utils.deploy_args import DeployArgs
from scripts.utils.safe_account import SafeAccount

from config.abis import PROXY_ADMIN


PROXY_ARTIFACT = "TransparentUpgradeableProxy"


class Operation:
    """
    Everything one deploy script needs: the configuration store, the
    deployer's chain client and the nonce-sequenced batch submitter.

    Scripts receive it as their only argument instead of reaching for
    shared globals.
    """

    def __init__(
        self,
        config: ConfigStore,
        client: ChainClient,
        artifacts_dir="./artifacts",
        confirmations=1,
        batch_confirmations=3,
        safe=None,
    ):
        self.config = config
        self.client = client
        self.submitter = BatchSubmitter(client)
        self.artifacts_dir = artifacts_dir
        self.confirmations = confirmations
        self.batch_confirmations = batch_confirmations
        self._safe = safe

    @classmethod
    def connect(cls, deploy_args: DeployArgs):
        config = ConfigStore.load(deploy_args.config_file)
        client = ChainClient.connect(deploy_args.rpc, deploy_args.sender, gas_limit=deploy_args.gas_limit)
        return cls(
            config,
            client,
            artifacts_dir=deploy_args.artifacts_dir,
            confirmations=deploy_args.confirmations,
            batch_confirmations=deploy_args.batch_confirmations,
        )

    @property
    def account(self):
        return self.client.account

    @property
    def log(self):
        return log

    @property
    def safe(self):
        if self._safe is None:
            self._safe = SafeAccount(self.config.require("opMultiSig"), self.client.web3, self.account)
        return self._safe

    # calls

    def contract(self, address, abi):
        return self.client.contract(address, abi)

    def read(self, contract, fn_name, *args):
        return self.client.read(contract, fn_name, *args)

    def call(self, contract, fn_name, *args, value=0):
        data = self.client.encode(contract, fn_name, *args)
        return CallSpec(contract.address, data, value, fn_name)

    def simulate(self, call: CallSpec, output_types):
        return self.client.simulate(call.target, call.data, call.value, output_types)

    def execute(self, call: CallSpec, confirmations=None):
        """
        Submits one call, waits for it and fails if it reverted.
        """
        pending = self.submitter.prepare_batch([call])
        handles = self.submitter.dispatch(pending)
        if confirmations is None:
            confirmations = self.confirmations
        receipt = self.submitter.await_confirmation(handles, confirmations)[0]
        return check(receipt, call.label)

    def submit_batch(self, calls, confirmations=None):
        """
        Assigns contiguous nonces, sends every call, then waits on the
        last one only. Returns the dispatched handles and the last receipt.
        """
        pending = self.submitter.prepare_batch(calls)
        log.info("> Submitting txs...")
        handles = self.submitter.dispatch(pending)
        log.info("> Waiting for confirmations...")
        if confirmations is None:
            confirmations = self.batch_confirmations
        receipt = self.submitter.await_last(handles, confirmations)
        return handles, receipt

    def check_batch(self, handles, confirmations=1):
        """
        Fetches every receipt of a batch and returns those that reverted.
        """
        return failed(self.submitter.await_confirmation(handles, confirmations))

    def propose(self, target, value, data):
        return self.safe.propose_transaction(target, value, data)

    # deployments

    def load_artifact(self, name):
        artifact = json_file.load(os.path.join(self.artifacts_dir, f"{name}.json"))
        return artifact["abi"], artifact["bytecode"]

    def deploy(self, name, *args):
        abi, bytecode = self.load_artifact(name)
        init_code = self.client.encode_constructor(abi, bytecode, *args)
        receipt = self.execute(CallSpec(None, init_code, 0, f"deploy {name}"))
        address = receipt["contractAddress"]
        log.h3(f"Contract {name} deployed at {address}")
        return address

    def deploy_proxy(self, name, *init_args, initializer="initialize"):
        """
        Deploys `name` behind a transparent proxy administered by the
        recorded proxy admin. Returns `(proxy, implementation)`.
        """
        proxy_admin = self.config.require("proxyAdmin")
        implementation = self.deploy(name)

        abi, _ = self.load_artifact(name)
        init_data = self.client.encode(self.contract(implementation, abi), initializer, *init_args)
        proxy = self.deploy(PROXY_ARTIFACT, implementation, proxy_admin, init_data)
        return proxy, implementation

    def upgrade_proxy(self, proxy, name, implementation=None):
        """
        Points `proxy` at `implementation`, deploying a new implementation
        of `name` first when none is given. Returns the implementation address.
        """
        proxy_admin = self.contract(self.config.require("proxyAdmin"), PROXY_ADMIN)
        if implementation is None:
            implementation = self.deploy(name)
            log.info(f"> New implementation address: {implementation}")
        self.execute(self.call(proxy_admin, "upgrade", proxy, implementation))
        return implementation
