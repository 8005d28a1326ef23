from config.BluePrint import PARAMS, BATCH_CONFIRMATIONS, FORK_GAS_LIMIT, DEFAULT_ARTIFACTS_DIR


class DeployArgs:
    def __init__(self, sender, chain, rpc, config_file=None, artifacts_dir=DEFAULT_ARTIFACTS_DIR, fork=False):
        self.sender = sender
        self.chain = chain
        self.rpc = rpc
        self.params = PARAMS[chain]
        self.config_file = config_file or self.params["CONFIG_FILE"]
        self.artifacts_dir = artifacts_dir
        self.fork = fork

    @property
    def gas_limit(self):
        return FORK_GAS_LIMIT if self.fork else None

    @property
    def confirmations(self):
        return self.params["CONFIRMATIONS"]

    @property
    def batch_confirmations(self):
        return BATCH_CONFIRMATIONS

    def __repr__(self):
        return f"<DeployArgs chain={self.chain} config={self.config_file} artifacts={self.artifacts_dir} fork={self.fork}>"
