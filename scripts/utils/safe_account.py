import requests
from web3 import Web3

from scripts.utils import log


ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# chain id -> (Safe Transaction Service url, Safe web app chain prefix)
SAFE_SERVICES = {
    1: ("https://safe-transaction-mainnet.safe.global", "eth"),
    56: ("https://safe-transaction-bsc.safe.global", "bnb"),
    8453: ("https://safe-transaction-base.safe.global", "base"),
    42161: ("https://safe-transaction-arbitrum.safe.global", "arb1"),
}

SAFE_ABI = [
    {
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "value", "type": "uint256"},
            {"name": "data", "type": "bytes"},
            {"name": "operation", "type": "uint8"},
            {"name": "safeTxGas", "type": "uint256"},
            {"name": "baseGas", "type": "uint256"},
            {"name": "gasPrice", "type": "uint256"},
            {"name": "gasToken", "type": "address"},
            {"name": "refundReceiver", "type": "address"},
            {"name": "_nonce", "type": "uint256"}
        ],
        "name": "getTransactionHash",
        "outputs": [{"name": "", "type": "bytes32"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "nonce",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
]


class SafeAccount:
    """
    Proposes transactions to a Safe multisig for its owners to co-sign.

    The deployer key signs each proposal; it has to be an owner or a
    delegate of the Safe for the service to accept it. Service errors are
    raised as `requests.HTTPError`, nothing is retried.
    """

    def __init__(self, safe_address, web3: Web3, signer, safe_service_url=None, timeout=30):
        self.address = Web3.to_checksum_address(safe_address)
        self.w3 = web3
        self.signer = signer
        self.timeout = timeout

        chain_id = self.w3.eth.chain_id
        service_url, self.chain_prefix = SAFE_SERVICES.get(chain_id, (None, "unknown"))
        self.safe_service_url = safe_service_url or service_url
        if not self.safe_service_url:
            raise ValueError(f"No Safe Transaction Service URL for chain {chain_id}")

        self.safe_contract = self.w3.eth.contract(address=self.address, abi=SAFE_ABI)

    def _transactions_url(self):
        return f"{self.safe_service_url}/api/v1/safes/{self.address}/multisig-transactions/"

    def next_nonce(self):
        """
        First Safe nonce not taken by an executed or queued transaction.
        """
        nonce = self.safe_contract.functions.nonce().call()

        response = requests.get(
            self._transactions_url(),
            params={"ordering": "-nonce", "limit": 1},
            timeout=self.timeout,
        )
        response.raise_for_status()
        results = response.json().get("results", [])
        if results:
            nonce = max(nonce, int(results[0]["nonce"]) + 1)

        return nonce

    def transaction_link(self, safe_tx_hash):
        return f"https://app.safe.global/transactions/tx?safe={self.chain_prefix}:{self.address}&id=multisig_{self.address}_{safe_tx_hash}"

    def propose_transaction(self, target, value, data):
        """
        Registers a pending call of `data` on `target` and returns the
        Safe transaction hash the owners will confirm.
        """
        target = Web3.to_checksum_address(target)
        nonce = self.next_nonce()

        safe_tx_hash = self.safe_contract.functions.getTransactionHash(
            target,
            int(value),
            Web3.to_bytes(hexstr=data),
            0,  # operation: call
            0,  # safeTxGas
            0,  # baseGas
            0,  # gasPrice
            ZERO_ADDRESS,  # gasToken
            ZERO_ADDRESS,  # refundReceiver
            nonce,
        ).call()
        safe_tx_hash = Web3.to_hex(safe_tx_hash)

        signature = self.signer.unsafe_sign_hash(safe_tx_hash).signature

        payload = {
            "to": target,
            "value": str(value),
            "data": data,
            "operation": 0,
            "safeTxGas": "0",
            "baseGas": "0",
            "gasPrice": "0",
            "gasToken": ZERO_ADDRESS,
            "refundReceiver": ZERO_ADDRESS,
            "nonce": nonce,
            "contractTransactionHash": safe_tx_hash,
            "sender": self.signer.address,
            "signature": Web3.to_hex(signature),
            "origin": "automated-vault-deploy",
        }

        response = requests.post(self._transactions_url(), json=payload, timeout=self.timeout)
        response.raise_for_status()

        log.info(f"Sign it in the Safe web interface: {self.transaction_link(safe_tx_hash)}")
        return safe_tx_hash
