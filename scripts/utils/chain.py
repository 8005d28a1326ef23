import time

from eth_abi import decode
from web3 import Web3
from web3.exceptions import TransactionNotFound


def checksummed(value):
    # web3 rejects non-checksummed addresses, the config file holds either case
    if isinstance(value, str) and Web3.is_address(value):
        return Web3.to_checksum_address(value)
    if isinstance(value, (list, tuple)):
        return type(value)(checksummed(item) for item in value)
    return value


class ChainClient:
    """
    Signs and broadcasts transactions for one deployer account.

    Nonces are never read here when sending: the caller passes the nonce
    it allocated, so several transactions can be in flight at once.
    """

    def __init__(self, web3: Web3, account, gas_limit=None, poll_interval=1):
        self.web3 = web3
        self.account = account
        self.gas_limit = gas_limit
        self.poll_interval = poll_interval
        self._chain_id = None

    @classmethod
    def connect(cls, rpc, account, gas_limit=None):
        return cls(Web3(Web3.HTTPProvider(rpc)), account, gas_limit=gas_limit)

    @property
    def address(self):
        return self.account.address

    @property
    def chain_id(self):
        if self._chain_id is None:
            self._chain_id = self.web3.eth.chain_id
        return self._chain_id

    def transaction_count(self):
        return self.web3.eth.get_transaction_count(self.address, "pending")

    def contract(self, address, abi):
        return self.web3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)

    def read(self, contract, fn_name, *args):
        return getattr(contract.functions, fn_name)(*checksummed(args)).call({"from": self.address})

    def encode(self, contract, fn_name, *args):
        return contract.encode_abi(fn_name, args=checksummed(list(args)))

    def encode_constructor(self, abi, bytecode, *args):
        return self.web3.eth.contract(abi=abi, bytecode=bytecode).constructor(*checksummed(args)).data_in_transaction

    def simulate(self, target, data, value=0, output_types=None):
        """
        Read-only call from the deployer, used to predict return values
        (e.g. an address a call is about to create) before submitting it.
        """
        raw = self.web3.eth.call({
            "from": self.address,
            "to": Web3.to_checksum_address(target),
            "data": data,
            "value": value,
        })
        if output_types is None:
            return raw
        values = decode(output_types, raw)
        return values[0] if len(values) == 1 else values

    def send(self, pending):
        tx = {
            "chainId": self.chain_id,
            "from": self.address,
            "data": pending.data,
            "value": pending.value,
            "nonce": pending.nonce,
        }
        if pending.target:
            tx["to"] = Web3.to_checksum_address(pending.target)
        tx["gas"] = self.gas_limit or self.web3.eth.estimate_gas(tx)
        tx["gasPrice"] = self.web3.eth.gas_price

        signed = self.account.sign_transaction(tx)
        return self.web3.eth.send_raw_transaction(signed.raw_transaction)

    def wait_for_receipt(self, tx_hash, confirmations=1):
        # no timeout: a transaction that never lands blocks here
        while True:
            try:
                receipt = self.web3.eth.get_transaction_receipt(tx_hash)
                break
            except TransactionNotFound:
                time.sleep(self.poll_interval)

        while self.web3.eth.block_number - receipt["blockNumber"] + 1 < confirmations:
            time.sleep(self.poll_interval)

        return receipt
