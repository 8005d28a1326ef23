from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from web3 import Web3


class CallSpec(NamedTuple):
    """A state-changing call, not yet bound to a nonce."""

    #: Contract address, or `None` for a contract creation
    target: Optional[str]

    #: ABI encoded call data (or init code for a creation)
    data: str

    value: int = 0

    #: Shown in console output only
    label: str = ""


class PendingOperation(NamedTuple):
    """A call bound to the nonce it will be signed with."""

    target: Optional[str]
    data: str
    nonce: int
    value: int = 0
    label: str = ""


class TransactionHandle(NamedTuple):
    tx_hash: bytes
    nonce: int
    label: str = ""


class TransactionFailed(Exception):
    """
    A transaction was included but reverted (receipt status 0).
    """

    def __init__(self, receipt, label=""):
        self.receipt = receipt
        self.label = label
        name = f" {label}" if label else ""
        super().__init__(f"Transaction{name} reverted: {tx_hex(receipt)}")


@dataclass(frozen=True)
class NonceAllocator:
    """
    The nonce range reserved for one batch.

    Built once from the signer's transaction count and consumed by
    :py:meth:`assign`; nonces are `base, base + 1, ..., base + count - 1`.
    Any transaction the signer sends from elsewhere before the batch is
    dispatched desyncs the range, and nothing here detects that.
    """

    signer: str
    base: int
    count: int

    def nonces(self):
        return list(range(self.base, self.base + self.count))

    def assign(self, calls) -> List[PendingOperation]:
        if len(calls) != self.count:
            raise ValueError(f"Allocated {self.count} nonces for {len(calls)} calls")
        return [
            PendingOperation(call.target, call.data, nonce, call.value, call.label)
            for call, nonce in zip(calls, self.nonces())
        ]


def tx_hex(receipt):
    tx_hash = receipt.get("transactionHash")
    return Web3.to_hex(tx_hash) if isinstance(tx_hash, bytes) else tx_hash


def succeeded(receipt):
    return receipt["status"] == 1


def failed(receipts):
    return [receipt for receipt in receipts if not succeeded(receipt)]


def check(receipt, label=""):
    if not succeeded(receipt):
        raise TransactionFailed(receipt, label)
    return receipt


class BatchSubmitter:
    """
    Submits independent calls from one signer without waiting for each
    other. Chain ordering comes from the pre-assigned nonces, not from the
    order submissions reach the node.

    This is not an atomic bundle: a reverted call still consumes its
    nonce and later calls still execute. Check every receipt with
    :py:func:`failed` when it matters.
    """

    def __init__(self, client, max_workers=8):
        self.client = client
        self.max_workers = max_workers

    def allocate(self, count) -> NonceAllocator:
        return NonceAllocator(self.client.address, self.client.transaction_count(), count)

    def prepare_batch(self, calls) -> List[PendingOperation]:
        return self.allocate(len(calls)).assign(calls)

    def dispatch(self, pending_ops) -> List[TransactionHandle]:
        if not pending_ops:
            return []
        workers = min(self.max_workers, len(pending_ops))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            tx_hashes = list(executor.map(self.client.send, pending_ops))
        return [
            TransactionHandle(tx_hash, op.nonce, op.label)
            for tx_hash, op in zip(tx_hashes, pending_ops)
        ]

    def await_confirmation(self, handles, min_confirmations=1):
        return [self.client.wait_for_receipt(handle.tx_hash, min_confirmations) for handle in handles]

    def await_last(self, handles, confirmations):
        """
        Waits on the highest nonce only. Earlier nonces must be included
        before it, so its confirmation covers the whole batch.
        """
        return self.await_confirmation(handles[-1:], confirmations)[0]
