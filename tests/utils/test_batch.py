import dataclasses

import pytest

from constants import VAULT_TOKEN_A, VAULT_TOKEN_B, VAULT_TOKEN_C
from scripts.utils.batch import (
    BatchSubmitter,
    CallSpec,
    NonceAllocator,
    TransactionFailed,
    check,
    failed,
    tx_hex,
)


def calls(count, label="setCapacity"):
    return [CallSpec(f"0x{i + 1:040x}", f"0x{i:08x}", 0, label) for i in range(count)]


###################
# Nonce Allocator #
###################


@pytest.mark.parametrize("base, count", [(0, 1), (10, 3), (7, 25)])
def test_nonces_are_contiguous(base, count):
    nonces = NonceAllocator("0xsigner", base, count).nonces()
    assert nonces == list(range(base, base + count))
    assert len(set(nonces)) == count


def test_assign_keeps_input_order():
    pending = NonceAllocator("0xsigner", 10, 3).assign(calls(3))

    assert [op.nonce for op in pending] == [10, 11, 12]
    assert [op.data for op in pending] == ["0x00000000", "0x00000001", "0x00000002"]


def test_assign_wrong_count():
    with pytest.raises(ValueError):
        NonceAllocator("0xsigner", 10, 2).assign(calls(3))

    with pytest.raises(ValueError):
        NonceAllocator("0xsigner", 10, 3).assign(calls(2))


def test_allocator_is_immutable():
    allocator = NonceAllocator("0xsigner", 10, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        allocator.base = 11


#############
# Submitter #
#############


def test_prepare_batch_reads_count_once(fake_client):
    submitter = BatchSubmitter(fake_client)

    pending = submitter.prepare_batch(calls(4))

    assert [op.nonce for op in pending] == [10, 11, 12, 13]
    assert fake_client.sent == []


def test_dispatch_returns_handles_in_input_order(fake_client):
    submitter = BatchSubmitter(fake_client, max_workers=4)

    handles = submitter.dispatch(submitter.prepare_batch(calls(6)))

    assert [handle.nonce for handle in handles] == list(range(10, 16))
    assert sorted(op.nonce for op in fake_client.sent) == list(range(10, 16))
    assert fake_client.nonce == 16


def test_dispatch_nothing(fake_client):
    assert BatchSubmitter(fake_client).dispatch([]) == []


def test_next_batch_continues_after_previous(fake_client):
    submitter = BatchSubmitter(fake_client)
    submitter.dispatch(submitter.prepare_batch(calls(2)))

    pending = submitter.prepare_batch(calls(2))

    assert [op.nonce for op in pending] == [12, 13]


def test_submit_batch_waits_on_last_only(operation, fake_client):
    manager = fake_client.contract(operation.config.require("automatedVault.automatedVaultManager.proxy"), [])
    batch = [
        operation.call(manager, "setCapacity", token, 1_000)
        for token in (VAULT_TOKEN_A, VAULT_TOKEN_B, VAULT_TOKEN_C)
    ]

    handles, receipt = operation.submit_batch(batch)

    assert [handle.nonce for handle in handles] == [10, 11, 12]
    sends = [event for event in fake_client.events if event[0] == "send"]
    waits = [event for event in fake_client.events if event[0] == "wait"]
    assert {event[1] for event in sends} == {10, 11, 12}
    assert waits == [("wait", 12, 3)]
    assert fake_client.events.index(waits[0]) == 3
    assert receipt["nonce"] == 12


############
# Receipts #
############


def test_check_raises_on_revert(fake_client):
    fake_client.reverting.add("setCapacity")
    submitter = BatchSubmitter(fake_client)
    handles = submitter.dispatch(submitter.prepare_batch(calls(1)))
    receipt = submitter.await_confirmation(handles)[0]

    with pytest.raises(TransactionFailed) as exc:
        check(receipt, "setCapacity")
    assert exc.value.receipt is receipt
    assert tx_hex(receipt) in str(exc.value)
    assert "setCapacity" in str(exc.value)


def test_failed_keeps_later_nonces(fake_client):
    submitter = BatchSubmitter(fake_client)
    batch = calls(1, "setCapacity") + calls(1, "setMaxLeverage") + calls(1, "setCapacity")
    fake_client.reverting.add("setMaxLeverage")

    handles = submitter.dispatch(submitter.prepare_batch(batch))
    receipts = submitter.await_confirmation(handles)

    assert [receipt["nonce"] for receipt in failed(receipts)] == [11]
    # not atomic, the call after the revert still went through
    assert receipts[2]["status"] == 1


def test_tx_hex():
    assert tx_hex({"transactionHash": b"\x01\x02"}) == "0x0102"
    assert tx_hex({"transactionHash": "0xabc"}) == "0xabc"
