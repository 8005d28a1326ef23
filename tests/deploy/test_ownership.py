import pytest
from web3 import Web3

from constants import (
    BANK_PROXY,
    EXECUTOR_PROXY,
    MANAGER_PROXY,
    OP_MULTI_SIG,
    ORACLE_PROXY,
    PROXY_ADMIN,
    VAULT_TOKEN_B,
    VAULT_TOKEN_C,
    WORKER_A,
    WORKER_B,
    WORKER_C,
)
from scripts.utils.batch import TransactionFailed
from scripts.utils.config_store import ConfigStore, MissingRoleAddress
from scripts.utils.operation import Operation


class RecordingSafe:
    def __init__(self):
        self.proposals = []

    def propose_transaction(self, target, value, data):
        self.proposals.append((target, value, data))
        return f"0x{len(self.proposals):064x}"


@pytest.fixture
def three_vaults(store):
    store.upsert_vault({"name": "Vault B", "symbol": "VB", "vaultToken": VAULT_TOKEN_B, "worker": WORKER_B})
    store.upsert_vault({"name": "Vault C", "symbol": "VC", "vaultToken": VAULT_TOKEN_C, "worker": WORKER_C})
    return store


######################
# Proxy Admin Change #
######################


def test_transfer_proxy_admin(operation, fake_client, config_file, deploy_script, record_calls):
    script = deploy_script("proxy-admin/config/transfer-admin.py")
    set_proxy_admin = record_calls(operation.config, "set_proxy_admin")

    script.run(operation)

    changes = fake_client.sent_calls("changeProxyAdmin")
    assert len(changes) == 5
    assert all(op.target == Web3.to_checksum_address(PROXY_ADMIN) for op in changes)
    for contract in (BANK_PROXY, MANAGER_PROXY, ORACLE_PROXY, EXECUTOR_PROXY, WORKER_A):
        assert any(contract in op.data for op in changes)

    # one transaction at a time, each confirmed before the next
    assert fake_client.events[:10] == [
        event
        for nonce in range(10, 15)
        for event in (("send", nonce), ("wait", nonce, 1))
    ]

    # recorded once, after the loop
    assert set_proxy_admin == [(script.NEW_PROXY_ADMIN,)]
    assert fake_client.events[-1] == ("set_proxy_admin", script.NEW_PROXY_ADMIN)
    assert ConfigStore.load(config_file).get()["proxyAdmin"] == script.NEW_PROXY_ADMIN


def test_transfer_proxy_admin_stops_on_revert(operation, fake_client, config_file, deploy_script):
    script = deploy_script("proxy-admin/config/transfer-admin.py")
    fake_client.reverting.add("changeProxyAdmin")

    with pytest.raises(TransactionFailed):
        script.run(operation)

    assert len(fake_client.sent) == 1
    assert ConfigStore.load(config_file).get()["proxyAdmin"] == PROXY_ADMIN


######################
# Ownership Transfer #
######################


def test_transfer_ownership(operation, fake_client, config_file, deploy_script, three_vaults):
    with open(config_file) as file:
        before = file.read()

    deploy_script("config/transfer-ownership.py").run(operation)

    transfers = fake_client.sent_calls("transferOwnership")
    assert len(transfers) == 8
    assert all(repr(OP_MULTI_SIG) in op.data for op in transfers)
    assert [event[0] for event in fake_client.events] == ["send", "wait"] * 8
    with open(config_file) as file:
        assert file.read() == before


def test_transfer_ownership_needs_every_role(operation, fake_client, deploy_script):
    # only one vault recorded
    with pytest.raises(MissingRoleAddress) as exc:
        deploy_script("config/transfer-ownership.py").run(operation)

    assert exc.value.path == "automatedVault.vaults.1.worker"
    assert fake_client.sent == []


def test_accept_ownership_proposes_to_safe(store, fake_client, artifacts_dir, deploy_script, three_vaults):
    safe = RecordingSafe()
    operation = Operation(store, fake_client, artifacts_dir=artifacts_dir, safe=safe)

    deploy_script("config/accept-ownership.py").run(operation)

    assert [target for target, _, _ in safe.proposals] == [
        MANAGER_PROXY,
        EXECUTOR_PROXY,
        ORACLE_PROXY,
        BANK_PROXY,
        WORKER_A,
        WORKER_B,
        WORKER_C,
    ]
    assert {(value, data) for _, value, data in safe.proposals} == {(0, "0x79ba5097")}
    # nothing is sent from the deployer
    assert fake_client.sent == []
