import pytest

from constants import BANK_PROXY, MONEY_MARKET, MANAGER_PROXY, PROXY_ADMIN
from scripts.utils.batch import TransactionFailed
from scripts.utils.config_store import ConfigStore, MissingRoleAddress
from scripts.utils.operation import Operation


def test_call_is_labelled(operation, fake_client):
    manager = operation.contract(MANAGER_PROXY, [])

    call = operation.call(manager, "setCapacity", "0x01", 5, value=3)

    assert call.target == fake_client.contract(MANAGER_PROXY, []).address
    assert call.label == "setCapacity"
    assert call.value == 3


def test_execute_waits_on_its_own_receipt(operation, fake_client):
    manager = operation.contract(MANAGER_PROXY, [])

    receipt = operation.execute(operation.call(manager, "setCapacity", "0x01", 5))

    assert receipt["status"] == 1
    assert fake_client.events == [("send", 10), ("wait", 10, 1)]


def test_execute_raises_on_revert(operation, fake_client):
    fake_client.reverting.add("setCapacity")
    manager = operation.contract(MANAGER_PROXY, [])

    with pytest.raises(TransactionFailed):
        operation.execute(operation.call(manager, "setCapacity", "0x01", 5))


def test_deploy_uses_artifact(operation, fake_client):
    address = operation.deploy("ProxyAdmin")

    assert address == fake_client.receipts[next(iter(fake_client.receipts))]["contractAddress"]
    creation = fake_client.sent[0]
    assert creation.target is None
    assert creation.data.startswith("0xProxyAdmin")


def test_deploy_missing_artifact(operation):
    with pytest.raises(FileNotFoundError):
        operation.deploy("Nope")


def test_deploy_proxy(operation, fake_client):
    proxy, implementation = operation.deploy_proxy("Bank", MONEY_MARKET, MANAGER_PROXY)

    assert proxy != implementation
    assert len(fake_client.sent) == 2
    proxy_creation = fake_client.sent[1]
    assert proxy_creation.data.startswith("0xTransparentUpgradeableProxy")
    assert implementation in proxy_creation.data
    assert PROXY_ADMIN in proxy_creation.data
    assert "initialize" in proxy_creation.data


def test_deploy_proxy_needs_proxy_admin(write_config, fake_client, artifacts_dir):
    store = ConfigStore.load(write_config({}))
    operation = Operation(store, fake_client, artifacts_dir=artifacts_dir)

    with pytest.raises(MissingRoleAddress):
        operation.deploy_proxy("Bank", MONEY_MARKET, MANAGER_PROXY)
    assert fake_client.sent == []


def test_upgrade_proxy(operation, fake_client):
    implementation = operation.upgrade_proxy(BANK_PROXY, "Bank")

    assert [op.label for op in fake_client.sent] == ["deploy Bank", "upgrade"]
    upgrade = fake_client.sent[1]
    assert upgrade.target.lower() == PROXY_ADMIN
    assert implementation in upgrade.data


def test_check_batch_returns_reverted(operation, fake_client):
    manager = operation.contract(MANAGER_PROXY, [])
    fake_client.reverting.add("setMaxLeverage")

    handles, _ = operation.submit_batch([
        operation.call(manager, "setCapacity", "0x01", 5),
        operation.call(manager, "setMaxLeverage", "0x01", 8),
    ])
    reverted = operation.check_batch(handles)

    assert [receipt["nonce"] for receipt in reverted] == [11]


def test_upgrade_proxy_to_existing_implementation(operation, fake_client):
    implementation = "0x00000000000000000000000000000000000000c1"

    assert operation.upgrade_proxy(BANK_PROXY, "Bank", implementation=implementation) == implementation

    assert [op.label for op in fake_client.sent] == ["upgrade"]
    assert implementation in fake_client.sent[0].data


def test_explicit_zero_confirmations(operation, fake_client):
    manager = operation.contract(MANAGER_PROXY, [])

    operation.execute(operation.call(manager, "setCapacity", "0x01", 5), confirmations=0)
    operation.submit_batch([operation.call(manager, "setCapacity", "0x01", 6)], confirmations=0)

    assert [event for event in fake_client.events if event[0] == "wait"] == [("wait", 10, 0), ("wait", 11, 0)]
