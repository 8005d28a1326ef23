from scripts.utils.operation import Operation

TAGS = ["BankUpgrade"]


def run(operation: Operation):
    config = operation.config
    bank = config.require("automatedVault.bank.proxy")

    implementation = operation.upgrade_proxy(bank, "Bank")
    operation.log.done()

    config.set_bank(bank, implementation)
