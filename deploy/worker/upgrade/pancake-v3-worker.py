from scripts.utils.operation import Operation

TAGS = ["PancakeV3WorkerUpgrade"]

# Check all variables below before running
WORKERS = [
    "0x463039266657602f60fc70De00553772f3cf4392",
    "0x884Aa0332800dB0a15527682b8FE26C2444E4200",
    "0x831849c40B651F6E8C11108CF648f34a9C3add7A",
    "0xC5978748e0812744F9E7ef9aEB30548C7cE7ED6f",
    "0x69a86538419eA54E13b85235c19752FD6122BC85",
]


def run(operation: Operation):
    # every worker proxy shares one implementation
    implementation = operation.deploy("PancakeV3Worker")
    operation.log.info(f">> New implementation deployed at: {implementation}")

    for worker in WORKERS:
        operation.upgrade_proxy(worker, "PancakeV3Worker", implementation=implementation)
        operation.log.info(f">> Done upgrade : {worker}")
