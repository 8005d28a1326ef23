from scripts.utils.operation import Operation

TAGS = ["ProxyAdminDeploy"]


def run(operation: Operation):
    proxy_admin = operation.deploy("ProxyAdmin")
    operation.log.success(f"ProxyAdmin deployed at: {proxy_admin}")

    operation.config.set_proxy_admin(proxy_admin)
