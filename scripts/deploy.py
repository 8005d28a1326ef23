import click

from config.BluePrint import CHAINS, DEFAULT_ARTIFACTS_DIR
from scripts.utils import log
from scripts.utils.deploy_args import DeployArgs
from scripts.utils.deploy_helpers import get_account, get_rpc
from scripts.utils.operation import Operation
from scripts.utils.operation_runner import OperationRunner, DEPLOY_SCRIPTS_DIR


CLICK_PROMPTS = {
    "tags": {
        "prompt": "Which deploy script tags should run (comma separated)?",
        "default": "",
        "help": "Tags of the deploy scripts to run, e.g. `SetCapacity` or `BankDeploy,BankUpgrade`.",
    },
    "chain": {
        "prompt": "Chain name",
        "default": "local",
        "help": "Chain to run against. Defaults to `local`.",
        "type": click.Choice(CHAINS, case_sensitive=False),
    },
    "rpc": {
        "prompt": "What is the desired rpc?",
        "default": "",
        "help": "RPC url. Defaults to `<CHAIN>_RPC_URL` or the chain's configured url.",
    },
    "config": {
        "prompt": "Configuration file",
        "default": "",
        "help": "Deployment configuration file. Defaults to the chain's configured file.",
    },
    "account": {
        "prompt": "Deployer account name",
        "default": "DEPLOYER",
        "help": "Account name for deployment, read from `<ACCOUNT>_PRIVATE_KEY`. Defaults to `DEPLOYER`",
    },
}


def param_prompt(ctx, param, value):
    param_config = CLICK_PROMPTS.get(param.name)
    if param_config is None:
        return value

    default_val = param_config.get("default")

    if value != default_val:
        return value

    # empty tags can't run anything, always ask
    if ctx.params.get("silent") and param.name != "tags":
        return value

    return click.prompt(
        f"{param_config['prompt']} --{param.name.replace('_', '-')}",
        default=default_val,
        type=param_config.get("type"),
        show_default=bool(default_val),
    )


@click.command()
@click.option("--silent", is_flag=True, default=False, is_eager=True, help="Run command without prompts.")
@click.option(
    "--tags", "-t",
    default=CLICK_PROMPTS["tags"]["default"],
    help=CLICK_PROMPTS["tags"]["help"],
    callback=param_prompt,
)
@click.option(
    "--chain", "-c",
    default=CLICK_PROMPTS["chain"]["default"],
    type=CLICK_PROMPTS["chain"]["type"],
    help=CLICK_PROMPTS["chain"]["help"],
    callback=param_prompt,
)
@click.option(
    "--rpc",
    default=CLICK_PROMPTS["rpc"]["default"],
    help=CLICK_PROMPTS["rpc"]["help"],
    callback=param_prompt,
)
@click.option(
    "--config",
    default=CLICK_PROMPTS["config"]["default"],
    help=CLICK_PROMPTS["config"]["help"],
    callback=param_prompt,
)
@click.option(
    "--account", "-a",
    default=CLICK_PROMPTS["account"]["default"],
    help=CLICK_PROMPTS["account"]["help"],
    callback=param_prompt,
)
@click.option("--artifacts", default=DEFAULT_ARTIFACTS_DIR, help="Directory holding contract build artifacts.")
@click.option("--scripts-dir", default=DEPLOY_SCRIPTS_DIR, help="Directory holding the deploy scripts.")
@click.option("--fork", is_flag=True, default=False, help="Declare that the scripts run against a fork.")
def cli(silent, tags, chain, rpc, config, account, artifacts, scripts_dir, fork):
    """
    Runs deploy scripts selected by tag.

    Deploy scripts live in `./deploy`. Each one declares `TAGS` and a
    `run(operation)` function and takes its parameters from constants at
    the top of the file: edit the script, then run it.

    Addresses produced by a script are written to the deployment
    configuration file (`.mainnet.json` by default) as soon as the
    transaction that produced them succeeds.
    """
    tag_list = [tag.strip() for tag in tags.split(",") if tag.strip()]
    if not tag_list:
        raise click.UsageError("At least one tag is required.")

    final_rpc = get_rpc(chain, rpc)
    sender = get_account(account, chain)

    deploy_args = DeployArgs(
        sender, chain, final_rpc, config_file=config or None, artifacts_dir=artifacts, fork=fork)

    log.h1("Automated Vault Deployment")
    log.info(f"Connected to rpc `{final_rpc}`.")
    log.info(f"Deployer account `{sender.address}`.")
    log.info(f"Configuration file `{deploy_args.config_file}`.")
    log.info(f"Deployment arguments: {deploy_args}")
    log.info(f"Tags: {', '.join(tag_list)}.")
    log.info(f"Fork: {fork}.")

    operation = Operation.connect(deploy_args)
    ran = OperationRunner(scripts_dir).run(operation, tag_list)

    log.info(f"Ran {len(ran)} deploy script(s).")
    log.done("All Done")


if __name__ == "__main__":
    cli()
