import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import new_test_config
from .errors import E2EError, YAMLValidationError
from .services.apply_output import is_kubectl_apply_success
from .services.command_runner import CommandRunner
from .services.kubectl import KubectlService
from .services.yaml_validation import YamlValidationService

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)

console = Console()
logger = logging.getLogger("aro_capz_e2e")


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
def main(verbose, log_file):
    """Helpers for the ARO HCP Cluster API end-to-end suite."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)


@main.command("show-config")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the configuration as JSON")
def show_config(as_json):
    """Print the configuration resolved from the environment."""
    values = new_test_config().as_dict()

    if as_json:
        click.echo(json.dumps(values, indent=2, sort_keys=True))
        return

    table = Table(title="ARO CAPZ test configuration")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(key, value)
    console.print(table)


@main.command("validate-yaml")
@click.argument("paths", nargs=-1, required=True, type=click.Path())
def validate_yaml(paths):
    """Check that each file is non-empty, valid YAML with data."""
    service = YamlValidationService(logger=logger)
    failures = 0

    for path in paths:
        try:
            service.validate(path)
        except YAMLValidationError as exc:
            failures += 1
            console.print(f"[red]FAIL[/red] {path}: {exc}", highlight=False)
            continue
        console.print(f"[green]OK[/green] {path}", highlight=False)

    if failures:
        raise SystemExit(1)


@main.command("check-apply")
@click.argument("output_file", required=False, type=click.File("r"))
def check_apply(output_file):
    """Classify captured kubectl apply output read from OUTPUT_FILE or stdin."""
    stream = output_file or sys.stdin
    output = stream.read()

    if is_kubectl_apply_success(output):
        console.print("[green]kubectl apply succeeded[/green]")
        return

    console.print("[red]kubectl apply did not succeed[/red]")
    raise SystemExit(1)


@main.command("apply")
@click.argument("manifest", type=click.Path())
@click.option("--namespace", required=False, help="Namespace passed to kubectl")
@click.option("--kubectl", "kubectl_bin", default="kubectl", show_default=True, help="kubectl binary")
@click.option("--kubeconfig", required=False, type=click.Path(), help="Path to a kubeconfig file")
@click.option("--context", required=False, help="kubeconfig context to use")
def apply(manifest, namespace, kubectl_bin, kubeconfig, context):
    """Validate MANIFEST and apply it with kubectl."""
    service = KubectlService(
        command_runner=CommandRunner(logger=logger),
        logger=logger,
        kubectl_bin=kubectl_bin,
        kubeconfig=kubeconfig,
        context=context,
    )

    try:
        output = service.apply(manifest, namespace=namespace)
    except E2EError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(output)


if __name__ == "__main__":
    main()
