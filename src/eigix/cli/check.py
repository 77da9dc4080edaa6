"""``eigix check``: run the built-in container self-checks."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from eigix.selfcheck import CheckRegistry, CheckResult, default_registry


def register_arguments(parser):
    parser.add_argument(
        "--name",
        action="append",
        dest="names",
        metavar="NAME",
        help="Only run the named check (repeatable)",
    )


def _select(registry: CheckRegistry, names: list[str] | None) -> CheckRegistry:
    if not names:
        return registry
    known = {check.name: check for check in registry.checks}
    missing = [name for name in names if name not in known]
    if missing:
        raise SystemExit(f"Unknown check(s): {', '.join(missing)}")
    selected = CheckRegistry()
    for check in registry.checks:
        if check.name in names:
            selected.register(check.name, check.function)
    return selected


def render_results(results: list[CheckResult], console: Console | None = None) -> None:
    """Pretty-print check results using ``rich``."""

    if console is None:
        console = Console()

    table = Table(title="eigix self-checks")
    table.add_column("Status", justify="center")
    table.add_column("Check", style="bold cyan")
    table.add_column("Detail", style="bright_black")

    for result in results:
        status = "[green]\\[PASS][/green]" if result.passed else "[red]\\[FAIL][/red]"
        table.add_row(status, result.name, result.error or "")

    console.print(table)


def dispatch(args, registry: CheckRegistry | None = None, console: Console | None = None):
    if registry is None:
        registry = default_registry()
    registry = _select(registry, getattr(args, "names", None))
    results = registry.run()
    render_results(results, console=console)
    if not all(result.passed for result in results):
        raise SystemExit(1)
