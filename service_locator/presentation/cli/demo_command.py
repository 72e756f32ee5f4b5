"""
Demo command for the registry.

This module provides a small CLI that walks through the registry's
lifecycle: register with a dispose callback, resolve with params,
remove, then check the registration.
"""

import os
from abc import ABC, abstractmethod
from typing import List, Optional

import click
from rich.console import Console
from rich.text import Text

from ...core.entities.registration_entity import RegistrationParams
from ...infrastructure.config.config_manager import ConfigManager
from ...shared.di.registry_config import configure_registry


class Greeter(ABC):
    """Contract registered in the demo."""

    @abstractmethod
    def greet(self) -> str:
        pass

    @abstractmethod
    def dispose(self) -> None:
        pass


class ParamGreeter(Greeter):
    """Greeter built from a runtime param."""

    def __init__(self, param: str, events: List[str]):
        self.param = param
        self._events = events
        self._events.append("Created a new instance of ParamGreeter.")

    def greet(self) -> str:
        return f"Hello from {self.param}"

    def dispose(self) -> None:
        self._events.append("Object disposed.")


def run_demo(param: Optional[str], debug: bool, config_dir: Optional[str], console: Console) -> bool:
    """
    Run the registry walkthrough.

    Args:
        param: Value passed to the builder as the ``param`` param
        debug: Whether to print the registry's debug log
        config_dir: Optional configuration directory
        console: Console the steps are printed to

    Returns:
        bool: Whether the type is still registered at the end
    """
    events: List[str] = []
    debug_log = (lambda line: console.print(Text.from_ansi(line))) if debug else None
    environ = {**os.environ, "REGISTRY_DEBUG_LOG": "true"} if debug else None

    console.print("[bold]1.[/bold] Init registry")
    registry = configure_registry(
        ConfigManager(config_dir, environ=environ),
        debug_log=debug_log
    )

    console.print("[bold]2.[/bold] Register object")
    registry.put(
        Greeter,
        lambda get, params: ParamGreeter(
            params.by_name("param", "No param") if params else "No param",
            events
        ),
        on_dispose=lambda instance: instance.dispose()
    )

    console.print("[bold]3.[/bold] Resolve object")
    params = RegistrationParams.named({"param": param}) if param is not None else None
    greeter = registry.get(Greeter, params)
    for event in events:
        console.print(f"   {event}")
    events.clear()

    console.print(f"[bold]4.[/bold] Check the param of the resolved object: {greeter.param}")
    console.print(f"   {greeter.greet()}")

    console.print("[bold]5.[/bold] Remove object")
    registry.remove(Greeter)
    for event in events:
        console.print(f"   {event}")

    registered = registry.is_registered(Greeter)
    console.print(f"[bold]6.[/bold] Check if still registered: {registered}")
    return registered


@click.command(name="service-locator-demo")
@click.option("--param", default="Param123", show_default=True, help="Value handed to the builder.")
@click.option("--debug/--no-debug", default=False, help="Print the registry debug log.")
@click.option(
    "--config-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory holding base.yaml and environment overrides."
)
def main(param: str, debug: bool, config_dir: Optional[str]) -> None:
    """Walk through the registry lifecycle."""
    console = Console()
    registered = run_demo(param, debug, config_dir, console)
    if registered:
        raise click.ClickException("Greeter is still registered after remove()")


if __name__ == "__main__":
    main()
