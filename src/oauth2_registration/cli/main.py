# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""oauth2-registration CLI — inspect how configuration resolves."""

from __future__ import annotations

from pathlib import Path

import click
import yaml  # type: ignore[import-untyped]
from rich.markup import escape
from rich.table import Table

from oauth2_registration.cli.console import console, print_registrations
from oauth2_registration.client.auto_configuration import client_registration_repository
from oauth2_registration.client.provider import COMMON_PROVIDERS
from oauth2_registration.core.config import Config
from oauth2_registration.kernel.exceptions import ConfigurationException
from oauth2_registration.logging import configure_logging


@click.group()
@click.version_option(package_name="oauth2-registration")
def cli() -> None:
    """OAuth2 client registration tooling."""


@cli.command("check")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--profile", "-p", "profiles", multiple=True, help="Profile overlay to merge (repeatable).")
@click.option("--verbose", "-v", is_flag=True, help="Log how each registration is resolved.")
def check_command(config_file: Path, profiles: tuple[str, ...], verbose: bool) -> None:
    """Resolve the registrations declared in CONFIG_FILE and print them."""
    try:
        config = Config.from_file(config_file, active_profiles=list(profiles))
    except (OSError, ValueError, yaml.YAMLError) as exc:
        console.print(f"[error]Cannot load {config_file}:[/error] {escape(str(exc))}")
        raise SystemExit(1) from exc

    logging_port = configure_logging(config)
    if verbose:
        logging_port.set_level("oauth2_registration", "DEBUG")

    try:
        repository = client_registration_repository(config)
    except (ConfigurationException, ValueError) as exc:
        console.print(f"[error]Invalid OAuth2 client configuration:[/error] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if repository is None:
        console.print("[warning]No OAuth2 client registrations configured.[/warning]")
        return

    print_registrations(repository.registrations)
    console.print(f"[success]{len(repository)} registration(s) resolved.[/success]")


@cli.command("providers")
def providers_command() -> None:
    """List the built-in providers and their defaults."""
    table = Table(title="Built-in Providers", border_style="dim")
    table.add_column("Provider ID", style="info", no_wrap=True)
    table.add_column("Client Name")
    table.add_column("Scope")
    table.add_column("Authorization URI", style="dim")

    for provider_id, defaults in COMMON_PROVIDERS.items():
        table.add_row(
            provider_id,
            defaults.client_name or "-",
            " ".join(defaults.scope or ()),
            defaults.authorization_uri or "[dim]configure per tenant[/dim]",
        )

    console.print(table)
