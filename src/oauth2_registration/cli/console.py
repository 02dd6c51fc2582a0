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
"""Shared Rich console for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from oauth2_registration.client.registration import ClientRegistration

CLI_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "dim": "dim",
})

console = Console(theme=CLI_THEME)


def _enum_value(member: object) -> str:
    return getattr(member, "value", "") or "-"


def print_registrations(registrations: list[ClientRegistration]) -> None:
    """Print resolved client registrations as a Rich table."""
    table = Table(title="OAuth2 Client Registrations", border_style="dim", show_lines=True)
    table.add_column("Registration", style="info", no_wrap=True)
    table.add_column("Client", no_wrap=True)
    table.add_column("Auth Method")
    table.add_column("Grant Type")
    table.add_column("Scope")
    table.add_column("Authorization URI", style="dim")

    for registration in registrations:
        table.add_row(
            registration.registration_id,
            registration.client_name or "-",
            _enum_value(registration.client_authentication_method),
            _enum_value(registration.authorization_grant_type),
            " ".join(registration.scope) or "-",
            registration.provider_details.authorization_uri,
        )

    console.print(table)
