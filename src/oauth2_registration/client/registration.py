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
"""OAuth2 Client Registration — resolved registration model and repository."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from oauth2_registration.kernel.exceptions import InvalidClientRegistrationException


class ClientAuthenticationMethod(Enum):
    """How the client authenticates against the provider's token endpoint."""

    BASIC = "basic"
    POST = "post"
    NONE = "none"

    @classmethod
    def _missing_(cls, value: object) -> ClientAuthenticationMethod | None:
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        for member in cls:
            if normalized in (member.value, f"client_secret_{member.value}"):
                return member
        return None


class AuthorizationGrantType(Enum):
    """OAuth2 authorization flow variant."""

    AUTHORIZATION_CODE = "authorization_code"
    IMPLICIT = "implicit"
    CLIENT_CREDENTIALS = "client_credentials"
    PASSWORD = "password"
    REFRESH_TOKEN = "refresh_token"

    @classmethod
    def _missing_(cls, value: object) -> AuthorizationGrantType | None:
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        return None


@dataclass(frozen=True)
class UserInfoEndpoint:
    """Provider endpoint returning the authenticated end-user's claims."""

    uri: str | None = None
    user_name_attribute: str | None = None


@dataclass(frozen=True)
class ProviderDetails:
    """Endpoints of the authorization server a registration talks to."""

    authorization_uri: str
    token_uri: str
    user_info_endpoint: UserInfoEndpoint = field(default_factory=UserInfoEndpoint)
    jwk_set_uri: str | None = None
    issuer_uri: str | None = None


@dataclass(frozen=True)
class ClientRegistration:
    """A fully resolved OAuth2 client registration.

    Instances are only ever complete: construction fails with
    :class:`InvalidClientRegistrationException` when the authorization URI,
    token URI or client authentication method is missing.
    """

    registration_id: str
    provider_details: ProviderDetails
    client_authentication_method: ClientAuthenticationMethod
    client_id: str | None = None
    client_secret: str | None = None
    authorization_grant_type: AuthorizationGrantType | None = None
    redirect_uri: str | None = None
    scope: tuple[str, ...] = ()
    client_name: str | None = None

    def __post_init__(self) -> None:
        if not self.provider_details.authorization_uri:
            raise InvalidClientRegistrationException(
                f"Authorization URI must not be empty for registration '{self.registration_id}'",
                self.registration_id,
            )
        if not self.provider_details.token_uri:
            raise InvalidClientRegistrationException(
                f"Token URI must not be empty for registration '{self.registration_id}'",
                self.registration_id,
            )
        if self.client_authentication_method is None:
            raise InvalidClientRegistrationException(
                f"Client authentication method must not be empty for registration '{self.registration_id}'",
                self.registration_id,
            )


# ---------------------------------------------------------------------------
# Repository port and in-memory adapter
# ---------------------------------------------------------------------------


class ClientRegistrationRepository(Protocol):
    """Port for retrieving OAuth2 client registrations."""

    def find_by_registration_id(self, registration_id: str) -> ClientRegistration | None: ...


class InMemoryClientRegistrationRepository:
    """In-memory client registration repository.

    Stores registrations in a dict keyed by registration_id.
    """

    def __init__(self, *registrations: ClientRegistration) -> None:
        if not registrations:
            raise ValueError("At least one client registration is required")
        self._registrations: dict[str, ClientRegistration] = {
            r.registration_id: r for r in registrations
        }

    def find_by_registration_id(self, registration_id: str) -> ClientRegistration | None:
        return self._registrations.get(registration_id)

    def add(self, registration: ClientRegistration) -> None:
        self._registrations[registration.registration_id] = registration

    @property
    def registrations(self) -> list[ClientRegistration]:
        return list(self._registrations.values())

    def __iter__(self) -> Iterator[ClientRegistration]:
        return iter(list(self._registrations.values()))

    def __len__(self) -> int:
        return len(self._registrations)
