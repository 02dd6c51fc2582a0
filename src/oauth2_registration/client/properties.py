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
"""OAuth2 client configuration properties (``security.oauth2.client.*``).

Example::

    security:
      oauth2:
        client:
          provider:
            corporate:
              authorization-uri: https://sso.example.com/auth
              token-uri: https://sso.example.com/token
          registration:
            login:
              provider: google
              client-id: ${GOOGLE_CLIENT_ID}
              client-secret: ${GOOGLE_CLIENT_SECRET}
            intranet:
              provider: corporate
              client-id: intranet
              client-authentication-method: post
              authorization-grant-type: authorization_code
              scope: openid,profile
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from oauth2_registration.client.registration import (
    AuthorizationGrantType,
    ClientAuthenticationMethod,
)
from oauth2_registration.core.config import config_properties
from oauth2_registration.kernel.exceptions import InvalidClientRegistrationException

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "client_authentication_method": ClientAuthenticationMethod,
    "authorization_grant_type": AuthorizationGrantType,
}


def _kebab(name: str) -> str:
    return name.replace("_", "-")


class _PropertiesModel(BaseModel):
    # Numeric YAML scalars (Facebook app ids) still bind to str fields.
    model_config = ConfigDict(alias_generator=_kebab, populate_by_name=True, coerce_numbers_to_str=True)


class Provider(_PropertiesModel):
    """Endpoints of a provider declared in configuration.

    Unset fields stay unset: a declared provider is never completed from the
    built-in catalog, even when its id matches a catalog entry.
    """

    authorization_uri: str | None = None
    token_uri: str | None = None
    user_info_uri: str | None = None
    user_name_attribute: str | None = None
    jwk_set_uri: str | None = None
    issuer_uri: str | None = None


class Registration(_PropertiesModel):
    """A named client registration; unset fields fall back to catalog defaults."""

    provider: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_authentication_method: ClientAuthenticationMethod | None = None
    authorization_grant_type: AuthorizationGrantType | None = None
    redirect_uri: str | None = None
    scope: list[str] | None = None
    client_name: str | None = None

    @field_validator("client_authentication_method", "authorization_grant_type", mode="before")
    @classmethod
    def _coerce_enum(cls, value: Any, info: ValidationInfo) -> Any:
        # Accepts aliases such as "POST", "client_secret_post" or "authorization-code".
        if isinstance(value, str):
            enum_type = _ENUM_FIELDS[str(info.field_name)]
            try:
                return enum_type(value)
            except ValueError:
                return value
        return value

    @field_validator("scope", mode="before")
    @classmethod
    def _split_scope(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [s.strip() for s in value.split(",") if s.strip()]
        if isinstance(value, (list, tuple, set, frozenset)):
            return list(dict.fromkeys(value))
        return value


@config_properties(prefix="security.oauth2.client")
class OAuth2ClientProperties(_PropertiesModel):
    """Declared providers and the registrations to build from them."""

    provider: dict[str, Provider] = Field(default_factory=dict)
    registration: dict[str, Registration] = Field(default_factory=dict)

    def validate_registrations(self) -> None:
        """Reject registrations without a client id."""
        for registration_id, registration in self.registration.items():
            if not (registration.client_id or "").strip():
                raise InvalidClientRegistrationException(
                    "Client id must not be empty.", registration_id
                )
