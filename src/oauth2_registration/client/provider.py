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
"""Built-in provider catalog — defaults for well-known OAuth2 providers.

A registration whose provider id matches one of these entries (and that is
not shadowed by an explicitly configured provider) inherits the endpoints and
any registration field it leaves unset.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from oauth2_registration.client.registration import (
    AuthorizationGrantType,
    ClientAuthenticationMethod,
)

DEFAULT_REDIRECT_URL = "{scheme}://{serverName}:{serverPort}{contextPath}/oauth2/authorize/code/{clientAlias}"


@dataclass(frozen=True)
class ProviderDefaults:
    """Endpoint and registration defaults a registration can be resolved against.

    Catalog entries carry both halves. A provider declared in configuration
    only ever fills the endpoint half.
    """

    authorization_uri: str | None = None
    token_uri: str | None = None
    user_info_uri: str | None = None
    user_name_attribute: str | None = None
    jwk_set_uri: str | None = None
    issuer_uri: str | None = None
    client_authentication_method: ClientAuthenticationMethod | None = None
    authorization_grant_type: AuthorizationGrantType | None = None
    redirect_uri: str | None = None
    scope: tuple[str, ...] | None = None
    client_name: str | None = None


GOOGLE = ProviderDefaults(
    authorization_uri="https://accounts.google.com/o/oauth2/v2/auth",
    token_uri="https://www.googleapis.com/oauth2/v4/token",
    user_info_uri="https://www.googleapis.com/oauth2/v3/userinfo",
    user_name_attribute="sub",
    jwk_set_uri="https://www.googleapis.com/oauth2/v3/certs",
    client_authentication_method=ClientAuthenticationMethod.BASIC,
    authorization_grant_type=AuthorizationGrantType.AUTHORIZATION_CODE,
    redirect_uri=DEFAULT_REDIRECT_URL,
    scope=("openid", "profile", "email", "address", "phone"),
    client_name="Google",
)

GITHUB = ProviderDefaults(
    authorization_uri="https://github.com/login/oauth/authorize",
    token_uri="https://github.com/login/oauth/access_token",
    user_info_uri="https://api.github.com/user",
    user_name_attribute="id",
    client_authentication_method=ClientAuthenticationMethod.BASIC,
    authorization_grant_type=AuthorizationGrantType.AUTHORIZATION_CODE,
    redirect_uri=DEFAULT_REDIRECT_URL,
    scope=("user",),
    client_name="GitHub",
)

FACEBOOK = ProviderDefaults(
    authorization_uri="https://www.facebook.com/v2.8/dialog/oauth",
    token_uri="https://graph.facebook.com/v2.8/oauth/access_token",
    user_info_uri="https://graph.facebook.com/me",
    user_name_attribute="id",
    client_authentication_method=ClientAuthenticationMethod.POST,
    authorization_grant_type=AuthorizationGrantType.AUTHORIZATION_CODE,
    redirect_uri=DEFAULT_REDIRECT_URL,
    scope=("public_profile", "email"),
    client_name="Facebook",
)

# Okta endpoints live under each customer's own domain, so only the
# registration half is pre-filled.
OKTA = ProviderDefaults(
    user_name_attribute="sub",
    client_authentication_method=ClientAuthenticationMethod.BASIC,
    authorization_grant_type=AuthorizationGrantType.AUTHORIZATION_CODE,
    redirect_uri=DEFAULT_REDIRECT_URL,
    scope=("openid", "profile", "email", "address", "phone"),
    client_name="Okta",
)

COMMON_PROVIDERS: Mapping[str, ProviderDefaults] = MappingProxyType(
    {
        "google": GOOGLE,
        "github": GITHUB,
        "facebook": FACEBOOK,
        "okta": OKTA,
    }
)


def find_common_provider(provider_id: str) -> ProviderDefaults | None:
    """Return the catalog entry for *provider_id* (exact, case-sensitive match)."""
    return COMMON_PROVIDERS.get(provider_id)
