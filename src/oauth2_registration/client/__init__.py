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
"""OAuth2 client — properties, built-in providers, adapter, and repository."""

from oauth2_registration.client.adapter import get_client_registration, get_client_registrations
from oauth2_registration.client.auto_configuration import client_registration_repository
from oauth2_registration.client.properties import OAuth2ClientProperties, Provider, Registration
from oauth2_registration.client.provider import (
    COMMON_PROVIDERS,
    DEFAULT_REDIRECT_URL,
    ProviderDefaults,
    find_common_provider,
)
from oauth2_registration.client.registration import (
    AuthorizationGrantType,
    ClientAuthenticationMethod,
    ClientRegistration,
    ClientRegistrationRepository,
    InMemoryClientRegistrationRepository,
    ProviderDetails,
    UserInfoEndpoint,
)

__all__ = [
    "COMMON_PROVIDERS",
    "DEFAULT_REDIRECT_URL",
    "AuthorizationGrantType",
    "ClientAuthenticationMethod",
    "ClientRegistration",
    "ClientRegistrationRepository",
    "InMemoryClientRegistrationRepository",
    "OAuth2ClientProperties",
    "Provider",
    "ProviderDefaults",
    "ProviderDetails",
    "Registration",
    "UserInfoEndpoint",
    "client_registration_repository",
    "find_common_provider",
    "get_client_registration",
    "get_client_registrations",
]
