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
"""Adapts bound OAuth2 client properties into ClientRegistration objects.

For each configured registration the provider id is looked up first among
the providers declared in configuration, then in the built-in catalog. A
declared provider contributes endpoints only; a catalog entry also supplies
defaults for every registration field left unset. Fields are overridden
whole: an explicit scope replaces the catalog scope, it is not merged.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from oauth2_registration.client.properties import OAuth2ClientProperties, Provider, Registration
from oauth2_registration.client.provider import ProviderDefaults, find_common_provider
from oauth2_registration.client.registration import (
    ClientRegistration,
    ProviderDetails,
    UserInfoEndpoint,
)
from oauth2_registration.kernel.exceptions import UnknownProviderException

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_client_registrations(properties: OAuth2ClientProperties) -> dict[str, ClientRegistration]:
    """Resolve every configured registration, keyed by registration id.

    Raises:
        UnknownProviderException: on the first registration whose provider id
            is neither declared nor built in. No partial result is returned.
        InvalidClientRegistrationException: when a resolved registration lacks
            an authorization URI, token URI or client authentication method.
    """
    return {
        registration_id: get_client_registration(registration_id, registration, properties.provider)
        for registration_id, registration in properties.registration.items()
    }


def get_client_registration(
    registration_id: str,
    registration: Registration,
    providers: dict[str, Provider],
) -> ClientRegistration:
    """Resolve a single registration against the declared providers and the catalog."""
    provider_id = registration.provider if registration.provider is not None else registration_id
    base = _resolve_base(registration_id, provider_id, providers)

    scope = registration.scope if registration.scope is not None else base.scope
    return ClientRegistration(
        registration_id=registration_id,
        client_id=registration.client_id,
        client_secret=registration.client_secret,
        client_authentication_method=_first(
            registration.client_authentication_method, base.client_authentication_method
        ),
        authorization_grant_type=_first(registration.authorization_grant_type, base.authorization_grant_type),
        redirect_uri=_first(registration.redirect_uri, base.redirect_uri),
        scope=tuple(scope or ()),
        client_name=_first(registration.client_name, base.client_name),
        provider_details=ProviderDetails(
            authorization_uri=base.authorization_uri or "",
            token_uri=base.token_uri or "",
            user_info_endpoint=UserInfoEndpoint(
                uri=base.user_info_uri,
                user_name_attribute=base.user_name_attribute,
            ),
            jwk_set_uri=base.jwk_set_uri,
            issuer_uri=base.issuer_uri,
        ),
    )


def _resolve_base(registration_id: str, provider_id: str, providers: dict[str, Provider]) -> ProviderDefaults:
    provider = providers.get(provider_id)
    if provider is not None:
        logger.debug("Registration '%s' uses declared provider '%s'", registration_id, provider_id)
        return ProviderDefaults(
            authorization_uri=provider.authorization_uri,
            token_uri=provider.token_uri,
            user_info_uri=provider.user_info_uri,
            user_name_attribute=provider.user_name_attribute,
            jwk_set_uri=provider.jwk_set_uri,
            issuer_uri=provider.issuer_uri,
        )

    common = find_common_provider(provider_id)
    if common is not None:
        logger.debug("Registration '%s' uses built-in provider '%s'", registration_id, provider_id)
        return common

    logger.warning("Unknown provider ID '%s' for registration: %s", provider_id, registration_id)
    raise UnknownProviderException(provider_id, registration_id)


def _first(value: T | None, default: T | None) -> T | None:
    return value if value is not None else default
