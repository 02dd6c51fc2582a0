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
"""OAuth2 client auto-configuration — builds the registration repository from config."""

from __future__ import annotations

import logging

from oauth2_registration.client.adapter import get_client_registrations
from oauth2_registration.client.properties import OAuth2ClientProperties
from oauth2_registration.client.registration import InMemoryClientRegistrationRepository
from oauth2_registration.core.config import Config

logger = logging.getLogger(__name__)

ENABLED_PROPERTY = "security.oauth2.client.enabled"


def client_registration_repository(config: Config) -> InMemoryClientRegistrationRepository | None:
    """Create an InMemoryClientRegistrationRepository from ``security.oauth2.client``.

    Returns ``None`` when ``security.oauth2.client.enabled`` is false or no
    registration is configured. Configuration errors propagate so that a
    misconfigured application fails at startup.
    """
    if str(config.get(ENABLED_PROPERTY, "true")).lower() != "true":
        logger.debug("OAuth2 client registrations disabled via %s", ENABLED_PROPERTY)
        return None

    properties = config.bind(OAuth2ClientProperties)
    if not properties.registration:
        logger.debug("No OAuth2 client registrations configured")
        return None

    properties.validate_registrations()
    registrations = get_client_registrations(properties)
    for registration in registrations.values():
        logger.info(
            "Loaded OAuth2 client registration: %s (%s)",
            registration.registration_id,
            registration.provider_details.authorization_uri,
        )
    return InMemoryClientRegistrationRepository(*registrations.values())
