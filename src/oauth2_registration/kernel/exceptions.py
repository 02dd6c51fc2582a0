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
"""Exception hierarchy for OAuth2 client registration binding.

All errors raised while turning configuration into client registrations
inherit from OAuth2RegistrationException, so callers can catch the whole
family at application startup or target a specific failure.

Categories:
- ConfigurationException: the supplied configuration cannot be resolved
- UnknownProviderException: a registration references a provider that is
  neither declared nor built in
- InvalidClientRegistrationException: a registration resolved but is missing
  a required value
"""

from __future__ import annotations


class OAuth2RegistrationException(Exception):
    """Base exception for all client registration errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "UNKNOWN_PROVIDER").
        context: Arbitrary key-value pairs describing the failing entry.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(OAuth2RegistrationException):
    """The OAuth2 client configuration is inconsistent or incomplete."""


class UnknownProviderException(ConfigurationException):
    """A registration references a provider id that cannot be resolved."""

    def __init__(self, provider_id: str, registration_id: str | None = None) -> None:
        super().__init__(
            f"Unknown provider ID '{provider_id}'",
            code="UNKNOWN_PROVIDER",
            context={"provider_id": provider_id, "registration_id": registration_id},
        )
        self.provider_id = provider_id
        self.registration_id = registration_id


class InvalidClientRegistrationException(ConfigurationException):
    """A registration is missing a value the authentication layer requires."""

    def __init__(self, message: str, registration_id: str | None = None) -> None:
        super().__init__(
            message,
            code="INVALID_REGISTRATION",
            context={"registration_id": registration_id},
        )
        self.registration_id = registration_id
