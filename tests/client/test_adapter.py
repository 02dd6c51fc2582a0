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
"""Tests for get_client_registrations — adapting properties to ClientRegistration."""

from __future__ import annotations

import logging

import pytest

from oauth2_registration.client.adapter import get_client_registration, get_client_registrations
from oauth2_registration.client.properties import OAuth2ClientProperties, Provider, Registration
from oauth2_registration.client.provider import DEFAULT_REDIRECT_URL
from oauth2_registration.client.registration import (
    AuthorizationGrantType,
    ClientAuthenticationMethod,
)
from oauth2_registration.kernel.exceptions import (
    ConfigurationException,
    InvalidClientRegistrationException,
    UnknownProviderException,
)


def _fully_specified_registration(provider: str) -> Registration:
    return Registration(
        provider=provider,
        client_id="clientId",
        client_secret="clientSecret",
        client_authentication_method=ClientAuthenticationMethod.POST,
        authorization_grant_type=AuthorizationGrantType.AUTHORIZATION_CODE,
        redirect_uri="http://example.com/redirect",
        scope=["scope"],
        client_name="clientName",
    )


# ---------------------------------------------------------------------------
# Declared providers
# ---------------------------------------------------------------------------


class TestDeclaredProvider:
    def test_uses_declared_provider_endpoints_and_registration_values(self) -> None:
        properties = OAuth2ClientProperties()
        properties.provider["provider"] = Provider(
            authorization_uri="http://example.com/auth",
            token_uri="http://example.com/token",
            user_info_uri="http://example.com/info",
            jwk_set_uri="http://example.com/jkw",
        )
        properties.registration["registration"] = _fully_specified_registration("provider")

        registrations = get_client_registrations(properties)

        adapted = registrations["registration"]
        details = adapted.provider_details
        assert details.authorization_uri == "http://example.com/auth"
        assert details.token_uri == "http://example.com/token"
        assert details.user_info_endpoint.uri == "http://example.com/info"
        assert details.jwk_set_uri == "http://example.com/jkw"
        assert adapted.registration_id == "registration"
        assert adapted.client_id == "clientId"
        assert adapted.client_secret == "clientSecret"
        assert adapted.client_authentication_method is ClientAuthenticationMethod.POST
        assert adapted.authorization_grant_type is AuthorizationGrantType.AUTHORIZATION_CODE
        assert adapted.redirect_uri == "http://example.com/redirect"
        assert adapted.scope == ("scope",)
        assert adapted.client_name == "clientName"

    def test_declared_provider_shadows_built_in_with_same_name(self) -> None:
        properties = OAuth2ClientProperties(
            provider={
                "google": Provider(
                    authorization_uri="https://proxy.example.com/auth",
                    token_uri="https://proxy.example.com/token",
                ),
            },
            registration={"login": _fully_specified_registration("google")},
        )

        adapted = get_client_registrations(properties)["login"]

        assert adapted.provider_details.authorization_uri == "https://proxy.example.com/auth"
        assert adapted.provider_details.token_uri == "https://proxy.example.com/token"
        assert adapted.provider_details.user_info_endpoint.uri is None
        assert adapted.provider_details.jwk_set_uri is None

    def test_declared_provider_contributes_no_registration_defaults(self) -> None:
        properties = OAuth2ClientProperties(
            provider={
                "google": Provider(
                    authorization_uri="https://proxy.example.com/auth",
                    token_uri="https://proxy.example.com/token",
                ),
            },
            registration={
                "login": Registration(
                    provider="google",
                    client_id="clientId",
                    client_authentication_method=ClientAuthenticationMethod.BASIC,
                ),
            },
        )

        adapted = get_client_registrations(properties)["login"]

        assert adapted.scope == ()
        assert adapted.client_name is None
        assert adapted.redirect_uri is None
        assert adapted.authorization_grant_type is None

    def test_declared_provider_without_auth_method_is_rejected(self) -> None:
        properties = OAuth2ClientProperties(
            provider={
                "corporate": Provider(
                    authorization_uri="https://sso.example.com/auth",
                    token_uri="https://sso.example.com/token",
                ),
            },
            registration={"intranet": Registration(provider="corporate", client_id="cid")},
        )

        with pytest.raises(InvalidClientRegistrationException, match="Client authentication method"):
            get_client_registrations(properties)

    def test_declared_provider_without_token_uri_is_rejected(self) -> None:
        properties = OAuth2ClientProperties(
            provider={"corporate": Provider(authorization_uri="https://sso.example.com/auth")},
            registration={"intranet": _fully_specified_registration("corporate")},
        )

        with pytest.raises(InvalidClientRegistrationException, match="Token URI must not be empty"):
            get_client_registrations(properties)

    def test_issuer_and_user_name_attribute_are_carried(self) -> None:
        properties = OAuth2ClientProperties(
            provider={
                "corporate": Provider(
                    authorization_uri="https://sso.example.com/auth",
                    token_uri="https://sso.example.com/token",
                    user_info_uri="https://sso.example.com/me",
                    user_name_attribute="login",
                    issuer_uri="https://sso.example.com",
                ),
            },
            registration={"intranet": _fully_specified_registration("corporate")},
        )

        details = get_client_registrations(properties)["intranet"].provider_details

        assert details.issuer_uri == "https://sso.example.com"
        assert details.user_info_endpoint.user_name_attribute == "login"


# ---------------------------------------------------------------------------
# Built-in providers
# ---------------------------------------------------------------------------


class TestBuiltInProvider:
    def test_unset_fields_take_google_defaults(self) -> None:
        properties = OAuth2ClientProperties()
        properties.registration["registration"] = Registration(
            provider="google", client_id="clientId", client_secret="clientSecret"
        )

        adapted = get_client_registrations(properties)["registration"]

        details = adapted.provider_details
        assert details.authorization_uri == "https://accounts.google.com/o/oauth2/v2/auth"
        assert details.token_uri == "https://www.googleapis.com/oauth2/v4/token"
        assert details.user_info_endpoint.uri == "https://www.googleapis.com/oauth2/v3/userinfo"
        assert details.jwk_set_uri == "https://www.googleapis.com/oauth2/v3/certs"
        assert adapted.registration_id == "registration"
        assert adapted.client_id == "clientId"
        assert adapted.client_secret == "clientSecret"
        assert adapted.client_authentication_method is ClientAuthenticationMethod.BASIC
        assert adapted.authorization_grant_type is AuthorizationGrantType.AUTHORIZATION_CODE
        assert adapted.redirect_uri == DEFAULT_REDIRECT_URL
        assert adapted.scope == ("openid", "profile", "email", "address", "phone")
        assert adapted.client_name == "Google"

    def test_set_fields_override_google_defaults(self) -> None:
        properties = OAuth2ClientProperties()
        properties.registration["registration"] = _fully_specified_registration("google")

        adapted = get_client_registrations(properties)["registration"]

        details = adapted.provider_details
        assert details.authorization_uri == "https://accounts.google.com/o/oauth2/v2/auth"
        assert details.token_uri == "https://www.googleapis.com/oauth2/v4/token"
        assert details.user_info_endpoint.uri == "https://www.googleapis.com/oauth2/v3/userinfo"
        assert details.jwk_set_uri == "https://www.googleapis.com/oauth2/v3/certs"
        assert adapted.client_authentication_method is ClientAuthenticationMethod.POST
        assert adapted.authorization_grant_type is AuthorizationGrantType.AUTHORIZATION_CODE
        assert adapted.redirect_uri == "http://example.com/redirect"
        assert adapted.scope == ("scope",)
        assert adapted.client_name == "clientName"

    def test_facebook_defaults_to_post_authentication(self) -> None:
        properties = OAuth2ClientProperties(
            registration={"fb": Registration(provider="facebook", client_id="cid")}
        )

        adapted = get_client_registrations(properties)["fb"]

        assert adapted.client_authentication_method is ClientAuthenticationMethod.POST
        assert adapted.scope == ("public_profile", "email")

    def test_okta_without_declared_endpoints_is_rejected(self) -> None:
        properties = OAuth2ClientProperties(
            registration={"okta": Registration(client_id="cid")}
        )

        with pytest.raises(InvalidClientRegistrationException, match="Authorization URI must not be empty"):
            get_client_registrations(properties)

    def test_provider_defaults_to_registration_id(self) -> None:
        properties = OAuth2ClientProperties(
            registration={"github": Registration(client_id="cid", client_secret="secret")}
        )

        adapted = get_client_registrations(properties)["github"]

        assert adapted.provider_details.authorization_uri == "https://github.com/login/oauth/authorize"
        assert adapted.client_name == "GitHub"

    def test_provider_match_is_case_sensitive(self) -> None:
        properties = OAuth2ClientProperties(
            registration={"login": Registration(provider="Google", client_id="cid")}
        )

        with pytest.raises(UnknownProviderException, match="Unknown provider ID 'Google'"):
            get_client_registrations(properties)

    def test_registrations_sharing_a_provider_resolve_independently(self) -> None:
        properties = OAuth2ClientProperties(
            registration={
                "web": Registration(provider="google", client_id="web-client"),
                "mobile": Registration(provider="google", client_id="mobile-client", scope=["openid"]),
            }
        )

        registrations = get_client_registrations(properties)

        assert registrations["web"].client_id == "web-client"
        assert registrations["web"].scope == ("openid", "profile", "email", "address", "phone")
        assert registrations["mobile"].client_id == "mobile-client"
        assert registrations["mobile"].scope == ("openid",)


# ---------------------------------------------------------------------------
# Unknown providers
# ---------------------------------------------------------------------------


class TestUnknownProvider:
    def test_unknown_provider_raises(self) -> None:
        properties = OAuth2ClientProperties()
        properties.registration["registration"] = Registration(provider="missing")

        with pytest.raises(UnknownProviderException, match="Unknown provider ID 'missing'") as exc_info:
            get_client_registrations(properties)

        assert exc_info.value.provider_id == "missing"
        assert exc_info.value.registration_id == "registration"
        assert exc_info.value.code == "UNKNOWN_PROVIDER"

    def test_unknown_provider_is_a_configuration_exception(self) -> None:
        properties = OAuth2ClientProperties(registration={"registration": Registration(provider="missing")})

        with pytest.raises(ConfigurationException):
            get_client_registrations(properties)

    def test_unknown_provider_aborts_whole_batch(self) -> None:
        properties = OAuth2ClientProperties(
            registration={
                "good": Registration(provider="google", client_id="cid"),
                "bad": Registration(provider="missing", client_id="cid"),
            }
        )

        result = None
        with pytest.raises(UnknownProviderException):
            result = get_client_registrations(properties)

        assert result is None

    def test_unknown_provider_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="oauth2_registration.client.adapter"):
            with pytest.raises(UnknownProviderException):
                get_client_registration("registration", Registration(provider="missing"), {})

        assert "Unknown provider ID 'missing'" in caplog.text

    def test_empty_provider_reference_is_not_replaced_by_registration_id(self) -> None:
        properties = OAuth2ClientProperties(
            registration={"github": Registration(provider="", client_id="cid")}
        )

        with pytest.raises(UnknownProviderException, match="Unknown provider ID ''"):
            get_client_registrations(properties)


class TestResolutionLogging:
    def test_logs_which_base_each_registration_resolved_against(self, caplog: pytest.LogCaptureFixture) -> None:
        properties = OAuth2ClientProperties(
            provider={
                "corporate": Provider(
                    authorization_uri="https://sso.example.com/auth",
                    token_uri="https://sso.example.com/token",
                ),
            },
            registration={
                "intranet": _fully_specified_registration("corporate"),
                "login": Registration(provider="google", client_id="cid"),
            },
        )

        with caplog.at_level(logging.DEBUG, logger="oauth2_registration.client.adapter"):
            get_client_registrations(properties)

        assert "Registration 'intranet' uses declared provider 'corporate'" in caplog.text
        assert "Registration 'login' uses built-in provider 'google'" in caplog.text


class TestEmptyProperties:
    def test_no_registrations_yields_empty_mapping(self) -> None:
        assert get_client_registrations(OAuth2ClientProperties()) == {}
