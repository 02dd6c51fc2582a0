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
"""Tests for the built-in provider catalog."""

from __future__ import annotations

import dataclasses

import pytest

from oauth2_registration.client.provider import (
    COMMON_PROVIDERS,
    DEFAULT_REDIRECT_URL,
    GOOGLE,
    ProviderDefaults,
    find_common_provider,
)
from oauth2_registration.client.registration import (
    AuthorizationGrantType,
    ClientAuthenticationMethod,
)


class TestCatalogContents:
    def test_known_provider_ids(self) -> None:
        assert set(COMMON_PROVIDERS) == {"google", "github", "facebook", "okta"}

    def test_google_entry(self) -> None:
        google = COMMON_PROVIDERS["google"]

        assert google.authorization_uri == "https://accounts.google.com/o/oauth2/v2/auth"
        assert google.token_uri == "https://www.googleapis.com/oauth2/v4/token"
        assert google.user_info_uri == "https://www.googleapis.com/oauth2/v3/userinfo"
        assert google.jwk_set_uri == "https://www.googleapis.com/oauth2/v3/certs"
        assert google.client_authentication_method is ClientAuthenticationMethod.BASIC
        assert google.authorization_grant_type is AuthorizationGrantType.AUTHORIZATION_CODE
        assert google.redirect_uri == DEFAULT_REDIRECT_URL
        assert google.scope == ("openid", "profile", "email", "address", "phone")
        assert google.client_name == "Google"

    def test_github_entry(self) -> None:
        github = COMMON_PROVIDERS["github"]

        assert github.authorization_uri == "https://github.com/login/oauth/authorize"
        assert github.token_uri == "https://github.com/login/oauth/access_token"
        assert github.user_info_uri == "https://api.github.com/user"
        assert github.client_name == "GitHub"

    def test_okta_leaves_endpoints_unset(self) -> None:
        okta = COMMON_PROVIDERS["okta"]

        assert okta.authorization_uri is None
        assert okta.token_uri is None
        assert okta.client_name == "Okta"

    @pytest.mark.parametrize("provider_id", ["google", "github", "facebook", "okta"])
    def test_every_entry_carries_registration_defaults(self, provider_id: str) -> None:
        defaults = COMMON_PROVIDERS[provider_id]

        assert defaults.client_authentication_method is not None
        assert defaults.authorization_grant_type is AuthorizationGrantType.AUTHORIZATION_CODE
        assert defaults.redirect_uri == DEFAULT_REDIRECT_URL
        assert defaults.scope


class TestCatalogImmutability:
    def test_catalog_mapping_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            COMMON_PROVIDERS["custom"] = ProviderDefaults()  # type: ignore[index]

    def test_entries_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            GOOGLE.client_name = "Other"  # type: ignore[misc]


class TestFindCommonProvider:
    def test_exact_match(self) -> None:
        assert find_common_provider("google") is GOOGLE

    def test_lookup_is_case_sensitive(self) -> None:
        assert find_common_provider("GOOGLE") is None

    def test_unknown_id(self) -> None:
        assert find_common_provider("missing") is None
