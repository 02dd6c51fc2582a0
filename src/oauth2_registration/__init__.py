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
"""OAuth2 client registration binding.

Turns ``security.oauth2.client`` provider and registration properties into
immutable :class:`ClientRegistration` objects, filling unset values from a
catalog of well-known providers.
"""

__version__ = "0.1.0"

from oauth2_registration.client import (
    ClientRegistration,
    OAuth2ClientProperties,
    client_registration_repository,
    get_client_registrations,
)
from oauth2_registration.kernel import (
    ConfigurationException,
    UnknownProviderException,
)

__all__ = [
    "ClientRegistration",
    "ConfigurationException",
    "OAuth2ClientProperties",
    "UnknownProviderException",
    "__version__",
    "client_registration_repository",
    "get_client_registrations",
]
