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
"""Logging — structlog configuration driven by the ``logging.*`` section."""

from __future__ import annotations

from oauth2_registration.core.config import Config
from oauth2_registration.logging.port import LoggingPort
from oauth2_registration.logging.structlog_adapter import StructlogAdapter


def configure_logging(config: Config) -> LoggingPort:
    """Configure logging from *config* and return the adapter used."""
    adapter = StructlogAdapter()
    adapter.configure(config)
    return adapter


__all__ = ["LoggingPort", "StructlogAdapter", "configure_logging"]
