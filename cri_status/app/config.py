# Copyright contributors to the cri-status project. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cri_status.models.introspection import Deprecation

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_SANDBOX_IMAGE = "registry.k8s.io/pause:3.10"
DEFAULT_STATS_COLLECT_PERIOD = 10
DEFAULT_MAX_CONTAINER_LOG_LINE_SIZE = 16 * 1024
DEFAULT_INTROSPECTION_TIMEOUT_SECONDS = 5

SANDBOX_IMAGE_KEY = "sandbox"

PROJECT_LOG_LEVEL = os.getenv("PROJECT_LOG_LEVEL", "")
ROOT_LOG_LEVEL = os.getenv("ROOT_LOG_LEVEL", "")


class IntrospectionEndpoint(BaseModel):
    host: str = Field(..., description="Host of the runtime introspection API.")
    port: Optional[int] = Field(0, description="Port of the runtime introspection API. 0 omits the port from the URL.")
    ssl: Optional[bool] = Field(False, description="Use https to reach the introspection API.")
    ssl_verify: Optional[bool] = Field(False, description="Verify the certificate of the introspection API.")
    root_path: Optional[str] = Field("", description="Path prefix prepended to every introspection endpoint.")
    timeout: Optional[int] = Field(DEFAULT_INTROSPECTION_TIMEOUT_SECONDS, description="Seconds to wait for the introspection API.")


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="CRI_STATUS_", extra="ignore")

    host: Optional[str] = Field(DEFAULT_HOST, description="Host to bind the status server. Default is 127.0.0.1.")
    port: Optional[int] = Field(DEFAULT_PORT, description="Port to bind the status server. Default is 8080.")
    sandbox_image: str = Field(DEFAULT_SANDBOX_IMAGE, min_length=1, description="Default sandbox (pause) image used when no image is pinned for 'sandbox'.")
    ignore_deprecation_warnings: List[str] = Field([], description="Deprecation ids which are not reported in the runtime conditions.")
    pinned_images: Dict[str, str] = Field({}, description="Images pinned by logical name, e.g. {'sandbox': 'registry.k8s.io/pause:3.10'}.")
    stats_collect_period: int = Field(DEFAULT_STATS_COLLECT_PERIOD, description="Period in seconds between container stats collections.")
    enable_selinux: bool = Field(False, description="Whether SELinux labeling is enabled.")
    max_container_log_line_size: int = Field(
        DEFAULT_MAX_CONTAINER_LOG_LINE_SIZE, description="Maximum size in bytes of a single container log line."
    )
    introspection: Optional[IntrospectionEndpoint] = Field(
        None, description="Runtime introspection API. If not set, 'static_deprecations' is reported instead."
    )
    static_deprecations: List[Deprecation] = Field([], description="Deprecation warnings reported when no introspection API is configured.")


def load_app_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    if not path:
        return AppConfig()
    with Path(path).open("r") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(**data)
