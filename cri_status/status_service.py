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

import logging
from typing import Callable, Dict, List, Optional

from pydantic_core import PydanticSerializationError

from cri_status.app.config import SANDBOX_IMAGE_KEY, AppConfig
from cri_status.conditions import (
    build_readiness_conditions,
    runtime_condition_containerd_has_no_deprecation_warnings,
)
from cri_status.errors import DependencyError, SerializationError
from cri_status.images import ImageService, PinnedImageStore
from cri_status.introspection import (
    IntrospectionClient,
    IntrospectionService,
    StaticIntrospectionService,
)
from cri_status.models.config import RuntimeConfigSnapshot
from cri_status.models.introspection import ServerResponse
from cri_status.models.status import (
    RuntimeCondition,
    RuntimeStatus,
    StatusRequest,
    StatusResponse,
)
from cri_status.network import NetworkPlugin

logger = logging.getLogger(__name__)


class StatusService:
    """Answers runtime Status queries.

    The service only holds read-only configuration and collaborator references,
    so concurrent calls to `status` need no coordination. Every collaborator is
    queried once per call and no partial response is returned on failure.
    """

    def __init__(
        self,
        app_config: AppConfig,
        introspection_service: IntrospectionService,
        image_service: Optional[ImageService] = None,
        network_plugin: Optional[NetworkPlugin] = None,
        runtime_probe: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.app_config = app_config
        self.introspection_service = introspection_service
        self.image_service = image_service if image_service else PinnedImageStore(app_config.pinned_images)
        self.network_plugin = network_plugin
        self.runtime_probe = runtime_probe

    @classmethod
    def from_config(cls, app_config: AppConfig, network_plugin: Optional[NetworkPlugin] = None) -> "StatusService":
        if app_config.introspection:
            introspection_service = IntrospectionClient.from_endpoint(app_config.introspection)
        else:
            logger.debug("No introspection endpoint is configured, static deprecations are reported.")
            introspection_service = StaticIntrospectionService(app_config.static_deprecations)
        return cls(app_config, introspection_service, network_plugin=network_plugin)

    def status(self, request: Optional[StatusRequest] = None) -> StatusResponse:
        request = request if request else StatusRequest()

        network_ready, network_error = self.network_status()
        conditions: List[RuntimeCondition] = build_readiness_conditions(network_ready, self.runtime_ready(), network_error)

        server = self.introspection_server()
        conditions.append(
            runtime_condition_containerd_has_no_deprecation_warnings(server.deprecations, self.app_config.ignore_deprecation_warnings)
        )

        info: Dict[str, str] = {}
        if request.verbose:
            info["config"] = self.config_json()

        return StatusResponse(status=RuntimeStatus(conditions=conditions), info=info)

    def runtime_ready(self) -> bool:
        if self.runtime_probe is None:
            return True
        return bool(self.runtime_probe())

    def network_status(self):
        if self.network_plugin is None:
            return True, None
        try:
            self.network_plugin.status()
        except Exception as e:
            logger.warning(f"Network plugin is not ready: {e}")
            return False, str(e)
        return True, None

    def introspection_server(self) -> ServerResponse:
        try:
            return self.introspection_service.server()
        except Exception as e:
            logger.error(f"Failed to get introspection server info: {e}")
            raise DependencyError(f"failed to get server info: {e}", "introspection") from e

    def sandbox_image(self) -> str:
        try:
            pinned = self.image_service.pinned_image(SANDBOX_IMAGE_KEY)
        except Exception as e:
            logger.error(f"Failed to look up pinned image '{SANDBOX_IMAGE_KEY}': {e}")
            raise DependencyError(f"failed to look up pinned image '{SANDBOX_IMAGE_KEY}': {e}", "image") from e
        if pinned:
            return pinned
        return self.app_config.sandbox_image

    def config_snapshot(self) -> RuntimeConfigSnapshot:
        app_config = self.app_config
        return RuntimeConfigSnapshot(
            sandboxImage=self.sandbox_image(),
            ignoreDeprecationWarnings=app_config.ignore_deprecation_warnings,
            pinnedImages=app_config.pinned_images,
            statsCollectPeriod=app_config.stats_collect_period,
            enableSelinux=app_config.enable_selinux,
            maxContainerLogLineSize=app_config.max_container_log_line_size,
        )

    def config_json(self) -> str:
        snapshot = self.config_snapshot()
        try:
            return snapshot.model_dump_json()
        except PydanticSerializationError as e:
            raise SerializationError(str(e), "runtime config") from e
