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
from abc import ABC, abstractmethod
from typing import List, Optional

from cri_status.app.config import IntrospectionEndpoint
from cri_status.common.rest_client import RestClient
from cri_status.models.introspection import Deprecation, ServerResponse

SERVER_ENDPOINT = "/v1/introspection/server"

logger = logging.getLogger(__name__)


class IntrospectionService(ABC):

    @abstractmethod
    def server(self) -> ServerResponse: ...


class StaticIntrospectionService(IntrospectionService):
    def __init__(self, deprecations: Optional[List[Deprecation]] = None) -> None:
        self.deprecations = list(deprecations) if deprecations else []

    def server(self) -> ServerResponse:
        return ServerResponse(deprecations=self.deprecations)


class IntrospectionClient(IntrospectionService):
    def __init__(self, rest_client: RestClient) -> None:
        self.client = rest_client

    @classmethod
    def from_endpoint(cls, endpoint: IntrospectionEndpoint) -> "IntrospectionClient":
        rest_client = RestClient(
            endpoint.host,
            endpoint.port,
            ssl=endpoint.ssl,
            verify=endpoint.ssl_verify,
            root_path=endpoint.root_path,
            timeout=endpoint.timeout,
        )
        return cls(rest_client)

    def server(self) -> ServerResponse:
        response = self.client.get(SERVER_ENDPOINT)
        server = ServerResponse.model_validate(response.json())
        logger.debug(f"Runtime {server.uuid} reports {len(server.deprecations)} deprecation warning(s)")
        return server
