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

from fastapi import FastAPI, HTTPException
from starlette.status import (
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from cri_status.errors import DependencyError, SerializationError
from cri_status.models.status import StatusRequest, StatusResponse
from cri_status.status_service import StatusService

logger = logging.getLogger(__name__)


def create_app(status_service: StatusService) -> FastAPI:
    app = FastAPI(title="CRI Runtime Status")

    @app.get("/status", response_model=StatusResponse)
    def get_status(verbose: bool = False) -> StatusResponse:
        try:
            return status_service.status(StatusRequest(verbose=verbose))
        except DependencyError as e:
            raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
        except SerializationError as e:
            logger.error(f"Failed to build status response: {e}")
            raise HTTPException(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return app
