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
from typing import Any, Dict, Optional

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

urllib3.disable_warnings(InsecureRequestWarning)

logger = logging.getLogger(__name__)


class RestClient:
    def __init__(
        self,
        host: str,
        port: int,
        headers: Optional[Dict[str, str]] = None,
        ssl: Optional[bool] = False,
        verify: Optional[bool] = False,
        root_path: Optional[str] = "",
        timeout: Optional[float] = None,
    ):
        protocol = "https" if ssl else "http"
        root_path = root_path or ""
        self.base_url = f"{protocol}://{host}:{port}{root_path}" if port and port > 0 else f"{protocol}://{host}{root_path}"
        self.headers = dict(headers) if headers else {}
        self.headers["Content-type"] = "application/json"
        self.verify = verify if verify else False
        self.timeout = timeout

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        _endpoint = endpoint.lstrip("/")
        url = f"{self.base_url}/{_endpoint}"
        logger.debug(f"GET {url}")
        response = requests.get(url, headers=self.headers, params=params, verify=self.verify, timeout=self.timeout)
        response.raise_for_status()
        return response
