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

import pytest
import requests

from cri_status.app.config import AppConfig, IntrospectionEndpoint
from cri_status.common.rest_client import RestClient
from cri_status.errors import DependencyError
from cri_status.introspection import SERVER_ENDPOINT, IntrospectionClient
from cri_status.models.status import CONTAINERD_HAS_NO_DEPRECATION_WARNINGS
from cri_status.status_service import StatusService

SERVER_BODY = {
    "uuid": "8a33f7f4-0c6a-4b14-a1d4-9e2c3d01c0f1",
    "pid": 1234,
    "pidns": 4026531836,
    "deprecations": [
        {"id": "io.containerd.deprecation/foo", "message": "foo", "lastOccurrence": "2024-10-01T00:00:00Z"},
    ],
}


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def json(self):
        return self.body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_introspection_client_server(monkeypatch):
    calls = []

    def mock_get(url, **kwargs):
        calls.append((url, kwargs))
        return FakeResponse(SERVER_BODY)

    monkeypatch.setattr(requests, "get", mock_get)
    client = IntrospectionClient.from_endpoint(IntrospectionEndpoint(host="localhost", port=10010, timeout=3))
    server = client.server()

    assert calls[0][0] == f"http://localhost:10010{SERVER_ENDPOINT}"
    assert calls[0][1]["timeout"] == 3
    assert server.pid == 1234
    assert [(d.id, d.message) for d in server.deprecations] == [("io.containerd.deprecation/foo", "foo")]


def test_rest_client_base_url():
    assert RestClient("localhost", 0).base_url == "http://localhost"
    assert RestClient("localhost", 443, ssl=True, root_path="/runtime").base_url == "https://localhost:443/runtime"


def test_status_fails_when_introspection_api_fails(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, **kwargs: FakeResponse({}, status_code=503))
    app_config = AppConfig(introspection=IntrospectionEndpoint(host="localhost", port=10010))
    service = StatusService.from_config(app_config)
    with pytest.raises(DependencyError) as e:
        service.status()
    assert isinstance(e.value.__cause__, requests.HTTPError)


def test_status_with_introspection_api(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, **kwargs: FakeResponse(SERVER_BODY))
    app_config = AppConfig(introspection=IntrospectionEndpoint(host="localhost", port=10010))
    service = StatusService.from_config(app_config)
    condition = service.status().status.get_condition(CONTAINERD_HAS_NO_DEPRECATION_WARNINGS)
    assert condition.message == '{"io.containerd.deprecation/foo":"foo"}'


def test_rest_client_does_not_modify_given_headers():
    headers = {"Authorization": "Bearer token"}
    client = RestClient("localhost", 10010, headers=headers)
    assert headers == {"Authorization": "Bearer token"}
    assert client.headers == {"Authorization": "Bearer token", "Content-type": "application/json"}
