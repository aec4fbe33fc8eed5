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

import json

from fastapi.testclient import TestClient
from pydantic_core import PydanticSerializationError

from cri_status.app.config import AppConfig
from cri_status.app.server import create_app
from cri_status.introspection import StaticIntrospectionService
from cri_status.models.config import RuntimeConfigSnapshot
from cri_status.models.introspection import ServerResponse
from cri_status.status_service import StatusService
from tests import deprecation_warnings as dw
from tests.test_status import FakeIntrospectionService


def build_client(introspection_service=None, app_config=None) -> TestClient:
    app_config = app_config if app_config else AppConfig()
    introspection_service = introspection_service if introspection_service else StaticIntrospectionService(dw.ONLY_FOO)
    return TestClient(create_app(StatusService(app_config, introspection_service)))


def test_get_status():
    client = build_client()
    response = client.get("/status")
    assert response.status_code == 200
    body = response.json()
    assert body["info"] == {}
    assert body["status"]["conditions"][-1] == {
        "type": "ContainerdHasNoDeprecationWarnings",
        "status": False,
        "reason": "ContainerdHasDeprecationWarnings",
        "message": '{"io.containerd.deprecation/foo":"foo"}',
    }


def test_get_status_verbose():
    client = build_client(app_config=AppConfig(pinned_images={"sandbox": "registry.example/pause:override"}))
    response = client.get("/status", params={"verbose": "true"})
    assert response.status_code == 200
    config = json.loads(response.json()["info"]["config"])
    assert config["sandboxImage"] == "registry.example/pause:override"


def test_get_status_dependency_error():
    client = build_client(introspection_service=FakeIntrospectionService(error=ConnectionError("connection refused")))
    response = client.get("/status")
    assert response.status_code == 503
    assert "introspection" in response.json()["detail"]


def test_get_status_serialization_error(monkeypatch):
    def broken_dump_json(self, **kwargs):
        raise PydanticSerializationError("broken")

    monkeypatch.setattr(RuntimeConfigSnapshot, "model_dump_json", broken_dump_json)
    client = build_client()
    response = client.get("/status", params={"verbose": "true"})
    assert response.status_code == 500
    assert "runtime config" in response.json()["detail"]


def test_get_status_with_lone_surrogate_in_message():
    server = ServerResponse.model_validate(
        json.loads('{"deprecations":[{"id":"io.containerd.deprecation/foo","message":"bad \\ud800"}]}')
    )
    client = build_client(introspection_service=StaticIntrospectionService(server.deprecations))
    response = client.get("/status")
    assert response.status_code == 200
    assert response.json()["status"]["conditions"][-1]["message"] == '{"io.containerd.deprecation/foo":"bad \ufffd"}'
