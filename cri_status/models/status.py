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

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

RUNTIME_READY = "RuntimeReady"
NETWORK_READY = "NetworkReady"
CONTAINERD_HAS_NO_DEPRECATION_WARNINGS = "ContainerdHasNoDeprecationWarnings"

RUNTIME_NOT_READY_REASON = "RuntimeNotReady"
NETWORK_NOT_READY_REASON = "NetworkPluginNotReady"
CONTAINERD_HAS_DEPRECATION_WARNINGS = "ContainerdHasDeprecationWarnings"


class RuntimeCondition(BaseModel):
    type: str = Field(..., description="The type of condition (e.g., 'RuntimeReady', 'NetworkReady').")
    status: bool = Field(..., description="True when the condition is healthy.")
    reason: str = Field("", description="A brief machine-readable explanation for the condition's status.")
    message: str = Field("", description="A human-readable message indicating details about the condition.")


class RuntimeStatus(BaseModel):
    conditions: List[RuntimeCondition] = Field(..., description="List of conditions for the runtime, in report order.")

    def get_condition(self, condition_type: str) -> Optional[RuntimeCondition]:
        for condition in self.conditions:
            if condition.type == condition_type:
                return condition
        return None


class StatusRequest(BaseModel):
    verbose: bool = Field(False, description="Include extra information (e.g. the runtime configuration) in the response.")


class StatusResponse(BaseModel):
    status: RuntimeStatus
    info: Dict[str, str] = Field(default_factory=dict, description="Extra information keyed by name. Populated only for verbose requests.")
