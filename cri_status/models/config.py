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

from typing import Dict, List

from pydantic import BaseModel, Field, field_serializer


class RuntimeConfigSnapshot(BaseModel):
    sandboxImage: str = Field(..., description="The effective sandbox (pause) image.")
    ignoreDeprecationWarnings: List[str] = Field(default_factory=list, description="Deprecation ids excluded from the runtime conditions.")
    pinnedImages: Dict[str, str] = Field(default_factory=dict, description="Images pinned by logical name.")
    statsCollectPeriod: int = Field(10, description="Period in seconds between container stats collections.")
    enableSelinux: bool = Field(False, description="Whether SELinux labeling is enabled.")
    maxContainerLogLineSize: int = Field(16 * 1024, description="Maximum size in bytes of a single container log line.")

    @field_serializer("pinnedImages")
    def serialize_pinned_images(self, pinned_images: Dict[str, str]) -> Dict[str, str]:
        return {k: pinned_images[k] for k in sorted(pinned_images)}
