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

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Deprecation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable, namespaced identifier of the deprecation (e.g. 'io.containerd.deprecation/foo').")
    message: str = Field("", description="A human-readable message describing the deprecated feature.")
    lastOccurrence: Optional[datetime] = Field(default=None, description="The last time the deprecated feature was used.")


class ServerResponse(BaseModel):
    uuid: Optional[str] = Field(None, description="Unique identifier of the runtime instance.")
    pid: Optional[int] = Field(None, description="Process id of the runtime daemon.")
    pidns: Optional[int] = Field(None, description="Inode of the runtime daemon's pid namespace.")
    deprecations: List[Deprecation] = Field(default_factory=list, description="Active deprecation warnings.")
