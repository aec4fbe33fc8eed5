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

from abc import ABC, abstractmethod
from typing import Optional


class NetworkNotReadyError(Exception):
    pass


class NetworkPlugin(ABC):

    @abstractmethod
    def status(self) -> None:
        """Raise when the pod network is not ready."""
        ...


class StaticNetworkPlugin(NetworkPlugin):
    def __init__(self, error: Optional[str] = None) -> None:
        self.error = error

    def status(self) -> None:
        if self.error:
            raise NetworkNotReadyError(self.error)
