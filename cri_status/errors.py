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


class StatusError(Exception):
    pass


class DependencyError(StatusError):

    def __init__(self, message: str, dependency: str):
        self.message = message
        self.dependency = dependency
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"Dependency [{self.dependency}] error: {self.message}"


class SerializationError(StatusError):

    def __init__(self, message: str, target: str):
        self.message = message
        self.target = target
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"Failed to encode {self.target}: {self.message}"
