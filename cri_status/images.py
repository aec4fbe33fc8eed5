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
from typing import Dict, Optional


class ImageService(ABC):

    @abstractmethod
    def pinned_image(self, name: str) -> Optional[str]:
        """Return the image pinned for the logical `name`, or None when nothing is pinned."""
        ...


class PinnedImageStore(ImageService):
    def __init__(self, pinned_images: Optional[Dict[str, str]] = None) -> None:
        self.pinned_images = dict(pinned_images) if pinned_images else {}

    def pinned_image(self, name: str) -> Optional[str]:
        image = self.pinned_images.get(name)
        return image if image else None
