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
import logging
import re
from typing import Dict, Iterable, List, Optional

from cri_status.errors import SerializationError
from cri_status.models.introspection import Deprecation
from cri_status.models.status import (
    CONTAINERD_HAS_DEPRECATION_WARNINGS,
    CONTAINERD_HAS_NO_DEPRECATION_WARNINGS,
    NETWORK_NOT_READY_REASON,
    NETWORK_READY,
    RUNTIME_NOT_READY_REASON,
    RUNTIME_READY,
    RuntimeCondition,
)

SURROGATES = re.compile(r"[\ud800-\udfff]")

logger = logging.getLogger(__name__)


def filter_deprecations(deprecations: Iterable[Deprecation], ignored: Optional[Iterable[str]] = None) -> List[Deprecation]:
    """Drop the deprecation warnings whose id is in `ignored`.

    Order and duplicates of the surviving warnings are kept as they were reported.
    """
    ignored_ids = set(ignored) if ignored else set()
    return [d for d in deprecations if d.id not in ignored_ids]


def replace_surrogates(text: str) -> str:
    return SURROGATES.sub("\ufffd", text)


def encode_deprecations(deprecations: Iterable[Deprecation]) -> str:
    """Encode warnings as a compact JSON object of id -> message.

    Keys are sorted lexicographically so that identical inputs always encode to
    identical text. A later warning with an already seen id replaces the earlier one.
    Lone surrogates, which cannot be written as UTF-8, are replaced with U+FFFD.

    Unlike Go's encoding/json, `<`, `>`, `&`, U+2028 and U+2029 are written as is
    rather than as `\\u003c`, `\\u003e`, `\\u0026`, `\\u2028` and `\\u2029`, so
    messages containing them differ byte for byte from the ones containerd emits.
    """
    messages: Dict[str, str] = {}
    for d in deprecations:
        messages[replace_surrogates(d.id)] = replace_surrogates(d.message)
    try:
        text = json.dumps(messages, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        text.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e), "deprecation warnings") from e
    return text


def runtime_condition_containerd_has_no_deprecation_warnings(
    deprecations: Iterable[Deprecation], ignored: Optional[Iterable[str]] = None
) -> RuntimeCondition:
    active = filter_deprecations(deprecations, ignored)
    if len(active) == 0:
        return RuntimeCondition(type=CONTAINERD_HAS_NO_DEPRECATION_WARNINGS, status=True)

    logger.debug(f"{len(active)} active deprecation warning(s): {[d.id for d in active]}")
    return RuntimeCondition(
        type=CONTAINERD_HAS_NO_DEPRECATION_WARNINGS,
        status=False,
        reason=CONTAINERD_HAS_DEPRECATION_WARNINGS,
        message=encode_deprecations(active),
    )


def build_readiness_conditions(network_ready: bool, runtime_ready: bool, network_error: Optional[str] = None) -> List[RuntimeCondition]:
    runtime_condition = RuntimeCondition(type=RUNTIME_READY, status=runtime_ready)
    if not runtime_ready:
        runtime_condition.reason = RUNTIME_NOT_READY_REASON

    network_condition = RuntimeCondition(type=NETWORK_READY, status=network_ready)
    if not network_ready:
        network_condition.reason = NETWORK_NOT_READY_REASON
        if network_error:
            network_condition.message = f"Network plugin returns error: {network_error}"

    return [runtime_condition, network_condition]
