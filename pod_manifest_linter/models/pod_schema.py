# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""The fixed schema for Pod manifests."""

import re

from .yaml_schema import (
    FieldSpec,
    ListSpec,
    ObjectSpec,
    ScalarSpec,
    in_range,
    matches,
    non_empty,
    one_of,
)


IMAGE_REGISTRY_PREFIX = "registry.bigbrother.io/"

SNAKE_CASE_RE = re.compile(r"[a-z0-9]+(?:_[a-z0-9]+)*")
MEMORY_RE = re.compile(r"[0-9]+(?:Gi|Mi|Ki)")

MIN_PORT = 1
MAX_PORT = 65535


def is_snake_case(value: str) -> bool:
    return SNAKE_CASE_RE.fullmatch(value) is not None


def is_valid_memory(value: str) -> bool:
    return MEMORY_RE.fullmatch(value) is not None


def is_valid_image(value: str) -> bool:
    """Check an image reference against the internal registry rules.

    The reference must live under ``registry.bigbrother.io/`` and end in a
    non-empty tag after the last colon.
    """
    if not value.startswith(IMAGE_REGISTRY_PREFIX):
        return False
    rest = value[len(IMAGE_REGISTRY_PREFIX):]
    colon = rest.rfind(":")
    if colon == -1:
        return False
    return rest[colon + 1:] != ""


def is_absolute_path(value: str) -> bool:
    return value.startswith("/")


_STR = ScalarSpec("string")
_INT = ScalarSpec("int")
_PORT = ScalarSpec("int", in_range(MIN_PORT, MAX_PORT))


RESOURCE_QUANTITIES = ObjectSpec(
    fields={
        "cpu": FieldSpec(_INT),
        "memory": FieldSpec(ScalarSpec("string", matches(is_valid_memory))),
    }
)

RESOURCES = ObjectSpec(
    fields={
        "limits": FieldSpec(RESOURCE_QUANTITIES),
        "requests": FieldSpec(RESOURCE_QUANTITIES),
    }
)

HTTP_GET_ACTION = ObjectSpec(
    fields={
        "path": FieldSpec(ScalarSpec("string", matches(is_absolute_path)), required=True),
        "port": FieldSpec(_PORT, required=True),
    }
)

PROBE = ObjectSpec(
    fields={
        "httpGet": FieldSpec(HTTP_GET_ACTION, required=True, blocking=True),
    }
)

CONTAINER_PORT = ObjectSpec(
    fields={
        "containerPort": FieldSpec(_PORT, required=True),
        "protocol": FieldSpec(ScalarSpec("string", one_of("TCP", "UDP"))),
    }
)

CONTAINER = ObjectSpec(
    fields={
        "name": FieldSpec(ScalarSpec("string", matches(is_snake_case)), required=True),
        "image": FieldSpec(ScalarSpec("string", matches(is_valid_image)), required=True),
        "ports": FieldSpec(ListSpec(CONTAINER_PORT, item_label="port")),
        "readinessProbe": FieldSpec(PROBE),
        "livenessProbe": FieldSpec(PROBE),
        "resources": FieldSpec(RESOURCES, required=True),
    }
)

POD_SPEC = ObjectSpec(
    fields={
        "os": FieldSpec(ScalarSpec("string", one_of("linux", "windows"))),
        "containers": FieldSpec(ListSpec(CONTAINER, item_label="container"), required=True, blocking=True),
    }
)

OBJECT_META = ObjectSpec(
    fields={
        "name": FieldSpec(ScalarSpec("string", non_empty()), required=True),
        "namespace": FieldSpec(_STR),
        # label contents are free-form
        "labels": FieldSpec(ObjectSpec()),
    }
)

POD = ObjectSpec(
    fields={
        "apiVersion": FieldSpec(ScalarSpec("string", one_of("v1")), required=True),
        "kind": FieldSpec(ScalarSpec("string", one_of("Pod")), required=True),
        "metadata": FieldSpec(OBJECT_META, required=True),
        "spec": FieldSpec(POD_SPEC, required=True),
    }
)
