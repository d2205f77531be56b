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

"""Declarative schema types and the generic walker that applies them.

A schema is a tree of specs. Each ``ObjectSpec`` lists its fields in the
order they are checked; every field names the kind of node it expects and,
for scalars, an optional value check. The walker compares a composed YAML
node tree against the spec and accumulates diagnostics without raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

import yaml

from .diagnostic import Diagnostic
from ..parsing.nodes import (
    get_map_field,
    integer_value,
    is_integer,
    is_mapping,
    is_sequence,
    is_string,
    node_column,
    node_line,
)


JsonPointer = str

# (field name, scalar node) -> message, or None when the value is acceptable
ValueCheck = Callable[[str, yaml.ScalarNode], Optional[str]]


@dataclass(frozen=True)
class ScalarSpec:
    kind: str
    check: Optional[ValueCheck] = None


@dataclass(frozen=True)
class ObjectSpec:
    fields: Dict[str, "FieldSpec"] = field(default_factory=dict)

    @property
    def kind(self) -> str:
        return "object"


@dataclass(frozen=True)
class ListSpec:
    item: ObjectSpec
    # Used in "<item_label> must be object" for non-mapping elements
    item_label: str

    @property
    def kind(self) -> str:
        return "array"


SchemaSpec = Union[ScalarSpec, ObjectSpec, ListSpec]


@dataclass(frozen=True)
class FieldSpec:
    spec: SchemaSpec
    required: bool = False
    # A blocking field that is missing or of the wrong kind stops validation
    # of the remaining fields in the same object.
    blocking: bool = False


_KIND_PREDICATES = {
    "string": is_string,
    "int": is_integer,
    "object": is_mapping,
    "array": is_sequence,
}


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _join_path(base: Optional[JsonPointer], token: str) -> JsonPointer:
    if not base:
        return f"/{_jp_escape(token)}"
    return f"{base}/{_jp_escape(token)}"


def _at(node: yaml.Node, message: str, path: JsonPointer) -> Diagnostic:
    return Diagnostic(
        message=message,
        line=node_line(node),
        column=node_column(node),
        yaml_path=path,
    )


# -------------------------
# Value checks
# -------------------------

def one_of(*allowed: str) -> ValueCheck:
    def _check(name: str, node: yaml.ScalarNode) -> Optional[str]:
        if node.value in allowed:
            return None
        return f"{name} has unsupported value '{node.value}'"

    return _check


def matches(predicate: Callable[[str], bool]) -> ValueCheck:
    def _check(name: str, node: yaml.ScalarNode) -> Optional[str]:
        if predicate(node.value):
            return None
        return f"{name} has invalid format '{node.value}'"

    return _check


def non_empty() -> ValueCheck:
    # An empty value is reported exactly like a missing one.
    def _check(name: str, node: yaml.ScalarNode) -> Optional[str]:
        if node.value != "":
            return None
        return f"{name} is required"

    return _check


def in_range(low: int, high: int) -> ValueCheck:
    """Inclusive integer range check; unconstructible ints are out of range."""

    def _check(name: str, node: yaml.ScalarNode) -> Optional[str]:
        value = integer_value(node)
        if value is not None and low <= value <= high:
            return None
        return f"{name} value out of range"

    return _check


# -------------------------
# Walker
# -------------------------

def validate_document(spec: ObjectSpec, root: Optional[yaml.Node]) -> List[Diagnostic]:
    """Validate a document's top-level node against ``spec``.

    A missing or non-mapping top node yields a single diagnostic and nothing
    else is checked.
    """
    if root is None:
        return [Diagnostic(message="document is required")]
    if not is_mapping(root):
        return [_at(root, "document must be object", "")]

    issues: List[Diagnostic] = []
    _validate_object(spec, root, "", issues)
    return issues


def _validate_object(
    spec: ObjectSpec, node: yaml.MappingNode, path: JsonPointer, issues: List[Diagnostic]
) -> None:
    for field_name, field_spec in spec.fields.items():
        field_path = _join_path(path, field_name)
        key_node, value_node = get_map_field(node, field_name)

        if key_node is None:
            if field_spec.required:
                issues.append(Diagnostic(message=f"{field_name} is required", yaml_path=field_path))
            if field_spec.blocking:
                return
            continue

        kind_ok = _validate_field(field_name, field_spec.spec, key_node, value_node, field_path, issues)
        if not kind_ok and field_spec.blocking:
            return


def _validate_field(
    name: str,
    spec: SchemaSpec,
    key_node: yaml.Node,
    value_node: yaml.Node,
    path: JsonPointer,
    issues: List[Diagnostic],
) -> bool:
    """Check one present field. Returns False if the value has the wrong kind."""
    if not _KIND_PREDICATES[spec.kind](value_node):
        issues.append(_at(key_node, f"{name} must be {spec.kind}", path))
        return False

    if isinstance(spec, ScalarSpec):
        if spec.check is not None:
            message = spec.check(name, value_node)
            if message is not None:
                issues.append(_at(key_node, message, path))
    elif isinstance(spec, ObjectSpec):
        _validate_object(spec, value_node, path, issues)
    elif isinstance(spec, ListSpec):
        for idx, item in enumerate(value_node.value):
            item_path = f"{path}/{idx}"
            if not is_mapping(item):
                issues.append(_at(item, f"{spec.item_label} must be object", item_path))
                continue
            _validate_object(spec.item, item, item_path, issues)
    return True
