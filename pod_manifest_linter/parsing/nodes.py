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

"""Accessors and type predicates over composed PyYAML nodes."""

from typing import Optional, Tuple

import yaml
from yaml.constructor import ConstructorError, SafeConstructor

STR_TAG = "tag:yaml.org,2002:str"
INT_TAG = "tag:yaml.org,2002:int"

_int_constructor = SafeConstructor()


def node_line(node: Optional[yaml.Node]) -> Optional[int]:
    """1-based line on which ``node`` starts."""
    mark = getattr(node, "start_mark", None)
    if mark is None:
        return None
    # PyYAML uses 0-based line/column
    return int(mark.line) + 1


def node_column(node: Optional[yaml.Node]) -> Optional[int]:
    mark = getattr(node, "start_mark", None)
    if mark is None:
        return None
    return int(mark.column) + 1


def get_map_field(
    node: Optional[yaml.Node], field: str
) -> Tuple[Optional[yaml.Node], Optional[yaml.Node]]:
    """Find the (key, value) pair named ``field`` in a mapping node.

    Returns (None, None) when ``node`` is not a mapping or has no such key.
    Keys are scanned in document order and the first match wins.
    """
    if not isinstance(node, yaml.MappingNode):
        return None, None
    for key_node, value_node in node.value:
        if isinstance(key_node, yaml.ScalarNode) and key_node.value == field:
            return key_node, value_node
    return None, None


def is_mapping(node: Optional[yaml.Node]) -> bool:
    return isinstance(node, yaml.MappingNode)


def is_sequence(node: Optional[yaml.Node]) -> bool:
    return isinstance(node, yaml.SequenceNode)


def is_string(node: Optional[yaml.Node]) -> bool:
    return isinstance(node, yaml.ScalarNode) and node.tag == STR_TAG


def is_integer(node: Optional[yaml.Node]) -> bool:
    return isinstance(node, yaml.ScalarNode) and node.tag == INT_TAG


def integer_value(node: yaml.ScalarNode) -> Optional[int]:
    """Numeric value of an int-tagged scalar, or None if it cannot be built.

    Goes through PyYAML's own int constructor so that every spelling the
    resolver accepts (signs, ``0x``, ``0o``, underscores) gets its YAML value.
    """
    try:
        return _int_constructor.construct_yaml_int(node)
    except (ConstructorError, ValueError, IndexError):
        # IndexError: nothing left after dropping sign and underscores
        return None
