"""
Tests for JSON hydration and serialization of source nodes.
"""

import json

import pytest

from tinyc.enums import ValueType
from tinyc.errors import UnknownNodeType
from tinyc.syntax import from_dict, parse, to_dict
from tinyc.syntax.nodes import Declaration, Identifier, Literal, OutputStatement, SourceLocation


def test_from_dict_builds_nodes(assign_program):
  data = {
    "type": "Tiny",
    "declarations": [{"type": "Declaration", "ids": [{"type": "Identifier", "name": "x"}], "valueType": "integer"}],
    "body": {
      "type": "BlockStatement",
      "body": [
        {
          "type": "AssignmentStatement",
          "left": {"type": "Identifier", "name": "x"},
          "right": {"type": "Literal", "value": 1},
        }
      ],
    },
  }
  tree = from_dict(data)
  assert tree == assign_program
  assert isinstance(tree.declarations, tuple)


def test_value_type_uses_camel_case_key():
  decl = Declaration(ids=(Identifier("f"),), value_type=ValueType.BOOLEAN)
  data = to_dict(decl)
  assert data == {"type": "Declaration", "ids": [{"type": "Identifier", "name": "f"}], "valueType": "boolean"}


def test_unknown_type_is_rejected():
  with pytest.raises(UnknownNodeType) as exc:
    from_dict({"type": "OutputStatement", "value": {"type": "Bogus"}})
  assert exc.value.tag == "Bogus"


def test_untagged_values_pass_through():
  assert from_dict({"name": "x"}) == {"name": "x"}
  assert from_dict(3) == 3


def test_location_only_when_requested():
  node = OutputStatement(Literal(1, location=SourceLocation(1, 8)), location=SourceLocation(1, 1))
  assert "location" not in to_dict(node)

  data = to_dict(node, include_location=True)
  assert data["location"] == {"line": 1, "column": 1}
  assert data["value"]["location"] == {"line": 1, "column": 8}

  restored = from_dict(data)
  assert restored.location == SourceLocation(1, 1)
  assert restored.value.location == SourceLocation(1, 8)


def test_parsed_tree_survives_json(countdown_source):
  tree = parse(countdown_source)
  text = json.dumps(to_dict(tree))
  assert from_dict(json.loads(text)) == tree
