import json

import pytest

from pylox.ast_json import ast_from_obj, ast_to_obj, program_from_obj, program_to_obj
from pylox.parser import Parser
from pylox.scanner import tokenize

SOURCE = '''
var total = 0;
fun add(a, b) { return a + b; }
for (var i = 0; i < 3; i = i + 1) {
  if (i == 1 and !false) total = add(total, i); else print "skip" + i;
}
while (total < 10) total = (total, total + 5);
print total or nil;
'''


def test_program_round_trip_through_json():
    statements = Parser(tokenize(SOURCE)).parse()
    text = json.dumps(program_to_obj(statements))
    restored = program_from_obj(json.loads(text))
    assert restored == statements


def test_number_literals_stay_floats():
    statements = Parser(tokenize('print 3;')).parse()
    obj = program_to_obj(statements)
    obj[0]['expression']['value'] = 3  # as a JSON encoder might write it
    restored = program_from_obj(obj)
    assert isinstance(restored[0].expression.value, float)


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'Class'})


def test_unsupported_object():
    with pytest.raises(TypeError):
        ast_to_obj(object())
