from pathlib import Path

from pylox import run

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_11_comma_operator(capsys):
    with open(EXAMPLES / 'program_11.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    run(source)
    out = capsys.readouterr().out.strip().split('\n')
    # every operand ran, left to right, and only the last value is kept
    assert out == ['c', 'abc']
