from pathlib import Path

from pylox import run

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_14_first_class_functions(capsys):
    with open(EXAMPLES / 'program_14.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    run(source)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['7', '<fn addThree>', '<native fn>', 'true', 'false']
