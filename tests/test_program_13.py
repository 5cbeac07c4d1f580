from pathlib import Path

from pylox import run

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_13_multiple_parse_errors(capsys):
    with open(EXAMPLES / 'program_13.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    diagnostics = run(source)
    captured = capsys.readouterr()
    # nothing runs when the program has syntax errors
    assert captured.out == ''
    assert diagnostics.had_error
    assert not diagnostics.had_runtime_error
    assert diagnostics.messages == [
        "[line 3] Error at ';': Expect expression.",
        "[line 6] Error at ';': Expect ')' after expression.",
    ]
