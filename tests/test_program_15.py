from pathlib import Path

from pylox import run

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_15_arity_mismatch(capsys):
    with open(EXAMPLES / 'program_15.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    diagnostics = run(source)
    captured = capsys.readouterr()
    # the failing call never starts executing the body
    assert captured.out.strip().split('\n') == ['Hello, Ada']
    assert 'Expected 2 arguments but got 1.' in captured.err
    assert '[line 7]' in captured.err
    assert diagnostics.had_runtime_error
