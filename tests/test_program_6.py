from pathlib import Path

from pylox import run

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_for_scope(capsys):
    with open(EXAMPLES / 'program_6.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    diagnostics = run(source)
    captured = capsys.readouterr()
    assert captured.out.strip().split('\n') == ['0', '1', '2']
    # the loop variable is gone once the loop's block exits
    assert diagnostics.had_runtime_error
    assert not diagnostics.had_error
    assert "Undefined variable 'i'." in captured.err
    assert '[line 3]' in captured.err
