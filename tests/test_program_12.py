from pathlib import Path

from pylox import run

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_12_runtime_error_stops_run(capsys):
    with open(EXAMPLES / 'program_12.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    diagnostics = run(source)
    captured = capsys.readouterr()
    assert captured.out.strip() == 'before'
    assert captured.err.strip().split('\n') == ['Operands must be of same type.', '[line 3]']
    assert diagnostics.had_runtime_error
    assert not diagnostics.had_error
