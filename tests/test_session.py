import io

from pylox import Session, run
from pylox.session import EXIT_COMPILE_ERROR, EXIT_RUNTIME_ERROR


def test_run_returns_fresh_diagnostics_each_call(capsys):
    first = run('print ;')
    second = run('print 1;')
    assert first.had_error
    assert not second.had_error
    assert capsys.readouterr().out.strip() == '1'


def test_compile_errors_prevent_execution(capsys):
    diagnostics = run('print "side effect"; print 1 +;')
    captured = capsys.readouterr()
    assert captured.out == ''
    assert diagnostics.had_error
    assert "[line 1] Error at ';': Expect expression." in captured.err


def test_lexical_error_prevents_execution(capsys):
    diagnostics = run('print "ok"; @')
    assert diagnostics.had_error
    assert capsys.readouterr().out == ''


def test_run_file_exit_codes(tmp_path, capsys):
    ok = tmp_path / 'ok.lox'
    ok.write_text('print "fine";', encoding='utf-8')
    bad_syntax = tmp_path / 'syntax.lox'
    bad_syntax.write_text('print (;', encoding='utf-8')
    bad_runtime = tmp_path / 'runtime.lox'
    bad_runtime.write_text('print 1 / 0;', encoding='utf-8')

    assert Session().run_file(str(ok)) == 0
    assert Session().run_file(str(bad_syntax)) == EXIT_COMPILE_ERROR
    assert Session().run_file(str(bad_runtime)) == EXIT_RUNTIME_ERROR
    assert 'fine' in capsys.readouterr().out


def test_prompt_keeps_globals_and_resets_compile_flag(capsys):
    lines = io.StringIO('var a = 1;\nprint a +;\na = a + 1;\nprint a;\n')
    session = Session()
    session.run_prompt(lines)
    captured = capsys.readouterr()
    assert '2' in captured.out.split()
    assert 'Expect expression.' in captured.err
    # a syntax error on one line does not poison the following lines
    assert not session.diagnostics.had_error


def test_prompt_continues_after_runtime_error(capsys):
    lines = io.StringIO('print nope;\nprint "still here";\n')
    session = Session()
    session.run_prompt(lines)
    captured = capsys.readouterr()
    assert 'still here' in captured.out
    assert "Undefined variable 'nope'." in captured.err
