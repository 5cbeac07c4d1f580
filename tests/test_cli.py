import io
import json
import sys

import pytest

from pylox.__main__ import main


def write_script(tmp_path, text, name='script.lox'):
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return path


def test_runs_script(tmp_path, capsys):
    script = write_script(tmp_path, 'print 1 + 2;')
    main([str(script)])
    assert capsys.readouterr().out.strip() == '3'


def test_compile_error_exit_status(tmp_path, capsys):
    script = write_script(tmp_path, 'print ;')
    with pytest.raises(SystemExit) as excinfo:
        main([str(script)])
    assert excinfo.value.code == 65


def test_runtime_error_exit_status(tmp_path, capsys):
    script = write_script(tmp_path, 'print "start"; print -"x";')
    with pytest.raises(SystemExit) as excinfo:
        main([str(script)])
    assert excinfo.value.code == 70
    captured = capsys.readouterr()
    assert captured.out.strip() == 'start'
    assert 'Operand must be a number.' in captured.err


def test_top_level_return_exits_as_internal_error(tmp_path, capsys):
    script = write_script(tmp_path, 'return 1;')
    with pytest.raises(SystemExit) as excinfo:
        main([str(script)])
    assert excinfo.value.code == 70
    assert 'Internal error: Return outside of a function.' in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / 'absent.lox')])
    assert excinfo.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_emit_ast_then_run_ast(tmp_path, capsys):
    script = write_script(tmp_path, 'fun sq(x) { return x * x; } print sq(4);')
    main(['--emit-ast', str(script)])
    out_path = capsys.readouterr().out.strip()
    assert out_path.endswith('script.lox.ast.json')
    data = json.loads(open(out_path, encoding='utf-8').read())
    assert [node['type'] for node in data] == ['Function', 'Print']

    main(['--ast', out_path])
    assert capsys.readouterr().out.strip() == '16'


def test_print_ast(tmp_path, capsys):
    script = write_script(tmp_path, 'var a = 1 + 2 * 3;\nprint a;')
    main(['--print-ast', str(script)])
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['(var a (+ 1.0 (* 2.0 3.0)))', '(print a)']


def test_interactive_prompt(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('var x = 2;\nprint x * 21;\n'))
    main([])
    assert '42' in capsys.readouterr().out


def test_verbose_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    script = write_script(tmp_path, 'var a = 1;')
    main(['-vv', str(script)])
    assert 'declare a = 1' in (tmp_path / 'debug.txt').read_text(encoding='utf-8')
