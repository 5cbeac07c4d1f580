"""CLI entry point for the Lox interpreter.

Usage:
    python -m pylox [-v|-vv|-vvv] [script]
    python -m pylox [-v...] --emit-ast <script>
    python -m pylox [-v...] --print-ast <script>
    python -m pylox [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given script and write an AST JSON file next to it
  --print-ast   Parse the given script and print its AST in prefix form
  --ast         Execute a previously emitted AST JSON file

Without a script the interpreter starts an interactive prompt. A script
with syntax errors exits with status 65 and one that fails at run time
exits with status 70. Debug information is written to `debug.txt` in the
current directory when verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import program_from_obj, program_to_obj
from .errors import InternalError
from .printer import AstPrinter
from .session import EXIT_COMPILE_ERROR, EXIT_RUNTIME_ERROR, Session


def read_existing(path_arg: str) -> str:
    path = Path(path_arg)
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    return path.read_text(encoding='utf-8')


def exit_if_failed(session: Session) -> None:
    code = session.exit_code()
    if code:
        sys.exit(code)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='pylox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='SCRIPT', help='emit AST JSON for the given script')
    group.add_argument('--print-ast', metavar='SCRIPT', help='print the parsed AST of the given script')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='?', help='Lox script to execute; omit for an interactive prompt')
    args = parser.parse_args(argv)

    session = Session(debug_level=args.v)
    try:
        # Emit AST mode
        if args.emit_ast:
            statements = session.parse(read_existing(args.emit_ast))
            if session.diagnostics.had_error:
                sys.exit(EXIT_COMPILE_ERROR)
            script = Path(args.emit_ast)
            out_path = script.with_name(script.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
            print(str(out_path))
            return

        if args.print_ast:
            statements = session.parse(read_existing(args.print_ast))
            if session.diagnostics.had_error:
                sys.exit(EXIT_COMPILE_ERROR)
            print(AstPrinter().print_program(statements))
            return

        # Execute from AST JSON
        if args.ast:
            statements = program_from_obj(json.loads(read_existing(args.ast)))
            session.execute(statements)
            exit_if_failed(session)
            return

        if args.script is None:
            session.run_prompt()
            return

        session.run(read_existing(args.script))
        exit_if_failed(session)
    except InternalError as e:
        print(f"Internal error: {e}", file=sys.stderr)
        sys.exit(EXIT_RUNTIME_ERROR)
    finally:
        session.close()


if __name__ == '__main__':
    main()
