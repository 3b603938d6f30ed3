import sys

from procparse.picoshell import picoshell


def _python(code):
    return [sys.executable, "-c", code]


def test_single_command_output_reaches_stdout(capfd):
    assert picoshell([_python("print('hello')")]) == 0
    assert capfd.readouterr().out == "hello\n"


def test_two_stage_pipeline_passes_data(capfd):
    cmds = [
        _python("print('alpha beta')"),
        _python("import sys; sys.stdout.write(sys.stdin.read().upper())"),
    ]
    assert picoshell(cmds) == 0
    assert capfd.readouterr().out == "ALPHA BETA\n"


def test_three_stage_pipeline(capfd):
    cmds = [
        _python("print('one two three')"),
        _python("import sys; print('\\n'.join(sys.stdin.read().split()))"),
        _python("import sys; print(len(sys.stdin.read().splitlines()))"),
    ]
    assert picoshell(cmds) == 0
    assert capfd.readouterr().out.strip() == "3"


def test_empty_command_list_succeeds():
    assert picoshell([]) == 0


def test_failing_last_command_reports_failure():
    assert picoshell([_python("pass"), _python("raise SystemExit(4)")]) == 1


def test_failing_first_command_reports_failure(capfd):
    cmds = [_python("raise SystemExit(2)"), _python("import sys; print(repr(sys.stdin.read()))")]
    assert picoshell(cmds) == 1
    assert capfd.readouterr().out == "''\n"


def test_missing_program_counts_as_failure(capfd):
    cmds = [
        ["procparse-no-such-program-here"],
        _python("import sys; print(repr(sys.stdin.read()))"),
    ]
    assert picoshell(cmds) == 1
    assert capfd.readouterr().out == "''\n"


def test_empty_argv_counts_as_failure():
    assert picoshell([[]]) == 1


def test_signalled_command_counts_as_failure():
    code = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"
    assert picoshell([_python(code)]) == 1


def test_all_commands_are_run_even_after_failure(tmp_path):
    marker = tmp_path / "ran"
    cmds = [
        _python("raise SystemExit(1)"),
        _python(f"open({str(marker)!r}, 'w').write('x')"),
    ]
    assert picoshell(cmds) == 1
    assert marker.read_text() == "x"