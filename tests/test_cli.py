#!/usr/bin/env python3
"""
Command line runner.
"""

import os
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfinterp.cli import format_memory, main


@pytest.fixture
def script(tmp_path):
    def write(code, name='prog.bf'):
        path = tmp_path / name
        path.write_text(code)
        return str(path)
    return write


def test_prints_output(script, capsys):
    assert main([script('+' * 65 + '.')]) == 0
    assert capsys.readouterr().out == 'A\n'


def test_quiet(script, capsys):
    assert main([script('+' * 65 + '.'), '--quiet']) == 0
    assert capsys.readouterr().out == ''


def test_input_and_strip(script, capsys):
    assert main([script('echo two\n,.,.\n'), '--strip', '--input', 'ok']) == 0
    assert capsys.readouterr().out == 'ok\n'


def test_input_file(script, capsys):
    code = script(',.,.')
    data = script('xy', name='input.txt')
    assert main([code, '--input-file', data]) == 0
    assert capsys.readouterr().out == 'xy\n'


def test_timing_and_dump(script, capsys):
    assert main([script('+>++>+++'), '--quiet', '--timing', '--dump', '4']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith('Execution took ')
    assert lines[1:] == ['================', '1 2 3 0']


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / 'nope.bf')]) == 1
    assert 'file not found' in capsys.readouterr().err


def test_undecodable_script(tmp_path, capsys):
    path = tmp_path / 'bad.bf'
    path.write_bytes(b'+\xff')
    assert main([str(path)]) == 1
    assert 'cannot read' in capsys.readouterr().err


def test_directory_as_input_file(script, tmp_path, capsys):
    assert main([script(',.'), '--input-file', str(tmp_path)]) == 1
    assert 'cannot read' in capsys.readouterr().err


def test_lone_surrogate_output(script, capsys):
    assert main([script('-' * 10240 + '.')]) == 0
    assert capsys.readouterr().out == '\\ud800\n'


def test_interpreter_error_goes_to_stderr(script, capsys):
    assert main([script('+>', name='small.bf'), '--memory-words', '1']) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'PointerRange' in captured.err


def test_bad_memory_words(script):
    with pytest.raises(SystemExit) as info:
        main([script('+'), '--memory-words', '0'])
    assert info.value.code == 2


def test_format_memory():
    assert format_memory(list(range(10)), 10) == '0 1 2 3 4 5 6 7\n8 9'
    assert format_memory([5, 6], 8) == '5 6'
