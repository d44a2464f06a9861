import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
import requests

import solver
import utils
import wordlist
from solver import EXIT_INVALID_ORDER, EXIT_NO_INPUT, EXIT_OK, run_solver


@pytest.fixture(autouse=True)
def reset_verbose(monkeypatch):
    monkeypatch.setattr(utils, 'VERBOSE', False)


def test_inline_words(capsys):
    code = run_solver(['--words', 'wrt', 'wrf', 'er', 'ett', 'rftt'])
    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert captured.out == 'wertf\n'


def test_inline_words_are_normalized(capsys):
    code = run_solver(['--words', 'WRT', ' Wrf ', 'ER', 'ett', 'RFTT'])
    assert code == EXIT_OK
    assert capsys.readouterr().out == 'wertf\n'


def test_file_input(tmp_path, capsys):
    path = tmp_path / 'words.txt'
    path.write_text('wrt\nwrf\n\ner\nett\nrftt\n', encoding='utf-8')
    code = run_solver(['--file', str(path)])
    assert code == EXIT_OK
    assert capsys.readouterr().out == 'wertf\n'


def test_missing_file(tmp_path, capsys):
    code = run_solver(['--file', str(tmp_path / 'missing.txt')])
    captured = capsys.readouterr()
    assert code == EXIT_NO_INPUT
    assert captured.out == ''
    assert 'Could not find word file' in captured.err


def test_no_input(capsys):
    code = run_solver([])
    captured = capsys.readouterr()
    assert code == EXIT_NO_INPUT
    assert 'No words supplied' in captured.err


def test_blank_words_only(capsys):
    assert run_solver(['--words', ' ', '']) == EXIT_NO_INPUT


def test_prefix_conflict_exit_code(capsys):
    code = run_solver(['--words', 'abc', 'ab'])
    captured = capsys.readouterr()
    assert code == EXIT_INVALID_ORDER
    assert captured.out == ''
    assert 'ERROR: Prefix conflict' in captured.err


def test_cycle_exit_code(capsys):
    code = run_solver(['--words', 'a', 'b', 'c', 'a'])
    captured = capsys.readouterr()
    assert code == EXIT_INVALID_ORDER
    assert captured.out == ''
    assert 'Cyclic constraint' in captured.err


def test_verbose_keeps_stdout_clean(capsys):
    code = run_solver(['--words', 'wrt', 'wrf', '--verbose'])
    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert captured.out == 'rtfw\n'
    assert '== Edges ==' in captured.err
    assert '-> f' in captured.err


def test_url_input(monkeypatch, capsys):
    class FakeResponse:
        text = 'wrt\nwrf\ner\nett\nrftt\n'

        def raise_for_status(self):
            pass

    monkeypatch.setattr(wordlist.requests, 'get', lambda url, timeout=None: FakeResponse())
    code = run_solver(['--url', 'http://example.test/words.txt'])
    assert code == EXIT_OK
    assert capsys.readouterr().out == 'wertf\n'


def test_url_failure(monkeypatch, capsys):
    def fail(url, timeout=None):
        raise requests.ConnectionError('unreachable')

    monkeypatch.setattr(wordlist.requests, 'get', fail)
    code = run_solver(['--url', 'http://example.test/words.txt', '--timeout', '1'])
    captured = capsys.readouterr()
    assert code == EXIT_NO_INPUT
    assert 'Could not download word list' in captured.err


def test_log_run(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert run_solver(['--words', 'abc', 'ab', '--log-run']) == EXIT_INVALID_ORDER
    assert run_solver(['--words', 'ab', 'b', '--log-run']) == EXIT_OK

    log_files = list((tmp_path / 'logs').glob('run_*.json'))
    assert len(log_files) == 1
    runs = json.loads(log_files[0].read_text(encoding='utf-8'))['runs']
    assert [r['result']['success'] for r in runs] == [False, True]
    assert runs[0]['result']['kind'] == 'prefix_conflict'
    assert runs[1]['words'] == ['ab', 'b']
    assert runs[1]['result']['order'] == 'ab'


def test_file_with_byte_order_mark(tmp_path, capsys):
    path = tmp_path / 'bom.txt'
    path.write_bytes(b'\xef\xbb\xbfwrt\nwrf\ner\nett\nrftt\n')
    assert run_solver(['--file', str(path)]) == EXIT_OK
    assert capsys.readouterr().out == 'wertf\n'


def test_directory_as_file(tmp_path, capsys):
    code = run_solver(['--file', str(tmp_path)])
    captured = capsys.readouterr()
    assert code == EXIT_NO_INPUT
    assert captured.out == ''
    assert 'Could not read word file' in captured.err


def test_file_not_utf8(tmp_path, capsys):
    path = tmp_path / 'latin1.txt'
    path.write_bytes(b'ab\n\xff\xfe\n')
    code = run_solver(['--file', str(path)])
    captured = capsys.readouterr()
    assert code == EXIT_NO_INPUT
    assert captured.out == ''
    assert 'Could not read word file' in captured.err


def test_main_exits_with_code(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'argv', ['alien-alphabet', '--words', 'abc', 'ab'])
    with pytest.raises(SystemExit) as exc:
        solver.main()
    assert exc.value.code == EXIT_INVALID_ORDER
