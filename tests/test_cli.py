import io
import logging
import sys

import pytest

from tabulator import __version__, main, resolve_widths


def test_literal_columns(capsys):
  assert main(['-t', '-s', ' | ', 'abc def ghi:6', '123 4432 17 8989:4']) == 0
  out = capsys.readouterr().out
  assert out.split('\n') == [
    'abc    | 123',
    'def    | 4432',
    'ghi    | 17',
    '      ' + ' | 8989',
    '',
  ]


def test_file_columns(tmp_path, capsys):
  left = tmp_path / 'left.txt'
  right = tmp_path / 'right.txt'
  left.write_text('one\ntwo\n')
  right.write_text('uno dos')
  main(['-s', '|', '%s:4' % left, '%s:3' % right])
  assert capsys.readouterr().out == 'one |uno\ntwo |dos\n'


def test_stdin_column(monkeypatch, capsys):
  monkeypatch.setattr(sys, 'stdin', io.StringIO('from stdin'))
  main(['-w', '5', '-'])
  assert capsys.readouterr().out == 'from\nstdin\n'


def test_fill_escape(capsys):
  main(['-t', '-s', '|', '-f', '\\t', 'abc:10', 'x:1'])
  assert capsys.readouterr().out == 'abc\t|x\n'


def test_unsized_columns_share_total_width(capsys):
  main(['-t', '-w', '11', '-s', '|', 'aaaa bbbb', 'cc'])
  assert capsys.readouterr().out == 'aaaa |cc\nbbbb |\n'


def test_resolve_widths():
  assert resolve_widths([None, 10, None], 40, ' | ') == [12, 10, 12]
  assert resolve_widths([3, 4], 80, ' ') == [3, 4]
  assert resolve_widths([None], 0, '') == [1]


@pytest.mark.parametrize('argv', [
  ['-t', 'abc:0'],
  ['-t', 'abc:-2'],
  ['-t', '-f', 'ab', 'abc:3'],
  ['-t', '-w', '0', 'abc'],
  ['-', '-'],
])
def test_bad_arguments_exit_with_usage_error(argv):
  with pytest.raises(SystemExit) as e:
    main(argv)
  assert e.value.code == 2


def test_missing_file_is_reported(tmp_path, capsys):
  with pytest.raises(SystemExit) as e:
    main([str(tmp_path / 'missing.txt') + ':5'])
  assert e.value.code == 2
  assert 'cannot read' in capsys.readouterr().err


def test_version(capsys):
  with pytest.raises(SystemExit) as e:
    main(['--version'])
  assert e.value.code == 0
  assert __version__ in capsys.readouterr().out


def test_debug_logs_layout(caplog, capsys):
  with caplog.at_level(logging.DEBUG, logger='tabulator'):
    main(['-t', '--debug', 'abc def ghi:6'])
  assert 'width 6' in caplog.text
  assert capsys.readouterr().out == 'abc\ndef\nghi\n'
