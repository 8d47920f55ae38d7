#!/usr/bin/env -S python -u

'''
Copyright 2009, The Android Open Source Project

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

  http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
'''

# Print several blocks of text side by side, each wrapped to its own width.
# Words are never split unless they are wider than their column, and shorter
# columns are padded with blank lines until every column is done.

import argparse
import io
import logging
import re
import sys

from column import Column, ColumnCursor

__version__ = '1.0.0'

DEFAULT_WIDTH = 80
TAB_STOP = 8

logger = logging.getLogger(__name__)


def emit_col(out, cursor, column):
  # consume ch; stop on a line break, otherwise emit it
  while not cursor.is_full(column):
    ch = cursor.consume(column)
    if ch is None or cursor.is_line_break(ch, column):
      break
    cursor.emit(out, ch)


def switch_col(out, cursor, width, fill, sep):
  inc = TAB_STOP if fill == '\t' else 1
  for _ in range(cursor.line_pos, width, inc):
    out.write(fill)
  out.write(sep)


def is_unconsumed(cursors, columns):
  return any(not cursor.at_end(column) for cursor, column in zip(cursors, columns))


def as_column(col):
  if isinstance(col, Column):
    return col
  text, width = col
  return Column(text, width)


def tabulate(out, *cols, sep=' ', fill=' '):
  '''
    Write one or more columns of text into `out`, line by line.

    Every column is wrapped to its own width and aligned to the left. Between
    the last character a column puts on a line and the separator, the line is
    padded with `fill`; a tab fill advances eight positions at a time. The
    last column is neither padded nor followed by `sep`. Output stops when
    every column has been consumed, so a column that runs out early keeps
    printing as blank padding.

    `cols` are Column objects or (text, width) pairs. `out` only needs a
    write() method; it is returned so the call can be chained:

      tabulate(sys.stdout, ('abc def ghi', 6), ('123 4432 17 8989', 4),
               sep=' | ').flush()

    The work done is linear in the total length of the texts.
  '''
  columns = [as_column(col) for col in cols]
  cursors = [ColumnCursor() for _ in columns]
  last = len(columns) - 1

  while is_unconsumed(cursors, columns):
    for i, (cursor, column) in enumerate(zip(cursors, columns)):
      emit_col(out, cursor, column)
      if i < last:
        switch_col(out, cursor, column.width, fill, sep)
      cursor.break_line()
    out.write('\n')

  return out


def tabulate_str(*cols, sep=' ', fill=' '):
  return tabulate(io.StringIO(), *cols, sep=sep, fill=fill).getvalue()


def terminal_width(default=DEFAULT_WIDTH):
  try:
    # Get the current terminal width
    import fcntl, termios, struct
    h, width = struct.unpack('hh', fcntl.ioctl(0, termios.TIOCGWINSZ, struct.pack('hh', 0, 0)))
  except (ImportError, OSError):
    return default
  return width if width > 0 else default


COLUMN_ARG = re.compile(r'^(.*):(-?\d+)$', re.DOTALL)

def column_arg(value):
  match = COLUMN_ARG.match(value)
  if match is None:
    return value, None
  source, width = match.group(1), int(match.group(2))
  if width < 1:
    raise argparse.ArgumentTypeError('column width must be positive: %r' % value)
  return source, width

def unescape(value):
  return value.replace('\\t', '\t').replace('\\n', '\n')

def fill_arg(value):
  value = unescape(value)
  if len(value) != 1:
    raise argparse.ArgumentTypeError('fill must be a single character: %r' % value)
  return value

def width_arg(value):
  width = int(value)
  if width < 1:
    raise argparse.ArgumentTypeError('width must be positive: %r' % value)
  return width


def make_parser():
  parser = argparse.ArgumentParser(prog='tabulator', description='Print text side by side in word-wrapped columns')
  parser.add_argument('columns', nargs='+', metavar='COLUMN', type=column_arg, help='Column source as SOURCE[:WIDTH]; SOURCE is a file or - for stdin')
  parser.add_argument('-s', '--separator', dest='sep', type=unescape, default=' | ', help='String printed between columns')
  parser.add_argument('-f', '--fill', dest='fill', type=fill_arg, default=' ', help='Character padding each column up to its width')
  parser.add_argument('-w', '--width', dest='total_width', type=width_arg, default=None, help='Total width shared by columns without an explicit width (default: terminal width)')
  parser.add_argument('-t', '--text', dest='literal', action='store_true', help='Treat each SOURCE as the column text itself')
  parser.add_argument('--debug', dest='debug', action='store_true', help='Log column layout to stderr')
  parser.add_argument('-v', '--version', action='version', version='%(prog)s ' + __version__, help='Print the version number and exit')
  return parser


def resolve_widths(widths, total_width, sep):
  '''Give columns without a width an even share of what is left of total_width.'''
  unsized = widths.count(None)
  if unsized == 0:
    return list(widths)
  used = sum(w for w in widths if w is not None) + len(sep) * (len(widths) - 1)
  share = max(1, (total_width - used) // unsized)
  return [share if w is None else w for w in widths]


def read_sources(parser, sources, literal):
  if literal:
    return list(sources)
  if sources.count('-') > 1:
    parser.error('standard input can only be used for one column')
  texts = []
  for source in sources:
    if source == '-':
      texts.append(sys.stdin.read())
      continue
    try:
      with open(source) as f:
        texts.append(f.read())
    except OSError as e:
      parser.error('cannot read %s: %s' % (source, e.strerror or e))
  return texts


def main(argv=None):
  parser = make_parser()
  args = parser.parse_args(argv)

  logging.basicConfig(stream=sys.stderr, format='%(name)s: %(message)s')
  logger.setLevel(logging.DEBUG if args.debug else logging.WARNING)

  sources = [source for source, _ in args.columns]
  total_width = args.total_width
  if total_width is None:
    total_width = terminal_width()
  widths = resolve_widths([width for _, width in args.columns], total_width, args.sep)
  texts = read_sources(parser, sources, args.literal)

  columns = []
  for source, text, width in zip(sources, texts, widths):
    logger.debug('column %d: %s, %d chars, width %d', len(columns), source if not args.literal else '<text>', len(text), width)
    columns.append(Column(text, width))

  tabulate(sys.stdout, *columns, sep=args.sep, fill=args.fill)
  sys.stdout.flush()
  return 0


if __name__ == '__main__':
  sys.exit(main())
