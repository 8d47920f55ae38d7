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

BLANK = ' \t'
WORD_DELIMITERS = BLANK + '\n'
NUL = '\0'


def is_blank(ch):
  return ch is not None and ch != '' and ch in BLANK


class Column(object):
  '''A block of text that wraps at its own width.'''

  def __init__(self, text, width):
    self._text = text
    self._size = len(text)
    self._width = width

  @classmethod
  def from_buffer(cls, buf, width):
    """Build a column from a NUL-terminated buffer (str, bytes or bytearray)"""
    if isinstance(buf, (bytes, bytearray)):
      buf = bytes(buf).decode('latin-1')
    end = buf.find(NUL)
    if end != -1:
      buf = buf[:end]
    return cls(buf, width)

  @property
  def text(self):
    return self._text

  @property
  def size(self):
    return self._size

  @property
  def width(self):
    """Number of characters a line of this column may hold"""
    return self._width

  def __copy__(self):
    # shares the text, there is nothing to duplicate
    return Column(self._text, self._width)

  def __eq__(self, other):
    if not isinstance(other, Column):
      return NotImplemented
    return (self._text, self._width) == (other._text, other._width)

  def __hash__(self):
    return hash((self._text, self._width))

  def __repr__(self):
    return 'Column(%r, %d)' % (self._text, self._width)


class ColumnCursor(object):
  '''
    Scan state for one column while it is being tabulated.

    `consume_pos` is the index of the next character of the column text to
    read, `line_pos` is how many characters this column has put on the
    current output line.
  '''

  def __init__(self):
    self.consume_pos = 0
    self.line_pos = 0

  def consume(self, column):
    if self.at_end(column):
      return None
    ch = column.text[self.consume_pos]
    self.consume_pos += 1
    return ch

  def at_end(self, column):
    return column.size <= self.consume_pos

  def is_line_break(self, ch, column):
    # ch is a newline, or a blank after which the next word cannot be emitted
    return ch == '\n' or (is_blank(ch) and not self.next_word_fits(column))

  def next_word_fits(self, column):
    text = column.text
    width = column.width
    l = self.line_pos
    i = self.consume_pos
    # line_pos will be at most width on the next delimiter
    while i < column.size and l < width:
      if text[i] in WORD_DELIMITERS:
        return True
      i += 1
      l += 1
    return l < width

  def is_full(self, column):
    '''
      True when the line has no room left and the next character continues
      a word, so the word has to be split here. The character is left for
      the next line.
    '''
    if self.line_pos == 0 or self.line_pos < column.width:
      return False
    if self.at_end(column):
      return False
    return column.text[self.consume_pos] not in WORD_DELIMITERS

  def emit(self, out, ch):
    out.write(ch)
    self.line_pos += 1
    return self

  def break_line(self):
    self.line_pos = 0
    return self
