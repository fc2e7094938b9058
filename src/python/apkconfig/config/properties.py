# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging
import re
import string

from apkconfig.base.exceptions import ConfigParseError


logger = logging.getLogger(__name__)


class Properties(object):
  """A read-only set of key=value pairs read from a java-style .properties file.

  Parsing follows java.util.Properties#load, which is what the gradle build reads these files
  with: the file is latin-1, `#` and `!` start comment lines, a line ending in an odd number of
  backslashes continues on the next one and keys are separated from values by `=`, `:` or
  whitespace.
  """

  Error = ConfigParseError

  _NEWLINE = re.compile(r'\r\n|\r|\n')
  _WHITESPACE = ' \t\f'
  _SEPARATORS = '=:'
  _ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}

  @classmethod
  def load(cls, path):
    """Read and parse the properties file at `path`.

    :raises: ConfigParseError if the file cannot be read or is malformed.
    """
    try:
      with open(path, 'rb') as fp:
        content = fp.read()
    except IOError as e:
      raise ConfigParseError(path, 'Unable to read properties: {0}'.format(e))
    logger.debug('Read properties from {0}.'.format(path))
    return cls.loads(content.decode('latin-1'), source=path)

  @classmethod
  def loads(cls, text, source='<string>'):
    """Parse properties from a string."""
    entries = {}
    for lineno, line in cls._logical_lines(text):
      key, value = cls._split_entry(line)
      entries[cls._unescape(key, source, lineno)] = cls._unescape(value, source, lineno)
    return cls(entries)

  @classmethod
  def _logical_lines(cls, text):
    """Yield (lineno, line) for each logical line, with continuations joined."""
    buf = None
    start = None
    for lineno, natural_line in enumerate(cls._NEWLINE.split(text), start=1):
      line = natural_line.lstrip(cls._WHITESPACE)
      if buf is None:
        if not line or line[0] in '#!':
          continue
        buf, start = line, lineno
      else:
        buf += line
      trailing = len(buf) - len(buf.rstrip('\\'))
      if trailing % 2:
        buf = buf[:-1]
        continue
      yield start, buf
      buf = None
    if buf is not None:
      yield start, buf

  @classmethod
  def _split_entry(cls, line):
    index = 0
    while index < len(line):
      char = line[index]
      if char == '\\':
        index += 2
        continue
      if char in cls._SEPARATORS or char in cls._WHITESPACE:
        break
      index += 1
    key = line[:index]
    value = line[index:].lstrip(cls._WHITESPACE)
    if value and value[0] in cls._SEPARATORS:
      value = value[1:].lstrip(cls._WHITESPACE)
    return key, value

  @classmethod
  def _unescape(cls, text, source, lineno):
    if '\\' not in text:
      return text
    chars = []
    index = 0
    while index < len(text):
      char = text[index]
      index += 1
      if char != '\\':
        chars.append(char)
        continue
      if index == len(text):
        # A dangling backslash at the end of the file is dropped.
        break
      char = text[index]
      index += 1
      if char == 'u':
        digits = text[index:index + 4]
        if len(digits) != 4 or not all(d in string.hexdigits for d in digits):
          raise ConfigParseError(source, 'Malformed \\uxxxx encoding: \\u{0}'.format(digits),
                                 lineno=lineno)
        chars.append(chr(int(digits, 16)))
        index += 4
      else:
        chars.append(cls._ESCAPES.get(char, char))
    return ''.join(chars)

  def __init__(self, entries=None):
    self._entries = dict(entries or {})

  def get_property(self, key, default=None):
    """Return the value for `key`, or `default` when the key is absent."""
    return self._entries.get(key, default)

  def items(self):
    return self._entries.items()

  def __contains__(self, key):
    return key in self._entries

  def __iter__(self):
    return iter(self._entries)

  def __len__(self):
    return len(self._entries)

  def __eq__(self, other):
    return isinstance(other, Properties) and self._entries == other._entries

  def __ne__(self, other):
    return not self == other

  def __repr__(self):
    return '{0}({1})'.format(self.__class__.__name__, sorted(self._entries))
