# Copyright 2016 Google Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Per-code-point Unicode metadata for dumping and inspection.

Wraps fontTools.unicodedata, which uses the unicodedata2 backport when it
is installed (so the data tracks the latest Unicode release) and Python's
own unicodedata otherwise.  Everything here takes integer code points, not
characters.

Code points that have no character name (controls, unassigned code points,
surrogates and so on) are described using the code point labels defined in
section 4.8 of the Unicode Standard, e.g. '<control-000A>'.
"""

import collections

from fontTools import unicodedata

MAX_CODE_POINT = 0x10ffff

_LABEL_PREFIXES = {
    'Cc': 'control',
    'Co': 'private-use',
    'Cs': 'surrogate',
    'Cn': 'reserved',
}

# General categories for which we don't emit the character itself.  These
# would otherwise break the one-line-per-code-point output or be invisible.
_NON_GRAPHIC_CATEGORIES = frozenset(['Cc', 'Cf', 'Cs', 'Co', 'Cn', 'Zl', 'Zp'])


def _check_cp(cp):
  if type(cp) is not int or cp < 0 or cp > MAX_CODE_POINT:
    raise ValueError('code point %r is not in range 0..%x' % (
        cp, MAX_CODE_POINT))


def unicode_version():
  """Returns the version of the Unicode Character Database in use."""
  return unicodedata.unidata_version


def is_noncharacter(cp):
  """Returns true if cp is one of the 66 noncharacter code points."""
  return 0xfdd0 <= cp <= 0xfdef or (cp & 0xfffe) == 0xfffe


def category(cp):
  """Returns the general category of a code point."""
  _check_cp(cp)
  return unicodedata.category(chr(cp))


def code_point_label(cp):
  """Returns the code point label for cp, e.g. '<reserved-0378>'.

  Labels are intended for code points without a character name; for graphic
  and format characters this returns None."""
  _check_cp(cp)
  if is_noncharacter(cp):
    prefix = 'noncharacter'
  else:
    prefix = _LABEL_PREFIXES.get(category(cp))
  if not prefix:
    return None
  return '<%s-%04X>' % (prefix, cp)


def name(cp, *args):
  """Returns the name of a code point.

  If the code point has no name, returns the extra argument if one is given,
  otherwise its code point label."""
  _check_cp(cp)
  result = unicodedata.name(chr(cp), None)
  if result:
    return result
  if args:
    return args[0]
  return code_point_label(cp) or '<unnamed-%04X>' % cp


def block(cp):
  """Returns the block name, or 'No_Block'."""
  _check_cp(cp)
  return unicodedata.block(chr(cp))


def script(cp):
  """Returns the four-letter script code, e.g. 'Mlym'."""
  _check_cp(cp)
  return unicodedata.script(chr(cp))


def script_name(cp):
  """Returns the human-readable script name, e.g. 'Malayalam'."""
  return unicodedata.script_name(script(cp))


class CodepointInfo(collections.namedtuple(
    'CodepointInfo', 'cp,name,category,block,script_name')):
  """Metadata for a single code point.

  str() gives the tab-separated dump line:
    U+XXXX, glyph, name, category, block, script name, utf8 bytes."""

  __slots__ = ()

  @property
  def uplus(self):
    return 'U+%04X' % self.cp

  @property
  def glyph(self):
    if self.category in _NON_GRAPHIC_CATEGORIES:
      return ''
    return chr(self.cp)

  @property
  def utf8(self):
    # lone surrogates are shown in their generalized utf-8 form
    data = chr(self.cp).encode('utf-8', 'surrogatepass')
    return ''.join('%02x' % b for b in data)

  def __str__(self):
    return '\t'.join([
        self.uplus, self.glyph, self.name, self.category, self.block,
        self.script_name, 'utf8:' + self.utf8])


def describe(cp):
  """Returns the CodepointInfo for cp.

  Raises ValueError if cp is not a valid code point."""
  _check_cp(cp)
  return CodepointInfo(cp, name(cp), category(cp), block(cp), script_name(cp))
