#!/usr/bin/env python
#
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

"""
Dump Unicode metadata for an inclusive range of code points.

When working on a transliteration scheme it's handy to see what's in a block
without going to the charts, e.g. the Malayalam block:

  unidump 3328 3455

Start and end are decimal.  Each code point gets one tab-separated line on
stdout, see codepoint_data.CodepointInfo.
"""

import argparse
import logging
import sys

from varnamtools import codepoint_data
from varnamtools import tool_utils

logger = logging.getLogger(__name__)

USAGE_MESSAGE = 'Start and end points are required'


def code_points(start, end):
  """Yield the code points from start through end, inclusive.  Nothing is
  yielded if start > end."""
  yield from range(start, end + 1)


def dump_range(start, end, lookup=codepoint_data.describe, out=None):
  """Write str(lookup(cp)) on its own line to out (default stdout) for each
  code point from start through end.  Errors from lookup are not caught, any
  lines already written stay written.  Returns the number of lines written."""
  if out is None:
    out = sys.stdout
  count = 0
  for cp in code_points(start, end):
    logger.debug('lookup %d', cp)
    print(str(lookup(cp)), file=out)
    count += 1
  return count


def _usage_exit():
  print(USAGE_MESSAGE)
  sys.exit(1)


class _ArgumentParser(argparse.ArgumentParser):
  """Any malformed command line is reported as a bad argument count."""

  def error(self, message):
    logger.debug('argument error: %s', message)
    _usage_exit()


def main(argv=None):
  parser = _ArgumentParser(
      description='Print Unicode name and properties for each code point in '
      'the inclusive range start..end.', add_help=False)
  parser.add_argument(
      'points', help='start and end code points, in decimal', nargs='*',
      metavar='point')
  parser.add_argument(
      '-l', '--loglevel', help='log level name or value (default warning)',
      default='warning', metavar='level')
  args, unknown = parser.parse_known_args(argv)

  # unrecognized tokens still count as arguments
  if len(args.points) + len(unknown) != 2:
    _usage_exit()
  if unknown:
    raise ValueError('not a decimal code point: %r' % unknown[0])

  tool_utils.setup_logging(args.loglevel)

  start = int(args.points[0])
  end = int(args.points[1])

  logger.info(
      'dumping %d..%d (Unicode %s)', start, end,
      codepoint_data.unicode_version())
  count = dump_range(start, end)
  logger.info('wrote %d lines', count)


if __name__ == '__main__':
  main()
