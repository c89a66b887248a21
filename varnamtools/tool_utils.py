# Copyright 2015 Google Inc. All rights reserved.
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

"""Some common utilities for tools to use."""

import logging

LOGLEVEL_NAMES = ['debug', 'info', 'warning', 'error', 'critical']


def parse_loglevel(loglevel):
  """Return the numeric logging level for loglevel, which is a level name
  (any case) or a level value (int or string).  Raises ValueError if it is
  neither."""
  try:
    return int(loglevel)
  except (TypeError, ValueError):
    pass
  level = getattr(logging, str(loglevel).upper(), None)
  if not isinstance(level, int):
    raise ValueError(
        'Could not set log level \'%s\', should be one of %s, or a numeric '
        'value' % (loglevel, ', '.join(LOGLEVEL_NAMES)))
  return level


def setup_logging(loglevel, quiet_fonttools=True):
  """Set up logging to stream to stderr, stdout is reserved for tool output.

  fontTools logs its own details at info, when we want 'info' in our own
  tools we usually don't want this.  When quiet_fonttools is true and the
  level is above debug, the 'fontTools' logger only reports warnings and
  worse."""

  loglevel = parse_loglevel(loglevel)
  logging.basicConfig(level=loglevel)

  if quiet_fonttools and loglevel > logging.DEBUG:
    logging.getLogger('fontTools').setLevel(max(loglevel, logging.WARNING))
  return loglevel
