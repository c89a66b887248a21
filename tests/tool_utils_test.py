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

"""Tests for tool_utils.py."""

import logging
import unittest

from varnamtools import tool_utils


class ToolUtilsTest(unittest.TestCase):
    """Tests for tool_utils module."""
    def test_parse_loglevel(self):
        """Tests the parse_loglevel() method."""
        self.assertEqual(logging.DEBUG, tool_utils.parse_loglevel('debug'))
        self.assertEqual(logging.WARNING, tool_utils.parse_loglevel('Warning'))
        self.assertEqual(15, tool_utils.parse_loglevel('15'))
        self.assertEqual(15, tool_utils.parse_loglevel(15))

    def test_parse_loglevel_bad(self):
        """Tests that parse_loglevel() rejects unknown level names."""
        for level in ['noisy', 'basic_format', '']:
            with self.assertRaises(ValueError):
                tool_utils.parse_loglevel(level)

    def test_setup_logging_quiets_fonttools(self):
        """Tests that setup_logging() keeps fontTools at warning."""
        fonttools_logger = logging.getLogger('fontTools')
        saved = fonttools_logger.level
        try:
            self.assertEqual(logging.INFO, tool_utils.setup_logging('info'))
            self.assertEqual(logging.WARNING, fonttools_logger.level)
        finally:
            fonttools_logger.setLevel(saved)


if __name__ == '__main__':
    unittest.main()
