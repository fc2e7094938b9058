# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging
import os


logger = logging.getLogger(__name__)

# Gradle marks the root of a multi-module build with one of these.
BUILDROOT_MARKERS = ('settings.gradle.kts', 'settings.gradle')


def get_buildroot(start=None):
  """Return the root of the Android project enclosing `start`.

  Walks upward from `start` (default: the current working directory) to the first directory
  holding a gradle settings file. Falls back to `start` itself when there is none.
  """
  start = os.path.realpath(start or os.getcwd())
  current = start
  while True:
    if any(os.path.isfile(os.path.join(current, marker)) for marker in BUILDROOT_MARKERS):
      return current
    parent = os.path.dirname(current)
    if parent == current:
      logger.debug('No gradle settings file above {0}, using it as the buildroot.'.format(start))
      return start
    current = parent
