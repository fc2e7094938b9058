# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).


class ConfigParseError(Exception):
  """Indicates a configuration file that exists but could not be read or parsed.

  This is fatal to the evaluation: nothing in apkconfig catches it.
  """

  def __init__(self, path, msg, lineno=None):
    self.path = path
    self.lineno = lineno
    location = path if lineno is None else '{0}:{1}'.format(path, lineno)
    super(ConfigParseError, self).__init__('Invalid configuration in {0}: {1}'.format(location, msg))


class TargetDefinitionException(Exception):
  """Indicates an invalid target definition."""

  def __init__(self, target, msg):
    """
    :param target: the target in question
    :param string msg: a description of the target misconfiguration
    """
    super(TargetDefinitionException, self).__init__('Invalid target {0}: {1}'.format(target, msg))
