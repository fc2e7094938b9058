# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import ast
import configparser
import logging
import os

from apkconfig.base.exceptions import ConfigParseError


logger = logging.getLogger(__name__)


class Config(object):
  """Encapsulates ini-style config file loading and access.

  Values may refer to the `buildroot` and `homedir` defaults, and to each other, with
  `%(name)s` interpolation as defined in the configparser docs.
  """

  DEFAULT_CONFIG_FILE = 'apkconfig.ini'

  ConfigError = ConfigParseError

  @classmethod
  def create_parser(cls, buildroot=None):
    """Create a config parser that supports %([key-name])s value substitution."""
    return configparser.ConfigParser(defaults={
      'buildroot': buildroot or os.getcwd(),
      'homedir': os.path.expanduser('~'),
    })

  @classmethod
  def load(cls, buildroot, configpath=None):
    """Load the config at `configpath` (default: apkconfig.ini in the buildroot).

    A missing apkconfig.ini is not an error, all options then take their defaults.

    :raises: ConfigParseError if an explicitly named `configpath` does not exist, or if the file
      exists but cannot be read or parsed.
    """
    parser = cls.create_parser(buildroot)
    if configpath is not None:
      if not os.path.exists(configpath):
        raise ConfigParseError(configpath, 'No such config file.')
    else:
      configpath = os.path.join(buildroot, cls.DEFAULT_CONFIG_FILE)
    if not os.path.exists(configpath):
      logger.debug('No config at {0}, using defaults.'.format(configpath))
      return cls(None, parser)
    try:
      with open(configpath, 'r') as ini:
        parser.read_file(ini, source=configpath)
    except (IOError, UnicodeDecodeError, configparser.Error) as e:
      raise ConfigParseError(configpath, e)
    logger.debug('Loaded config from {0}.'.format(configpath))
    return cls(configpath, parser)

  def __init__(self, configpath, parser):
    self.configpath = configpath
    self._parser = parser

  def has_option(self, section, option):
    return self._parser.has_option(section, option)

  def get_option(self, option):
    """Return the value of a ``ConfigOption``, or its default if undefined."""
    return self.get(option.section, option.option, type=option.valtype, default=option.default)

  def get(self, section, option, type=str, default=None):
    """Return the value of the option in the section cast to `type`, or `default` if undefined."""
    if not self.has_option(section, option):
      return default
    return self._getinstance(section, option, type)

  def _get_raw(self, section, option):
    try:
      return self._parser.get(section, option)
    except configparser.Error as e:
      raise ConfigParseError(self.configpath, e)

  def _getinstance(self, section, option, type):
    raw_value = self._get_raw(section, option)
    if type is str:
      return raw_value

    if type in (list, tuple, dict):
      try:
        value = ast.literal_eval(raw_value.strip())
      except (SyntaxError, ValueError) as e:
        raise ConfigParseError(self.configpath,
                               '{0}.{1} is not a {2}: {3}'.format(section, option, type.__name__, e))
      if not isinstance(value, type):
        raise ConfigParseError(self.configpath,
                               '{0}.{1} is not a {2}: {3!r}'.format(section, option, type.__name__,
                                                                  raw_value))
      return value

    try:
      return type(raw_value.strip())
    except ValueError as e:
      raise ConfigParseError(self.configpath,
                             '{0}.{1} is not a {2}: {3}'.format(section, option, type.__name__, e))
