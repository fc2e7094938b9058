# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).


class ConfigOption(object):
  """Registry of apkconfig.ini options.

  Options are created in code, typically scoped as close to their use as possible. ::

     compile_sdk = ConfigOption.create(
       section='android',
       option='compile_sdk',
       help='The Android API level the app module compiles against.',
       valtype=int,
       default=36)

  Read an option from ``apkconfig.ini`` with ::

     compile_sdk = config.get_option(compile_sdk)

  Please note `configparser <https://docs.python.org/3/library/configparser.html>`_
  is used to retrieve options, so variable interpolation and the default section
  are used as defined in the configparser docs.
  """

  class Option(object):
    """An ``apkconfig.ini`` option."""
    def __init__(self, section, option, help, valtype, default):
      """Do not instantiate directly - use ConfigOption.create."""
      self.section = section
      self.option = option
      self.help = help
      self.valtype = valtype
      self.default = default

    def __hash__(self):
      return hash((self.section, self.option))

    def __eq__(self, other):
      if not isinstance(other, ConfigOption.Option):
        return False
      return self.section == other.section and self.option == other.option

    def __repr__(self):
      return '{0}({1}.{2})'.format(self.__class__.__name__, self.section, self.option)

  _CONFIG_OPTIONS = set()

  @classmethod
  def all(cls):
    return cls._CONFIG_OPTIONS

  @classmethod
  def create(cls, section, option, help, valtype=str, default=None):
    """Create a new ``apkconfig.ini`` option.

    :param section: Name of section to retrieve option from.
    :param option: Name of option to retrieve from section.
    :param help: Description for display in the configuration reference.
    :param valtype: Type to cast the retrieved option to.
    :param default: Default value if undefined in the config.
    :returns: An ``Option`` suitable for use with ``Config.get_option``.
    :raises: ``ValueError`` if the option already exists.
    """
    new_opt = cls.Option(section=section,
                         option=option,
                         help=help,
                         valtype=valtype,
                         default=default)
    if new_opt in cls._CONFIG_OPTIONS:
      raise ValueError('Option {0}.{1} already exists.'.format(section, option))
    cls._CONFIG_OPTIONS.add(new_opt)
    return new_opt
