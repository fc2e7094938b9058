# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from apkconfig.base.exceptions import TargetDefinitionException


class AndroidTarget(object):
  """A base class for all Android targets."""

  JAVA_VERSION = '17'

  def __init__(self,
               name,
               namespace=None,
               compile_sdk=None,
               min_sdk=None,
               target_sdk=None,
               ndk_version=None,
               java_version=JAVA_VERSION,
               dependencies=None):
    """
    :param string name: The name of the gradle module, e.g. 'app'.
    :param string namespace: The package of the generated R and BuildConfig classes.
    :param int compile_sdk: The API level the module compiles against.
    :param int min_sdk: The lowest API level the package installs on.
    :param int target_sdk: The API level the package is tested against.
    :param string ndk_version: The NDK used for native code.
    :param string java_version: Java source, target and jvmTarget compatibility level.
    :param dependencies: JarDependency objects the module is compiled with.
    """
    self.name = name
    self.namespace = namespace
    self.compile_sdk = compile_sdk
    self.min_sdk = min_sdk
    self.target_sdk = target_sdk
    self.ndk_version = ndk_version
    self.java_version = java_version
    self.dependencies = list(dependencies or ())
    self._validate()

  def _validate(self):
    if not self.namespace:
      raise TargetDefinitionException(self, 'A namespace is required.')
    for field in ('min_sdk', 'target_sdk', 'compile_sdk'):
      value = getattr(self, field)
      if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise TargetDefinitionException(self, '{0} must be a positive integer, got: {1!r}'
                                              .format(field, value))
    if self.min_sdk > self.target_sdk:
      raise TargetDefinitionException(self, 'min_sdk {0} is above target_sdk {1}.'
                                            .format(self.min_sdk, self.target_sdk))
    if self.target_sdk > self.compile_sdk:
      raise TargetDefinitionException(self, 'target_sdk {0} is above compile_sdk {1}.'
                                            .format(self.target_sdk, self.compile_sdk))

  def __repr__(self):
    return '{0}({1})'.format(self.__class__.__name__, self.name)
