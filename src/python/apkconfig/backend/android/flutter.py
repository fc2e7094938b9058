# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging
import os

import yaml

from apkconfig.base.exceptions import ConfigParseError
from apkconfig.config.properties import Properties


logger = logging.getLogger(__name__)


class FlutterExtension(object):
  """The values the flutter tool hands to the android build.

  `flutter build` records them in local.properties. When the version is missing there it is
  read from the `version:` of the app's pubspec.yaml, in `name+code` form.
  """

  LOCAL_PROPERTIES = 'local.properties'
  PUBSPEC = 'pubspec.yaml'

  DEFAULT_MIN_SDK = 21
  DEFAULT_NDK_VERSION = '27.0.12077973'
  DEFAULT_VERSION_CODE = 1
  DEFAULT_VERSION_NAME = '1.0'

  @classmethod
  def load(cls, buildroot, flutter_root):
    """Read the extension values for the android project at `buildroot`.

    :param string buildroot: The android project root, holding local.properties.
    :param string flutter_root: The flutter project root, holding pubspec.yaml.
    :raises: ConfigParseError if either file exists but is malformed.
    """
    local_properties = os.path.join(buildroot, cls.LOCAL_PROPERTIES)
    if os.path.exists(local_properties):
      properties = Properties.load(local_properties)
    else:
      logger.debug('No {0} in {1}.'.format(cls.LOCAL_PROPERTIES, buildroot))
      properties = Properties()

    def get_int(key, default):
      value = properties.get_property(key)
      if value is None or not value.strip():
        return default
      try:
        return int(value.strip())
      except ValueError:
        raise ConfigParseError(local_properties, '{0} is not an integer: {1!r}'.format(key, value))

    # A blank value is unset.
    version_name = (properties.get_property('flutter.versionName') or '').strip() or None
    version_code = get_int('flutter.versionCode', None)
    if version_name is None or version_code is None:
      pubspec_name, pubspec_code = cls.read_pubspec_version(os.path.join(flutter_root, cls.PUBSPEC))
      if version_name is None:
        version_name = pubspec_name
      if version_code is None:
        version_code = pubspec_code

    return cls(min_sdk=get_int('flutter.minSdkVersion', cls.DEFAULT_MIN_SDK),
               ndk_version=properties.get_property('flutter.ndkVersion') or cls.DEFAULT_NDK_VERSION,
               version_code=cls.DEFAULT_VERSION_CODE if version_code is None else version_code,
               version_name=version_name or cls.DEFAULT_VERSION_NAME)

  @classmethod
  def read_pubspec_version(cls, pubspec):
    """Return the (name, code) of a pubspec.yaml version; either is None when unset."""
    if not os.path.exists(pubspec):
      return None, None
    try:
      with open(pubspec, 'r') as fp:
        document = yaml.safe_load(fp)
    except (IOError, yaml.YAMLError) as e:
      raise ConfigParseError(pubspec, e)
    if not isinstance(document, dict) or document.get('version') is None:
      return None, None

    name, _, code = str(document['version']).partition('+')
    if not code:
      return name or None, None
    try:
      return name or None, int(code)
    except ValueError:
      raise ConfigParseError(pubspec, 'The build number is not an integer: {0!r}'.format(code))

  def __init__(self, min_sdk=DEFAULT_MIN_SDK, ndk_version=DEFAULT_NDK_VERSION,
               version_code=DEFAULT_VERSION_CODE, version_name=DEFAULT_VERSION_NAME):
    self.min_sdk = min_sdk
    self.ndk_version = ndk_version
    self.version_code = version_code
    self.version_name = version_name

  def __repr__(self):
    return ('FlutterExtension(min_sdk={0}, ndk_version={1!r}, version_code={2}, '
            'version_name={3!r})'.format(self.min_sdk, self.ndk_version, self.version_code,
                                         self.version_name))
