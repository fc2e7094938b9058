# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging
import os

from apkconfig.backend.android.credentials.keystore import DebugKeystore, ReleaseKeystore
from apkconfig.base.exceptions import ConfigParseError
from apkconfig.config.properties import Properties


logger = logging.getLogger(__name__)


class KeyResolver(object):
  """Choose the identity that signs release builds from a keystore properties file."""

  Error = ConfigParseError

  STORE_FILE = 'storeFile'
  STORE_PASSWORD = 'storePassword'
  KEY_ALIAS = 'keyAlias'
  KEY_PASSWORD = 'keyPassword'

  @classmethod
  def resolve(cls, properties_file):
    """Return the signing identity for release builds.

    A ReleaseKeystore when `properties_file` exists and defines both a non-empty storeFile and
    keyAlias, otherwise a DebugKeystore. A missing file is the normal debug signing case and is
    never read.

    :param string properties_file: path/to/key.properties
    :raises: ConfigParseError if the file exists but cannot be read or parsed.
    """
    if not os.path.exists(properties_file):
      logger.info('No keystore properties at {0}, release builds are signed with the debug key.'
                  .format(properties_file))
      return DebugKeystore()
    return cls.from_properties(Properties.load(properties_file), source=properties_file)

  @classmethod
  def from_properties(cls, properties, source='<properties>'):
    """Return the signing identity described by already loaded properties."""
    store_file = cls._get_nonempty(properties, cls.STORE_FILE)
    key_alias = cls._get_nonempty(properties, cls.KEY_ALIAS)
    if store_file is None or key_alias is None:
      missing = [key for key, value in ((cls.STORE_FILE, store_file), (cls.KEY_ALIAS, key_alias))
                 if value is None]
      logger.info('{0} does not define {1}, release builds are signed with the debug key.'
                  .format(source, ' or '.join(missing)))
      return DebugKeystore()

    keystore = ReleaseKeystore(keystore_location=store_file,
                               keystore_alias=key_alias,
                               keystore_password=properties.get_property(cls.STORE_PASSWORD),
                               key_password=properties.get_property(cls.KEY_PASSWORD))
    logger.info('Release builds are signed with key {0!r} from {1}.'
                .format(key_alias, store_file))
    return keystore

  @staticmethod
  def _get_nonempty(properties, key):
    value = properties.get_property(key)
    if value is None or not value.strip():
      return None
    return value
