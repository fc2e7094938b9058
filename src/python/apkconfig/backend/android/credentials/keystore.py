# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os


class ReleaseKeystore(object):
  """A release signing identity read from the keystore properties file.

  None of the values are validated, they are handed to the signing tools as written.
  """

  build_type = 'release'

  def __init__(self,
               keystore_location,
               keystore_alias,
               keystore_password=None,
               key_password=None):
    """
    :param string keystore_location: path/to/keystore, as written in the `storeFile` property.
    :param string keystore_alias: The alias of the key within the keystore.
    :param string keystore_password: The password for the keystore.
    :param string key_password: The password for the key.
    """
    self.keystore_location = keystore_location
    self.keystore_alias = keystore_alias
    self.keystore_password = keystore_password
    self.key_password = key_password

  def keystore_path(self, module_dir):
    """Return the keystore location, with relative paths resolved against the app module."""
    return os.path.normpath(os.path.join(module_dir, self.keystore_location))

  def _fields(self):
    return (self.keystore_location, self.keystore_alias, self.keystore_password, self.key_password)

  def __eq__(self, other):
    return isinstance(other, ReleaseKeystore) and self._fields() == other._fields()

  def __ne__(self, other):
    return not self == other

  def __hash__(self):
    return hash(self._fields())

  def __repr__(self):
    # Passwords stay out of logs and tracebacks.
    return '{0}(keystore_location={1!r}, keystore_alias={2!r})'.format(
      self.__class__.__name__, self.keystore_location, self.keystore_alias)


class DebugKeystore(object):
  """The debug signing identity.

  Carries no credentials of its own: the android toolchain signs with the debug keystore it
  generates under ~/.android.
  """

  build_type = 'debug'

  def __eq__(self, other):
    return isinstance(other, DebugKeystore)

  def __ne__(self, other):
    return not self == other

  def __hash__(self):
    return hash(self.build_type)

  def __repr__(self):
    return '{0}()'.format(self.__class__.__name__)
