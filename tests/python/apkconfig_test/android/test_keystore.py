# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os
import unittest

from apkconfig.backend.android.credentials.keystore import DebugKeystore, ReleaseKeystore


class TestKeystore(unittest.TestCase):

  def release_keystore(self, keystore_location='my.keystore'):
    return ReleaseKeystore(keystore_location=keystore_location,
                           keystore_alias='app',
                           keystore_password='storepass',
                           key_password='keypass')

  def test_build_types(self):
    self.assertEqual(self.release_keystore().build_type, 'release')
    self.assertEqual(DebugKeystore().build_type, 'debug')

  def test_relative_keystore_path(self):
    keystore = self.release_keystore('../upload.jks')
    self.assertEqual(keystore.keystore_path(os.path.join('/project', 'android', 'app')),
                     os.path.join('/project', 'android', 'upload.jks'))

  def test_absolute_keystore_path(self):
    keystore = self.release_keystore('/keys/upload.jks')
    self.assertEqual(keystore.keystore_path('/project/android/app'), '/keys/upload.jks')

  def test_location_kept_as_written(self):
    self.assertEqual(self.release_keystore('../upload.jks').keystore_location, '../upload.jks')

  def test_equality(self):
    self.assertEqual(self.release_keystore(), self.release_keystore())
    self.assertNotEqual(self.release_keystore(), self.release_keystore('other.jks'))
    self.assertNotEqual(self.release_keystore(), DebugKeystore())
    self.assertEqual(DebugKeystore(), DebugKeystore())
    self.assertEqual(len({DebugKeystore(), DebugKeystore()}), 1)
