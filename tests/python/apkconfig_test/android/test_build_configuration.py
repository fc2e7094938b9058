# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os
import textwrap
import unittest
from contextlib import contextmanager

from apkconfig.backend.android.build_configuration import evaluate
from apkconfig.backend.android.credentials.keystore import DebugKeystore, ReleaseKeystore
from apkconfig.base.exceptions import ConfigParseError, TargetDefinitionException
from apkconfig.util.contextutil import temporary_dir


class TestBuildConfiguration(unittest.TestCase):
  """Test evaluating the app module of a flutter project's android/ directory."""

  @contextmanager
  def android_project(self, key_properties=None, apkconfig_ini=None, pubspec='version: 1.0.0+1\n'):
    with temporary_dir() as flutter_root:
      flutter_root = os.path.realpath(flutter_root)
      buildroot = os.path.join(flutter_root, 'android')
      os.makedirs(os.path.join(buildroot, 'app'))
      self._write(os.path.join(buildroot, 'settings.gradle.kts'), 'include(":app")\n')
      self._write(os.path.join(flutter_root, 'pubspec.yaml'), pubspec)
      if key_properties is not None:
        self._write(os.path.join(buildroot, 'key.properties'), key_properties)
      if apkconfig_ini is not None:
        self._write(os.path.join(buildroot, 'apkconfig.ini'), apkconfig_ini)
      yield buildroot

  def _write(self, path, content):
    with open(path, 'w') as fp:
      fp.write(textwrap.dedent(content))

  def test_absent_key_properties(self):
    with self.android_project() as buildroot:
      binary = evaluate(buildroot)
    self.assertEqual(binary.signing_config('release'), DebugKeystore())
    self.assertNotIn('release', binary.to_dict()['signing_configs'])

  def test_release_key_properties(self):
    with self.android_project(key_properties=
      """
      storePassword=storepass
      keyPassword=keypass
      keyAlias=app
      storeFile=my.keystore
      """) as buildroot:
      binary = evaluate(buildroot)
      self.assertEqual(binary.signing_config('release'),
                       ReleaseKeystore(keystore_location='my.keystore',
                                       keystore_alias='app',
                                       keystore_password='storepass',
                                       key_password='keypass'))
      self.assertEqual(binary.to_dict()['signing_configs']['release']['store_file'],
                       os.path.join(buildroot, 'app', 'my.keystore'))

  def test_only_key_alias(self):
    with self.android_project(key_properties='keyAlias=app\n') as buildroot:
      self.assertEqual(evaluate(buildroot).signing_config('release'), DebugKeystore())

  def test_malformed_key_properties(self):
    with self.android_project(key_properties='storeFile=\\uXYZW\nkeyAlias=app\n') as buildroot:
      with self.assertRaises(ConfigParseError):
        evaluate(buildroot)

  def test_defaults(self):
    with self.android_project(pubspec='version: 2.1.0+8\n') as buildroot:
      binary = evaluate(buildroot)
    self.assertEqual(binary.name, 'app')
    self.assertEqual(binary.namespace, 'com.serbiaOpenData.saobracajke')
    self.assertEqual(binary.application_id, 'com.serbiaOpenData.saobracajke')
    self.assertEqual(binary.compile_sdk, 36)
    self.assertEqual(binary.target_sdk, 35)
    self.assertEqual(binary.min_sdk, 21)
    self.assertEqual(binary.version_name, '2.1.0')
    self.assertEqual(binary.version_code, 8)
    self.assertEqual([dep.coordinate for dep in binary.dependencies],
                     ['com.google.android.material:material:1.13.0'])
    self.assertEqual(binary.flutter_source, '../..')

  def test_evaluate_from_module_dir(self):
    with self.android_project() as buildroot:
      binary = evaluate(os.path.join(buildroot, 'app'))
    self.assertEqual(binary.module_dir, os.path.join(buildroot, 'app'))

  def test_options_file(self):
    with self.android_project(apkconfig_ini=
      """
      [android]
      application_id: com.example.other
      compile_sdk: 35
      target_sdk: 34
      min_sdk: 26
      dependencies: ['androidx.core:core-ktx:1.13.1']
      keystore_properties: signing/release.properties
      """, key_properties='storeFile=ignored.jks\nkeyAlias=ignored\n') as buildroot:
      binary = evaluate(buildroot)
    self.assertEqual(binary.application_id, 'com.example.other')
    self.assertEqual(binary.namespace, 'com.serbiaOpenData.saobracajke')
    self.assertEqual((binary.min_sdk, binary.target_sdk, binary.compile_sdk), (26, 34, 35))
    self.assertEqual([dep.coordinate for dep in binary.dependencies],
                     ['androidx.core:core-ktx:1.13.1'])
    # key.properties is not where the options file points.
    self.assertEqual(binary.signing_config('release'), DebugKeystore())

  def test_bad_dependency(self):
    with self.android_project(apkconfig_ini=
      """
      [android]
      dependencies: ['material']
      """) as buildroot:
      with self.assertRaises(ConfigParseError):
        evaluate(buildroot)

  def test_invalid_sdks(self):
    with self.android_project(apkconfig_ini=
      """
      [android]
      target_sdk: 37
      """) as buildroot:
      with self.assertRaises(TargetDefinitionException):
        evaluate(buildroot)

  def test_evaluate_is_idempotent(self):
    with self.android_project(key_properties='storeFile=my.keystore\nkeyAlias=app\n') as buildroot:
      self.assertEqual(evaluate(buildroot).to_dict(), evaluate(buildroot).to_dict())

  def test_named_options_file_must_exist(self):
    with self.android_project() as buildroot:
      with self.assertRaises(ConfigParseError):
        evaluate(buildroot, configpath=os.path.join(buildroot, 'missing.ini'))
