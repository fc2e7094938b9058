# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import unittest

from apkconfig.backend.android import build_configuration
from apkconfig.config.config_option import ConfigOption


class TestConfigOption(unittest.TestCase):

  def test_create(self):
    option = ConfigOption.create(section='test-config-option',
                                 option='created',
                                 help='An option for the test.',
                                 valtype=int,
                                 default=5)
    self.assertIn(option, ConfigOption.all())
    self.assertEqual(option.valtype, int)
    self.assertEqual(option.default, 5)
    self.assertEqual(repr(option), 'Option(test-config-option.created)')

  def test_duplicate(self):
    ConfigOption.create(section='test-config-option', option='duplicate', help='Once.')
    with self.assertRaises(ValueError):
      ConfigOption.create(section='test-config-option', option='duplicate', help='Twice.')

  def test_build_options_registered(self):
    registered = ConfigOption.all()
    for option in (build_configuration.COMPILE_SDK,
                   build_configuration.KEYSTORE_PROPERTIES,
                   build_configuration.FLUTTER_SOURCE):
      self.assertIn(option, registered)
