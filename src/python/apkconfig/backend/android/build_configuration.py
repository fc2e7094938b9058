# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging
import os

from apkconfig.backend.android.credentials.key_resolver import KeyResolver
from apkconfig.backend.android.flutter import FlutterExtension
from apkconfig.backend.android.targets.android_binary import AndroidBinary
from apkconfig.backend.jvm.targets.jar_dependency import JarDependency
from apkconfig.base.build_environment import get_buildroot
from apkconfig.base.config import Config
from apkconfig.base.exceptions import ConfigParseError
from apkconfig.config.config_option import ConfigOption


logger = logging.getLogger(__name__)

_APPLICATION_ID = 'com.serbiaOpenData.saobracajke'

NAMESPACE = ConfigOption.create(
  section='android',
  option='namespace',
  help='The package of the generated R and BuildConfig classes.',
  default=_APPLICATION_ID)

APPLICATION_ID = ConfigOption.create(
  section='android',
  option='application_id',
  help='The id the package is published under.',
  default=_APPLICATION_ID)

COMPILE_SDK = ConfigOption.create(
  section='android',
  option='compile_sdk',
  help='The API level the app module compiles against.',
  valtype=int,
  default=36)

TARGET_SDK = ConfigOption.create(
  section='android',
  option='target_sdk',
  help='The API level the package is tested against.',
  valtype=int,
  default=35)

MIN_SDK = ConfigOption.create(
  section='android',
  option='min_sdk',
  help='The lowest API level the package installs on. Defaults to the flutter minSdkVersion.',
  valtype=int)

JAVA_VERSION = ConfigOption.create(
  section='android',
  option='java_version',
  help='Java source, target and jvmTarget compatibility level.',
  default=AndroidBinary.JAVA_VERSION)

DEPENDENCIES = ConfigOption.create(
  section='android',
  option='dependencies',
  help="A list of 'org:name:rev' coordinates the app module is compiled with.",
  valtype=list,
  default=['com.google.android.material:material:1.13.0'])

MODULE = ConfigOption.create(
  section='android',
  option='module',
  help='The directory of the app module, relative to the buildroot.',
  default='app')

KEYSTORE_PROPERTIES = ConfigOption.create(
  section='android',
  option='keystore_properties',
  help='The release keystore properties file, relative to the buildroot.',
  default='key.properties')

FLUTTER_SOURCE = ConfigOption.create(
  section='flutter',
  option='source',
  help='The flutter project, relative to the app module.',
  default='../..')


def parse_dependencies(config):
  """Return the JarDependency objects named by the `dependencies` option."""
  dependencies = []
  for coordinate in config.get_option(DEPENDENCIES):
    try:
      dependencies.append(JarDependency.parse(str(coordinate)))
    except JarDependency.BadCoordinateError as e:
      raise ConfigParseError(config.configpath, e)
  return dependencies


def evaluate(buildroot=None, configpath=None):
  """Evaluate the android build configuration of the app module.

  Every call reads its inputs afresh: the options file, local.properties, pubspec.yaml and the
  keystore properties.

  :param string buildroot: A directory inside the android project. Defaults to the cwd.
  :param string configpath: path/to/apkconfig.ini. Defaults to the one in the buildroot.
  :returns: The AndroidBinary for the app module.
  :raises: ConfigParseError if an input file exists but is malformed.
  :raises: TargetDefinitionException if the resulting configuration is invalid.
  """
  buildroot = get_buildroot(buildroot)
  config = Config.load(buildroot, configpath)

  release_keystore = KeyResolver.resolve(os.path.join(buildroot,
                                                      config.get_option(KEYSTORE_PROPERTIES)))

  module = config.get_option(MODULE)
  module_dir = os.path.join(buildroot, module)
  flutter_source = config.get_option(FLUTTER_SOURCE)
  flutter = FlutterExtension.load(buildroot, os.path.normpath(os.path.join(module_dir,
                                                                           flutter_source)))
  logger.debug('Evaluating {0} with {1}.'.format(module_dir, flutter))

  min_sdk = config.get_option(MIN_SDK)
  return AndroidBinary(module,
                       namespace=config.get_option(NAMESPACE),
                       application_id=config.get_option(APPLICATION_ID),
                       compile_sdk=config.get_option(COMPILE_SDK),
                       min_sdk=flutter.min_sdk if min_sdk is None else min_sdk,
                       target_sdk=config.get_option(TARGET_SDK),
                       ndk_version=flutter.ndk_version,
                       java_version=config.get_option(JAVA_VERSION),
                       dependencies=parse_dependencies(config),
                       version_code=flutter.version_code,
                       version_name=flutter.version_name,
                       release_keystore=release_keystore,
                       module_dir=module_dir,
                       flutter_source=flutter_source)
