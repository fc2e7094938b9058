# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from apkconfig.backend.android.credentials.keystore import DebugKeystore
from apkconfig.backend.android.targets.android_target import AndroidTarget
from apkconfig.base.exceptions import TargetDefinitionException


class AndroidBinary(AndroidTarget):
  """Produces an Android binary."""

  # The flutter gradle plugin must be applied after the android and kotlin gradle plugins.
  PLUGINS = ('com.android.application', 'kotlin-android', 'dev.flutter.flutter-gradle-plugin')

  BUILD_TYPES = ('debug', 'release')

  def __init__(self,
               name,
               application_id=None,
               version_code=None,
               version_name=None,
               release_keystore=None,
               module_dir=None,
               flutter_source=None,
               **kwargs):
    """
    :param string application_id: The id the package is published under.
    :param int version_code: The internal, monotonically increasing version number.
    :param string version_name: The version shown to users.
    :param release_keystore: The identity that signs the 'release' build type. One of
      ReleaseKeystore or DebugKeystore. Defaults to DebugKeystore.
    :param string module_dir: path/to/the gradle module, relative keystore paths resolve against it.
    :param string flutter_source: The flutter project, relative to the module directory.
    """
    self.application_id = application_id
    self.version_code = version_code
    self.version_name = version_name
    self.release_keystore = release_keystore or DebugKeystore()
    self.module_dir = module_dir
    self.flutter_source = flutter_source
    super(AndroidBinary, self).__init__(name, **kwargs)

  def _validate(self):
    super(AndroidBinary, self)._validate()
    if not self.application_id:
      raise TargetDefinitionException(self, 'An application_id is required.')

  @property
  def has_release_keystore(self):
    return self.release_keystore.build_type == 'release'

  def signing_config(self, build_type):
    """Return the identity that signs the given build type.

    :param string build_type: One of (debug, release).
    """
    if build_type == 'debug':
      return DebugKeystore()
    if build_type == 'release':
      return self.release_keystore
    raise TargetDefinitionException(self, "The build_type must be one of {0} instead of: '{1}'."
                                          .format(self.BUILD_TYPES, build_type))

  def _signing_config_dict(self, keystore):
    if keystore.build_type == 'debug':
      return {'name': 'debug'}
    store_file = keystore.keystore_location
    if self.module_dir:
      store_file = keystore.keystore_path(self.module_dir)
    return {
      'name': 'release',
      'key_alias': keystore.keystore_alias,
      'key_password': keystore.key_password,
      'store_file': store_file,
      'store_password': keystore.keystore_password,
    }

  def to_dict(self):
    """Return the configuration as plain data for the build orchestrator."""
    signing_configs = {'debug': self._signing_config_dict(DebugKeystore())}
    if self.has_release_keystore:
      signing_configs['release'] = self._signing_config_dict(self.release_keystore)

    return {
      'plugins': list(self.PLUGINS),
      'namespace': self.namespace,
      'compile_sdk': self.compile_sdk,
      'ndk_version': self.ndk_version,
      'compile_options': {
        'source_compatibility': self.java_version,
        'target_compatibility': self.java_version,
      },
      'kotlin_options': {'jvm_target': self.java_version},
      'dependencies': [{'configuration': dep.configuration, 'coordinate': dep.coordinate}
                       for dep in self.dependencies],
      'default_config': {
        'application_id': self.application_id,
        'min_sdk': self.min_sdk,
        'target_sdk': self.target_sdk,
        'version_code': self.version_code,
        'version_name': self.version_name,
      },
      'signing_configs': signing_configs,
      'build_types': dict((build_type, {'signing_config': self.signing_config(build_type).build_type})
                          for build_type in self.BUILD_TYPES),
      'flutter': {'source': self.flutter_source},
    }
