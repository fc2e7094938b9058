# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).


class JarDependency(object):
  """A pre-built Maven repository dependency, resolved by the build orchestrator."""

  class BadCoordinateError(ValueError):
    """Indicates a dependency coordinate that is not of the form org:name:rev."""

  @classmethod
  def parse(cls, coordinate, configuration='implementation'):
    """Create a JarDependency from a gradle style 'org:name:rev' coordinate."""
    parts = coordinate.strip().split(':')
    if len(parts) != 3 or not all(parts):
      raise cls.BadCoordinateError('Expected a dependency of the form org:name:rev, got: {0!r}'
                                   .format(coordinate))
    org, name, rev = parts
    return cls(org, name, rev=rev, configuration=configuration)

  def __init__(self, org, name, rev=None, configuration='implementation'):
    """
    :param string org: The Maven ``groupId`` of this dependency.
    :param string name: The Maven ``artifactId`` of this dependency.
    :param string rev: The Maven ``version`` of this dependency.
    :param string configuration: The gradle configuration the dependency is declared in.
    """
    self.org = org
    self.name = name
    self.rev = rev
    self.configuration = configuration

  @property
  def coordinate(self):
    return ':'.join(part for part in (self.org, self.name, self.rev) if part)

  def _key(self):
    return (self.org, self.name, self.rev, self.configuration)

  def __eq__(self, other):
    return isinstance(other, JarDependency) and self._key() == other._key()

  def __ne__(self, other):
    return not self == other

  def __hash__(self):
    return hash(self._key())

  def __repr__(self):
    return 'JarDependency({0}, {1})'.format(self.configuration, self.coordinate)
