"""
Options cascade their value from the :mod:`swctree.options` module, over the
``[tools.swctree]`` table of the nearest ``pyproject.toml`` and the environment, down
to a default.
"""

import functools
import os
import pathlib

import toml

from .exceptions import OptionError
from .reporting import warn


class OptionDescriptor:
    """
    Base descriptor for one source of option values. ``__get__`` returns ``None`` when
    the source holds no value for the option.
    """

    def __init_subclass__(cls, slug=None, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.slug = slug

    def __init__(self, tag):
        self.tag = tag

    def __get__(self, instance, owner):
        if instance is None:
            return self
        if self.is_set(instance):
            return instance.parse(self.raw(instance))

    def raw(self, instance):
        raise NotImplementedError()

    def is_set(self, instance):
        raise NotImplementedError()


class ScriptOptionDescriptor(OptionDescriptor, slug="script"):
    """
    Values set from Python, through ``swctree.options.<name> = value``.
    """

    def __set__(self, instance, value):
        instance._script_value = instance.parse(value)

    def __delete__(self, instance):
        instance.__dict__.pop("_script_value", None)

    def raw(self, instance):
        return instance._script_value

    def is_set(self, instance):
        return "_script_value" in instance.__dict__


class ProjectOptionDescriptor(OptionDescriptor, slug="project"):
    """
    Values read from ``[tools.swctree]`` in the nearest ``pyproject.toml``.
    """

    def raw(self, instance):
        return _pyproject_swctree()[self.tag]

    def is_set(self, instance):
        return self.tag in _pyproject_swctree()


class EnvOptionDescriptor(OptionDescriptor, slug="env"):
    """
    Values read from an environment variable.
    """

    def raw(self, instance):
        return os.environ[self.tag]

    def is_set(self, instance):
        return self.tag in os.environ


class SwcOption:
    """
    Base option class. Subclasses give a ``name`` and the name of their environment
    variable in the class argument list, and override :meth:`parse` and
    :meth:`get_default`.
    """

    def __init_subclass__(cls, name=None, env=None, **kwargs):
        super().__init_subclass__(**kwargs)
        if name is None:
            raise OptionError("Options must be given a name in the class argument list.")
        cls.name = name
        cls.script = ScriptOptionDescriptor(name)
        cls.project = ProjectOptionDescriptor(name)
        cls.env = EnvOptionDescriptor(env or f"SWCTREE_{name.upper()}")

    def get(self, prio=None):
        """
        Get the option's value: the first of the script, project and env values that is
        set, or the default.

        :param prio: Only look at this source: ``"script"``, ``"project"`` or ``"env"``.
        :type prio: str
        """
        try:
            if prio is not None:
                return getattr(self, prio)
            for slug in ("script", "project", "env"):
                if getattr(type(self), slug).is_set(self):
                    return getattr(self, slug)
        except (ValueError, TypeError) as e:
            warn(f"Error retrieving option '{self.name}': {e}")
        return self.get_default()

    def is_set(self, slug):
        return getattr(type(self), slug).is_set(self)

    def parse(self, value):
        """
        Convert a raw value to the option's type.
        """
        return value

    def get_default(self):
        return None


@functools.cache
def _pyproject_path():
    cwd = pathlib.Path.cwd()
    for path in (cwd, *cwd.parents):
        if (path / "pyproject.toml").exists():
            return (path / "pyproject.toml").resolve()


@functools.cache
def _pyproject_swctree():
    path = _pyproject_path()
    if path is None:
        return {}
    with open(path, "r") as f:
        return toml.load(f).get("tools", {}).get("swctree", {})


__all__ = [
    "EnvOptionDescriptor",
    "OptionDescriptor",
    "ProjectOptionDescriptor",
    "ScriptOptionDescriptor",
    "SwcOption",
]
