"""
The global options of swctree, read and set as attributes of this module:

.. code-block::

  import swctree.options

  swctree.options.verbosity = 2
  # Fall back to the project, environment or default value again
  del swctree.options.verbosity
"""

import sys
import types

from ._options import IgnoredWarningsOption, VerbosityOption
from .exceptions import OptionError

_options = {opt.name: opt for opt in (VerbosityOption(), IgnoredWarningsOption())}


def get_option_descriptor(name):
    """
    Return an option

    :param name: Name of the option to look for.
    :type name: str
    :returns: The option singleton of that name.
    :rtype: swctree.option.SwcOption
    """
    try:
        return _options[name]
    except KeyError:
        raise OptionError(f"Unknown option '{name}'") from None


def get_option(name, prio=None):
    """
    Retrieve the cascaded value for an option.

    :param prio: Give priority to a type of value. Can be any of 'script', 'project',
      'env'.
    :type prio: str
    """
    return get_option_descriptor(name).get(prio=prio)


def set_module_option(name, value):
    """
    Set the script value of an option. Does the same thing as ``setattr(options, name,
    value)``.
    """
    get_option_descriptor(name).script = value


def reset_module_option(name):
    """
    Remove the script value of an option. Does the same thing as ``delattr(options,
    name)``.
    """
    del get_option_descriptor(name).script


def is_module_option_set(name):
    return get_option_descriptor(name).is_set("script")


class _OptionsModule(types.ModuleType):
    def __getattr__(self, attr):
        # Also raised for `__path__`, so the proxy is never taken for a package.
        if attr not in _options:
            raise AttributeError(f"No option named '{attr}'.")
        return _options[attr].get()

    def __setattr__(self, attr, value):
        set_module_option(attr, value)

    def __delattr__(self, attr):
        if attr not in _options:
            raise AttributeError(attr)
        reset_module_option(attr)


__all__ = [
    "get_option",
    "get_option_descriptor",
    "is_module_option_set",
    "reset_module_option",
    "set_module_option",
]

_om = _OptionsModule(__name__)
_om.__dict__.update(globals())
sys.modules[__name__] = _om
