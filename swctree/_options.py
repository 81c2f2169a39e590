"""
This module contains the options that swctree provides out of the box.
"""

from .option import SwcOption


class VerbosityOption(SwcOption, name="verbosity"):
    """
    Set the verbosity of the package. Verbosity 0 is completely silent, 1 is default and
    forwards load warnings, 2 is verbose and 4 is debug.
    """

    def parse(self, value):
        return int(value)

    def get_default(self):
        return 1


class IgnoredWarningsOption(SwcOption, name="ignored_warnings"):
    """
    Names of the warning categories (e.g. ``ZeroDiameterWarning``) that are not forwarded
    to the :mod:`warnings` module. They are still collected on the load result. Strings
    are split on commas.
    """

    def parse(self, value):
        if isinstance(value, str):
            value = value.split(",")
        return frozenset(str(v).strip() for v in value if str(v).strip())

    def get_default(self):
        return frozenset()
