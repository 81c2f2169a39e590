import warnings


def report(*message, level=2, ongoing=False):
    """
    Send a message to the appropriate output channel.

    :param message: Text message to send.
    :type message: str
    :param level: Verbosity level of the message.
    :type level: int
    :param ongoing: The message is part of an ongoing progress report.
    :type ongoing: bool
    """
    from . import options

    message = " ".join(map(str, message))
    if options.verbosity >= level:
        print(message, end="\n" if not ongoing else "\r", flush=True)


def warn(message, category=None, stacklevel=2):
    """
    Send a warning.

    :param message: Warning message
    :type message: str
    :param category: The class of the warning.
    """
    from . import options

    # Avoid infinite loop looking up verbosity when verbosity option is broken.
    if "Error retrieving option 'verbosity'" in message or options.verbosity > 0:
        warnings.warn(message, category, stacklevel=stacklevel)


class LoadWarning:
    """
    A non-fatal data quality issue found while loading a morphology.
    """

    def __init__(self, category, message, lines=()):
        self.category = category
        self.message = message
        self.lines = tuple(lines)

    def __repr__(self):
        return f"<{self.category.__name__} {self.message!r}>"

    def __str__(self):
        return self.message


class WarningCollector:
    """
    Collects the warnings of a single load, in the order they are emitted, and forwards
    each of them to :func:`warn`.
    """

    def __init__(self, path=None):
        self.path = path or ""
        self._warnings = []

    def __iter__(self):
        return iter(self._warnings)

    def __len__(self):
        return len(self._warnings)

    @property
    def warnings(self):
        return list(self._warnings)

    def where(self, line):
        """
        Prefix for a diagnostic about ``line`` of the loaded file.
        """
        return f"{self.path}:{line}: " if self.path else f"line {line}: "

    def emit(self, category, message, *lines):
        """
        Record a warning about the given ``lines`` and forward it.
        """
        from . import options

        record = LoadWarning(category, self.where(lines[0]) + message, lines)
        self._warnings.append(record)
        if category.__name__ not in options.ignored_warnings:
            warn(record.message, category, stacklevel=3)
        return record


__all__ = [
    "LoadWarning",
    "WarningCollector",
    "report",
    "warn",
]
