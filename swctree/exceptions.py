from errr import exception as _e
from errr import make_tree as _t

_t(
    globals(),
    SwcError=_e(
        RawDataError=_e(
            "path",
            "lines",
            EarlyEndOfFileError=_e("path", "lines"),
            LineNonParsableError=_e("path", "lines"),
            NegativeIdError=_e("path", "lines"),
            SelfParentError=_e("path", "lines"),
            UnsupportedSectionTypeError=_e("path", "lines"),
            RepeatedIdError=_e("path", "lines"),
        ),
        MissingParentError=_e("path", "lines"),
        SomaError=_e(
            "path",
            "lines",
            SomaWithNeuriteParentError=_e("path", "lines"),
            MultipleSomataError=_e("path", "lines"),
            SomaBifurcationError=_e("path", "lines"),
        ),
        SectionDataError=_e(),
        OptionError=_e(),
    ),
)


# Warnings


class SwcWarning(UserWarning):
    pass


class ZeroDiameterWarning(SwcWarning):
    pass


class DisconnectedNeuriteWarning(SwcWarning):
    pass


class SomaNonConformWarning(SwcWarning):
    pass


class WrongRootPointWarning(SwcWarning):
    pass


__all__ = [
    "DisconnectedNeuriteWarning",
    "EarlyEndOfFileError",
    "LineNonParsableError",
    "MissingParentError",
    "MultipleSomataError",
    "NegativeIdError",
    "OptionError",
    "RawDataError",
    "RepeatedIdError",
    "SectionDataError",
    "SelfParentError",
    "SomaBifurcationError",
    "SomaError",
    "SomaNonConformWarning",
    "SomaWithNeuriteParentError",
    "SwcError",
    "SwcWarning",
    "UnsupportedSectionTypeError",
    "WrongRootPointWarning",
    "ZeroDiameterWarning",
]
