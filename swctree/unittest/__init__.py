import glob as _glob
import os as _os

import numpy as _np


class NumpyTestCase:
    def assertClose(self, a, b, msg="", /, **kwargs):
        if msg:
            msg += ". "
        return self.assertTrue(
            _np.allclose(a, b, **kwargs), f"{msg}Expected {a}, got {b}"
        )

    def assertAll(self, a, msg="", /, **kwargs):
        a = _np.asarray(a)
        trues = _np.sum(a.astype(bool))
        all = _np.prod(a.shape)
        if msg:
            msg += ". "
        return self.assertTrue(
            _np.all(a, **kwargs), f"{msg}Only {trues} out of {all} True"
        )


class MorphologyTestCase(NumpyTestCase):
    """
    Assertions on the structural invariants of loaded morphologies.
    """

    def assertAligned(self, morphology, msg=""):
        if msg:
            msg += ". "
        for section in morphology.sections:
            self.assertEqual(
                len(section.points),
                len(section.diameters),
                f"{msg}Points and diameters of {section} not aligned",
            )

    def assertContinuous(self, morphology, msg=""):
        if msg:
            msg += ". "
        for section in morphology.sections:
            if not section.is_root:
                self.assertEqual(
                    section.parent.points[-1],
                    section.points[0],
                    f"{msg}{section} does not start at the end of its parent",
                )


def get_data_path(*paths):
    return _os.path.abspath(
        _os.path.join(
            _os.path.dirname(__file__),
            "data",
            *paths,
        )
    )


def get_morphology_path(file):
    return get_data_path("morphologies", file)


def get_all_morphology_paths(suffix=""):
    yield from sorted(_glob.glob(get_data_path("morphologies", "*" + suffix)))


def read_morphology(file):
    with open(get_morphology_path(file), "r") as f:
        return f.read()
