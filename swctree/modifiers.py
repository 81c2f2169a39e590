"""
Modifiers that transform an assembled :class:`~.mut.MutableMorphology` in place.
"""

import enum

import numpy as np

from .soma import SomaType


class Option(enum.IntFlag):
    NO_MODIFIER = 0
    TWO_POINTS_SECTIONS = 1
    SOMA_SPHERE = 2
    NO_DUPLICATES = 4
    NRN_ORDER = 8


def two_points_sections(morphology):
    """
    Keep only the first and last point of each section.
    """
    for section in morphology.sections:
        if len(section) > 2:
            section.points = [section.points[0], section.points[-1]]
            section.diameters = [section.diameters[0], section.diameters[-1]]


def soma_sphere(morphology):
    """
    Reduce the soma to a single point at the center of its points, with as diameter twice
    the mean distance of the soma points to that center.
    """
    soma = morphology.soma
    if len(soma) < 2:
        return
    points = np.array(soma.points, dtype=float)
    center = soma.center
    radius = np.mean(np.linalg.norm(points - center, axis=1))
    soma.type = SomaType.SINGLE_POINT
    soma.points = [tuple(center.tolist())]
    soma.diameters = [float(2 * radius)]


def no_duplicates(morphology):
    """
    Remove the first point of each child section, which duplicates the last point of its
    parent, and the copy of the first soma point that soma-rooted sections start with.
    Sections are never emptied.
    """
    soma = morphology.soma
    soma_point = soma.points[0] if len(soma) else None
    for section in morphology.sections:
        if len(section) < 2:
            continue
        if not section.is_root or section.points[0] == soma_point:
            del section.points[0]
            del section.diameters[0]


def nrn_order(morphology):
    """
    Order the root sections by section type, keeping the file order within a type.
    """
    morphology.root_sections = sorted(morphology.root_sections, key=lambda s: s.type)


def apply_modifiers(morphology, options):
    """
    Apply each modifier selected by the ``options`` flags to ``morphology``.

    :type morphology: swctree.mut.MutableMorphology
    :type options: Option
    """
    options = Option(options)
    if options & Option.TWO_POINTS_SECTIONS:
        two_points_sections(morphology)
    # Duplicates of the soma point are found before the soma is reshaped.
    if options & Option.NO_DUPLICATES:
        no_duplicates(morphology)
    if options & Option.SOMA_SPHERE:
        soma_sphere(morphology)
    if options & Option.NRN_ORDER:
        nrn_order(morphology)
    return morphology


__all__ = [
    "Option",
    "apply_modifiers",
    "no_duplicates",
    "nrn_order",
    "soma_sphere",
    "two_points_sections",
]
