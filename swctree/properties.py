"""
Immutable, flattened representation of a loaded morphology.
"""

import enum

import numpy as np

from . import _util as _gutil
from .samples import SectionType
from .soma import SomaType


class CellFamily(enum.IntEnum):
    NEURON = 0
    GLIA = 1
    SPINE = 2


class Properties:
    """
    Read-only property table of a morphology. Points and diameters of all sections are
    stored in contiguous arrays, and section ``i`` spans the rows
    ``section_offsets[i]:section_offsets[i + 1]``.
    """

    def __init__(
        self,
        points,
        diameters,
        section_offsets,
        section_types,
        section_parents,
        soma_type=SomaType.UNDEFINED,
        soma_points=None,
        soma_diameters=None,
        cell_family=CellFamily.NEURON,
        version=("swc", 1, 0),
        path=None,
    ):
        self.points = _gutil.readonly_ndarray(points, (-1, 3), float)
        self.diameters = _gutil.readonly_ndarray(diameters, (-1,), float)
        _gutil.assert_samelen(self.points, self.diameters)
        self.section_offsets = _gutil.readonly_ndarray(section_offsets, (-1,), int)
        self.section_types = _gutil.readonly_ndarray(section_types, (-1,), int)
        self.section_parents = _gutil.readonly_ndarray(section_parents, (-1,), int)
        _gutil.assert_samelen(self.section_types, self.section_parents)
        self.soma_type = SomaType(soma_type)
        self.soma_points = _gutil.readonly_ndarray(
            soma_points if soma_points is not None else [], (-1, 3), float
        )
        self.soma_diameters = _gutil.readonly_ndarray(
            soma_diameters if soma_diameters is not None else [], (-1,), float
        )
        self.cell_family = CellFamily(cell_family)
        self.version = tuple(version)
        self.path = path

    @classmethod
    def from_mutable(cls, morphology, path=None, **kwargs):
        """
        Flatten a :class:`~.mut.MutableMorphology` depth first.
        """
        sections = morphology.sections
        index = {section.id: i for i, section in enumerate(sections)}
        offsets = np.zeros(len(sections) + 1, dtype=int)
        offsets[1:] = np.cumsum([len(s) for s in sections], dtype=int)
        points = [p for s in sections for p in s.points]
        diameters = [d for s in sections for d in s.diameters]
        soma = morphology.soma
        return cls(
            points,
            diameters,
            offsets,
            [int(s.type) for s in sections],
            [index[s.parent_id] if s.parent_id is not None else -1 for s in sections],
            soma_type=soma.type,
            soma_points=soma.points,
            soma_diameters=soma.diameters,
            path=path,
            **kwargs,
        )

    @_gutil.obj_str_insert
    def __repr__(self):
        return (
            f"{self.soma_type.name} soma, {self.n_sections} sections,"
            f" {len(self.points)} points"
        )

    @property
    def n_sections(self):
        return len(self.section_types)

    @property
    def root_sections(self):
        """
        Indices of the sections without parent.
        """
        return np.flatnonzero(self.section_parents == -1)

    def section_type(self, section):
        return SectionType(self.section_types[section])

    def section_points(self, section):
        return self.points[self.section_offsets[section] : self.section_offsets[section + 1]]

    def section_diameters(self, section):
        return self.diameters[
            self.section_offsets[section] : self.section_offsets[section + 1]
        ]

    def section_children(self, section):
        return np.flatnonzero(self.section_parents == section)


__all__ = ["CellFamily", "Properties"]
