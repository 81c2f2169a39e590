"""
Soma representations and the rules to pick one from the soma samples of an SWC file.
"""

import enum

import numpy as np

from . import _util as _gutil
from .exceptions import (
    MultipleSomataError,
    SomaBifurcationError,
    SomaNonConformWarning,
    SomaWithNeuriteParentError,
)
from .graph import EPSILON
from .samples import ROOT


class SomaType(enum.IntEnum):
    UNDEFINED = 0
    SINGLE_POINT = 1
    NEUROMORPHO_THREE_POINT_CYLINDERS = 2
    CYLINDERS = 3
    SIMPLE_CONTOUR = 4


class Soma:
    """
    Cell body of a morphology: a shape type, and parallel lists of points and diameters.
    """

    def __init__(self, type=SomaType.UNDEFINED, points=None, diameters=None):
        self.type = SomaType(type)
        self.points = list(points) if points is not None else []
        self.diameters = list(diameters) if diameters is not None else []
        _gutil.assert_samelen(self.points, self.diameters)

    @_gutil.obj_str_insert
    def __repr__(self):
        return f"{self.type.name}, {len(self)} points"

    def __len__(self):
        return len(self.points)

    @property
    def center(self):
        """
        Mean of the soma points.
        """
        if not self.points:
            raise ValueError("An empty soma has no center.")
        return np.mean(self.points, axis=0)

    @property
    def representative_point(self):
        """
        The point that neurites attached to the soma conceptually start from.
        """
        return self.points[0], self.diameters[0]


def build_soma(graph):
    """
    Classify the soma samples of ``graph`` into one of the :class:`SomaType` shapes.

    :param graph: Validated samples.
    :type graph: swctree.graph.SampleGraph
    :rtype: Soma
    :raises swctree.exceptions.SomaError: When the soma samples can't form a soma.
    """
    soma_samples = graph.soma_samples
    if not soma_samples:
        return Soma(SomaType.UNDEFINED)
    elif len(soma_samples) == 1:
        sample = soma_samples[0]
        if sample.parent_id != ROOT and not graph[sample.parent_id].is_soma:
            _raise_neurite_parent(graph, sample)
        return Soma(SomaType.SINGLE_POINT, [sample.point], [sample.diameter])
    elif len(soma_samples) == 3:
        center, child1, child2 = soma_samples
        # Soma of the NeuroMorpho.org 3 point convention: the first sample bifurcates into
        # the other two.
        if center.id == child1.parent_id and center.id == child2.parent_id:
            if center.parent_id != ROOT and not graph[center.parent_id].is_soma:
                _raise_neurite_parent(graph, center)
            _check_neuromorpho_soma(graph, center, child1, child2)
            return Soma(
                SomaType.NEUROMORPHO_THREE_POINT_CYLINDERS,
                [s.point for s in soma_samples],
                [s.diameter for s in soma_samples],
            )
    return _build_cylinder_soma(graph, soma_samples)


def _build_cylinder_soma(graph, soma_samples):
    roots = []
    for sample in soma_samples:
        if sample.parent_id == ROOT:
            roots.append(sample)
        elif not graph[sample.parent_id].is_soma:
            _raise_neurite_parent(graph, sample)
        soma_children = [
            graph[id] for id in graph.children(sample.id) if graph[id].is_soma
        ]
        if len(soma_children) > 1:
            where = graph.collector.where
            raise SomaBifurcationError(
                where(sample.line_number)
                + "Soma must be a succession of points, found a bifurcation"
                + " with these children:\n"
                + "\n".join(where(c.line_number).rstrip() for c in soma_children),
                graph.collector.path,
                (sample.line_number, *(c.line_number for c in soma_children)),
            )
    if len(roots) > 1:
        raise MultipleSomataError(
            graph.collector.where(roots[0].line_number)
            + "Multiple somata found, only one is supported. Soma roots on lines: "
            + ", ".join(str(s.line_number) for s in roots),
            graph.collector.path,
            tuple(s.line_number for s in roots),
        )
    return Soma(
        SomaType.CYLINDERS,
        [s.point for s in soma_samples],
        [s.diameter for s in soma_samples],
    )


def _raise_neurite_parent(graph, sample):
    raise SomaWithNeuriteParentError(
        graph.collector.where(sample.line_number)
        + f"Soma sample {sample.id} has a neurite sample ({sample.parent_id})"
        + " as parent",
        graph.collector.path,
        (sample.line_number, graph[sample.parent_id].line_number),
    )


def _check_neuromorpho_soma(graph, center, child1, child2):
    x, y, z = center.point
    d = center.diameter
    r = d / 2
    lower, upper = sorted((child1, child2), key=lambda s: s.point[1])
    # The only conforming soma is:
    #   1 1 x   y   z r -1
    #   2 1 x (y-r) z r  1
    #   3 1 x (y+r) z r  1
    conform = (
        all(
            abs(child.point[0] - x) < EPSILON
            and abs(child.point[2] - z) < EPSILON
            and abs(child.diameter - d) < EPSILON
            for child in (child1, child2)
        )
        and abs(lower.point[1] - (y - r)) < EPSILON
        and abs(upper.point[1] - (y + r)) < EPSILON
    )
    if not conform:
        graph.collector.emit(
            SomaNonConformWarning,
            "Warning: The soma does not conform the three points soma spec.\n"
            + "The only valid neuro-morpho soma is:\n"
            + "1 1 x   y   z r -1\n"
            + "2 1 x (y-r) z r  1\n"
            + "3 1 x (y+r) z r  1\n\n"
            + f"Got:\n{_fmt(center)}\n{_fmt(child1)}\n{_fmt(child2)}",
            center.line_number,
            child1.line_number,
            child2.line_number,
        )


def _fmt(sample):
    x, y, z = sample.point
    return f"{sample.id} 1 {x} {y} {z} {sample.diameter / 2} {sample.parent_id}"


__all__ = ["Soma", "SomaType", "build_soma"]
