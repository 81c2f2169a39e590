"""
Index of the flat samples by id and by parent id, on which the structural checks of an
SWC file are performed.
"""

from .exceptions import (
    DisconnectedNeuriteWarning,
    MissingParentError,
    RepeatedIdError,
    SelfParentError,
    UnsupportedSectionTypeError,
    ZeroDiameterWarning,
)
from .reporting import WarningCollector
from .samples import ROOT, SectionType

EPSILON = 1e-6


class SampleGraph:
    """
    Samples indexed by id (in file order) together with the ids of the children of each
    sample (in the order they were encountered).
    """

    def __init__(self, samples, collector=None):
        self._collector = collector if collector is not None else WarningCollector()
        self._samples = {}
        self._children = {}
        self.soma_samples = []
        self.root_samples = []
        for sample in samples:
            self._add(sample)
        # Parents may be declared after their children, so missing parents can only be
        # detected once every sample is known.
        for sample in samples:
            if sample.parent_id != ROOT and sample.parent_id not in self._samples:
                raise MissingParentError(
                    self._where(sample.line_number)
                    + f"Sample id: {sample.id} refers to non-existant parent ID:"
                    + f" {sample.parent_id}",
                    self._collector.path,
                    (sample.line_number,),
                )

    def _where(self, line):
        return self._collector.where(line)

    def _add(self, sample):
        collector = self._collector
        line = sample.line_number
        if sample.diameter < EPSILON:
            collector.emit(
                ZeroDiameterWarning, "Warning: zero diameter in file", line
            )
        if sample.parent_id == sample.id:
            raise SelfParentError(
                self._where(line) + "Parent ID can not be itself",
                collector.path,
                (line,),
            )
        if not SectionType.is_supported(sample.type):
            raise UnsupportedSectionTypeError(
                self._where(line) + f"Unsupported section type: {sample.type}",
                collector.path,
                (line,),
            )
        if sample.parent_id == ROOT and sample.type != SectionType.SOMA:
            collector.emit(
                DisconnectedNeuriteWarning,
                "Warning: found a disconnected neurite.\n"
                + "Neurites are not supposed to have parentId: -1\n"
                + "(although this is normal if this neuron has no soma)",
                line,
            )

        if sample.type == SectionType.SOMA:
            self.soma_samples.append(sample)
        if sample.parent_id == ROOT or sample.type == SectionType.SOMA:
            self.root_samples.append(sample)

        original = self._samples.setdefault(sample.id, sample)
        if original is not sample:
            raise RepeatedIdError(
                self._where(line)
                + f"Repeated ID: {sample.id}\nID already appears here:\n"
                + self._where(original.line_number).rstrip(),
                collector.path,
                (original.line_number, line),
            )
        self._children.setdefault(sample.parent_id, []).append(sample.id)

    def __len__(self):
        return len(self._samples)

    def __contains__(self, id):
        return id in self._samples

    def __getitem__(self, id):
        return self._samples[id]

    def __iter__(self):
        return iter(self._samples.values())

    @property
    def samples(self):
        return self._samples

    @property
    def collector(self):
        return self._collector

    def children(self, id):
        """
        Return the ids of the children of a sample, in file order.
        """
        return self._children.get(id, [])

    def child_count(self, id):
        return len(self._children.get(id, ()))


__all__ = ["EPSILON", "SampleGraph"]
