"""
SWC reader: turns the flat samples of an SWC file into a soma and a tree of sections.

Parsing follows http://www.neuronland.org/NLMorphologyConverter/MorphologyFormats/SWC/Spec.html
"""

import typing
from collections import deque

from . import _util as _gutil
from .exceptions import LineNonParsableError, SwcError, WrongRootPointWarning
from .graph import SampleGraph
from .modifiers import Option
from .mut import MutableMorphology
from .reporting import WarningCollector, report
from .samples import read_samples
from .soma import SomaType, build_soma

if typing.TYPE_CHECKING:
    from .properties import Properties


class SwcBuilder:
    """
    Builds a single morphology from SWC content. Holds all the state of one load; create
    a new builder per file.
    """

    def __init__(self, path=None):
        self.path = path or ""
        self.collector = WarningCollector(self.path)
        self._graph = None
        self._morphology = None
        # Maps the id of the last sample of each section to the section handle.
        self._declared = {}

    @property
    def warnings(self):
        return self.collector.warnings

    def build(self, contents, options=Option.NO_MODIFIER) -> "Properties":
        """
        Build the read-only properties of the morphology in ``contents``.

        :param contents: SWC text.
        :param options: Modifiers to apply to the tree before it is made read-only.
        :type options: swctree.modifiers.Option
        """
        morphology = self.build_mutable(contents)
        morphology.apply_modifiers(options)
        return morphology.build_read_only(path=self.path)

    def build_mutable(self, contents) -> MutableMorphology:
        """
        Build the mutable tree of the morphology in ``contents``.
        """
        if isinstance(contents, bytes):
            contents = self._decode(contents)
        samples = read_samples(contents, self.path)
        self._graph = graph = SampleGraph(samples, self.collector)
        self._morphology = MutableMorphology(build_soma(graph))
        self._declared = {}
        soma = self._morphology.soma
        for root_sample in graph.root_samples:
            if not graph.child_count(root_sample.id):
                continue
            # https://neuromorpho.org/SomaFormat.html
            # "The second and third soma points, as well as all starting points
            # (roots) of dendritic and axonal arbors have this first point as
            # the parent (parent ID 1)."
            if (
                soma.type == SomaType.NEUROMORPHO_THREE_POINT_CYLINDERS
                and root_sample.is_soma
                and root_sample.id != 1
            ):
                self.collector.emit(
                    WrongRootPointWarning,
                    "Warning: with a 3 points soma, neurites must be connected to the"
                    + " first soma point.",
                    root_sample.line_number,
                )
            neurite_children = [
                id for id in graph.children(root_sample.id) if not graph[id].is_soma
            ]
            if root_sample.is_soma:
                for child_id in neurite_children:
                    # Neurites start from the representative point of the soma.
                    self._assemble(child_id, soma.representative_point)
            elif neurite_children:
                self._assemble(root_sample.id)
        report(f"Assembled {self._morphology} from '{self.path}'", level=4)
        return self._morphology

    def _decode(self, contents):
        try:
            return contents.decode("utf8")
        except UnicodeDecodeError as e:
            line = contents.count(b"\n", 0, e.start) + 1
            raise LineNonParsableError(
                self.collector.where(line) + f"Unable to decode this line: {e.reason}.",
                self.path,
                (line,),
            ) from None

    def _assemble(self, root_id, boundary=None):
        graph = self._graph
        morphology = self._morphology
        # Each pending section: its first sample, the id of the last sample of its parent
        # section, and the point and diameter it continues from.
        pending = deque([(root_id, None, boundary)])
        while pending:
            id, parent_id, boundary = pending.pop()
            sample = graph[id]
            points = []
            diameters = []
            if boundary is not None and sample.point != boundary[0]:
                points.append(boundary[0])
                diameters.append(boundary[1])
            # Merge straight runs of samples of the same type into a single section.
            while graph.child_count(id) == 1:
                child = graph[graph.children(id)[0]]
                if child.type != sample.type:
                    break
                points.append(sample.point)
                diameters.append(sample.diameter)
                id, sample = child.id, child
            points.append(sample.point)
            diameters.append(sample.diameter)
            if parent_id is None:
                section = morphology.append_root_section(points, diameters, sample.type)
            else:
                parent = morphology.section(self._declared[parent_id])
                section = parent.append_section(points, diameters, sample.type)
            self._declared[id] = section.id
            # A single child here is a change of section type, several children are a
            # bifurcation: either way each child starts a new section.
            continuation = (points[-1], diameters[-1])
            # Soma samples are never part of a neurite tree.
            pending.extend(
                (child_id, id, continuation)
                for child_id in reversed(graph.children(id))
                if not graph[child_id].is_soma
            )


class LoadResult:
    """
    Outcome of loading a morphology: either the read-only properties or the error that
    stopped the load, and in both cases the warnings emitted during the load.
    """

    def __init__(self, properties=None, warnings=None, error=None):
        self.properties = properties
        self.warnings = list(warnings) if warnings is not None else []
        self.error = error

    @_gutil.obj_str_insert
    def __repr__(self):
        state = "ok" if self.ok else type(self.error).__name__
        return f"{state}, {len(self.warnings)} warnings"

    @property
    def ok(self):
        return self.error is None

    def unwrap(self) -> "Properties":
        """
        Return the properties, or raise the error of a failed load.
        """
        if self.error is not None:
            raise self.error
        return self.properties


def read_swc(contents, path="", options=Option.NO_MODIFIER) -> LoadResult:
    """
    Load SWC content without raising on invalid data.

    :param contents: SWC text.
    :type contents: Union[str, bytes]
    :param path: Name of the source, only used in diagnostics.
    :param options: Modifiers to apply after assembly.
    :type options: swctree.modifiers.Option
    :rtype: LoadResult
    """
    builder = SwcBuilder(path)
    try:
        properties = builder.build(contents, options)
    except SwcError as e:
        return LoadResult(warnings=builder.warnings, error=e)
    return LoadResult(properties, builder.warnings)


def load_swc(contents, path="", options=Option.NO_MODIFIER) -> "Properties":
    """
    Load SWC content.

    :raises swctree.exceptions.SwcError: When the content is not a valid morphology.
    """
    return read_swc(contents, path, options).unwrap()


def build_mutable(contents, path=""):
    """
    Assemble SWC content into a mutable tree, without applying any modifier.

    :returns: The tree and the warnings of the load.
    :rtype: Tuple[swctree.mut.MutableMorphology, List[swctree.reporting.LoadWarning]]
    """
    builder = SwcBuilder(path)
    morphology = builder.build_mutable(contents)
    return morphology, builder.warnings


__all__ = ["LoadResult", "SwcBuilder", "build_mutable", "load_swc", "read_swc"]
