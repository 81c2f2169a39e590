"""
Mutable morphology tree. Sections live in an arena owned by the morphology and refer to
their parent and children by integer handle.
"""

from collections import deque

from . import _util as _gutil
from .exceptions import SectionDataError
from .samples import SectionType
from .soma import Soma


class Section:
    """
    A series of connected points of the same type. Can be a root or connected to a
    parent section, and can be terminal or have multiple children.
    """

    def __init__(self, morphology, id, type, points, diameters, parent_id=None):
        points = [tuple(map(float, p)) for p in points]
        diameters = [float(d) for d in diameters]
        if len(points) != len(diameters):
            raise SectionDataError(
                f"Section has {len(points)} points but {len(diameters)} diameters."
            )
        if any(len(p) != 3 for p in points):
            raise SectionDataError("Section points must have 3 coordinates.")
        self._morphology = morphology
        self.id = id
        self.type = SectionType(type)
        self.points = points
        self.diameters = diameters
        self.parent_id = parent_id
        self.children_ids = []

    @_gutil.obj_str_insert
    def __repr__(self):
        return f"{self.id}: {self.type.name}, {len(self)} points"

    def __len__(self):
        return len(self.points)

    def __bool__(self):
        # Without this, empty sections are False, and `if section.parent:` checks fail.
        return True

    @property
    def is_root(self):
        """
        Returns whether this section is a root section.
        """
        return self.parent_id is None

    @property
    def is_terminal(self):
        """
        Returns whether this section is a terminal section.
        """
        return not self.children_ids

    @property
    def parent(self):
        if self.parent_id is None:
            return None
        return self._morphology.section(self.parent_id)

    @property
    def children(self):
        """
        Collection of the child sections of this section.
        """
        return [self._morphology.section(id) for id in self.children_ids]

    @property
    def morphology(self):
        return self._morphology

    def append_section(self, points, diameters, type=None):
        """
        Create a new section and attach it as the last child of this section.

        :param type: Section type of the child, defaults to the type of this section.
        :returns: The new section.
        :rtype: Section
        """
        return self._morphology._new_section(
            points, diameters, self.type if type is None else type, self.id
        )

    def walk(self):
        """
        Iterate over this section and all of its descendants, depth first.
        """
        return self._morphology.iter(self)


class MutableMorphology:
    """
    In-progress morphology: a soma and a forest of :class:`Section`.
    """

    def __init__(self, soma=None):
        self.soma = soma if soma is not None else Soma()
        self._sections = {}
        self._root_ids = []
        self._next_id = 0

    @_gutil.obj_str_insert
    def __repr__(self):
        return f"{len(self._root_ids)} roots, {len(self._sections)} sections"

    def __len__(self):
        return len(self._sections)

    def _new_section(self, points, diameters, type, parent_id):
        section = Section(self, self._next_id, type, points, diameters, parent_id)
        self._sections[section.id] = section
        self._next_id += 1
        if parent_id is None:
            self._root_ids.append(section.id)
        else:
            self._sections[parent_id].children_ids.append(section.id)
        return section

    def append_root_section(self, points, diameters, type):
        """
        Create a new section at the root of the tree.

        :returns: The new section.
        :rtype: Section
        """
        return self._new_section(points, diameters, type, None)

    def section(self, id):
        """
        Return the section with the given handle.
        """
        return self._sections[id]

    @property
    def root_sections(self):
        return [self._sections[id] for id in self._root_ids]

    @root_sections.setter
    def root_sections(self, sections):
        ids = [s.id for s in sections]
        if sorted(ids) != sorted(self._root_ids):
            raise SectionDataError("Root sections can only be reordered.")
        self._root_ids = ids

    @property
    def sections(self):
        """
        Return a depth-first flattened list of all sections.
        """
        return list(self.iter())

    def iter(self, start=None):
        """
        Iterate depth first over the sections downstream of ``start``, or over the whole
        tree.
        """
        if start is None:
            stack = deque(reversed(self.root_sections))
        else:
            stack = deque([start])
        while stack:
            section = stack.pop()
            yield section
            stack.extend(reversed(section.children))

    def apply_modifiers(self, options):
        """
        Apply the modifiers selected by the ``options`` flags, in place.

        :type options: swctree.modifiers.Option
        """
        from .modifiers import apply_modifiers

        apply_modifiers(self, options)
        return self

    def build_read_only(self, path=None):
        """
        Flatten the tree into an immutable :class:`~.properties.Properties`.
        """
        from .properties import Properties

        return Properties.from_mutable(self, path=path)


__all__ = ["MutableMorphology", "Section"]
