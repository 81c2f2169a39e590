"""
`swctree` reconstructs neuronal morphologies from SWC files: a soma and a tree of
sections, checked against the structural rules of the format, with every data quality
issue reported as a warning.
"""

__version__ = "1.0.0"

from .exceptions import SwcError, SwcWarning
from .modifiers import Option
from .mut import MutableMorphology, Section
from .properties import CellFamily, Properties
from .samples import ROOT, Sample, SectionType, read_samples
from .soma import Soma, SomaType
from .swc import LoadResult, SwcBuilder, build_mutable, load_swc, read_swc

__all__ = [
    "CellFamily",
    "LoadResult",
    "MutableMorphology",
    "Option",
    "Properties",
    "ROOT",
    "Sample",
    "Section",
    "SectionType",
    "Soma",
    "SomaType",
    "SwcBuilder",
    "SwcError",
    "SwcWarning",
    "build_mutable",
    "load_swc",
    "read_samples",
    "read_swc",
]
