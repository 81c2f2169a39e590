"""
Flat sample records, as read from the lines of an SWC file.
"""

import enum
import typing

from .exceptions import LineNonParsableError, NegativeIdError
from .tokenizer import SwcTokenizer

#: Parent id of samples that have no parent.
ROOT = -1


class SectionType(enum.IntEnum):
    UNDEFINED = 0
    SOMA = 1
    AXON = 2
    BASAL_DENDRITE = 3
    APICAL_DENDRITE = 4
    CUSTOM_5 = 5
    CUSTOM_6 = 6
    CUSTOM_7 = 7
    CUSTOM_8 = 8
    CUSTOM_9 = 9
    CUSTOM_10 = 10
    CUSTOM_11 = 11
    CUSTOM_12 = 12
    CUSTOM_13 = 13
    CUSTOM_14 = 14
    CUSTOM_15 = 15
    CUSTOM_16 = 16
    CUSTOM_17 = 17
    CUSTOM_18 = 18
    CUSTOM_19 = 19
    # Any type at or above this value is not supported.
    OUT_OF_RANGE_START = 20

    @classmethod
    def is_supported(cls, value):
        return cls.SOMA <= value < cls.OUT_OF_RANGE_START


class Sample(typing.NamedTuple):
    """
    A single SWC record: a 3D point with a diameter, a type, and a reference to its
    parent sample.
    """

    id: int
    type: int
    point: tuple
    diameter: float
    parent_id: int
    line_number: int

    @property
    def is_root(self):
        return self.parent_id == ROOT

    @property
    def is_soma(self):
        return self.type == SectionType.SOMA


def read_samples(contents: str, path: str = None) -> typing.List[Sample]:
    """
    Read the ``id type x y z radius parent`` records of SWC content, in file order.

    Only the syntax of each record is checked here: whether ids are unique and parents
    exist can only be judged once all records are known.

    :param contents: SWC text.
    :param path: Name of the source, used in the error messages.
    :raises swctree.exceptions.RawDataError: When a record can't be read.
    """
    samples = []
    tokenizer = SwcTokenizer(contents, path)
    tokenizer.consume_line_and_trailing_comments()

    while not tokenizer.done():
        line = tokenizer.line_number
        id_ = tokenizer.read_int()
        if id_ < 0:
            raise NegativeIdError(
                tokenizer.where(line) + "Negative IDs are not supported.", path, (line,)
            )
        type_ = tokenizer.read_int()
        point = (tokenizer.read_float(), tokenizer.read_float(), tokenizer.read_float())
        diameter = 2 * tokenizer.read_float()
        parent_id = tokenizer.read_int()
        # -1 is the only accepted way of marking a root sample.
        if parent_id < ROOT:
            raise NegativeIdError(
                tokenizer.where(line) + "Negative IDs are not supported.", path, (line,)
            )
        if not tokenizer.consume_line_and_trailing_comments():
            raise LineNonParsableError(
                tokenizer.where(line) + "Unable to parse this line.", path, (line,)
            )
        samples.append(Sample(id_, type_, point, diameter, parent_id, line))
    return samples


__all__ = ["ROOT", "Sample", "SectionType", "read_samples"]
