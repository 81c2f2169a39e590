import functools as _ft

import numpy as _np


def obj_str_insert(__str__):
    """
    Decorator to insert the return value of __str__ into '<classname {returnvalue} at 0x...>'
    """

    @_ft.wraps(__str__)
    def wrapper(self):
        obj_str = object.__repr__(self)
        return obj_str.replace("at 0x", f"{__str__(self)} at 0x")

    return wrapper


def readonly_ndarray(arr_input, shape, dtype=None):
    """
    Copy an object into a new ndarray of the given shape that can't be written to.
    """
    arr = _np.array(arr_input, dtype=dtype).reshape(shape)
    arr.flags.writeable = False
    return arr


def assert_samelen(*args):
    """
    Assert that all input arguments have the same length.
    """
    len_ = None
    assert all(
        ((len_ := len(arg)) if len_ is None else len(arg)) == len_ for arg in args
    ), "Input arguments should be of same length."
