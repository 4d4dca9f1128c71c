from ._layout import (
    NestedData,
    flatten,
    shape_of,
    rebuild,
    numel,
    row_major_strides,
    ravel_index,
    unravel_index,
)
from ._control_path import create_path_builder

__all__ = [
    "NestedData",
    flatten.__name__,
    shape_of.__name__,
    rebuild.__name__,
    numel.__name__,
    row_major_strides.__name__,
    ravel_index.__name__,
    unravel_index.__name__,
    create_path_builder.__name__,
]
