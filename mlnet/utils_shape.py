from typing import Any

import numpy as np

from mlnet.exceptions import ShapeMismatch


def _get_list_shape(data: Any) -> tuple[int, ...]:
    if not isinstance(data, (list, tuple)):
        if isinstance(data, bool) or not isinstance(data, (int, float, np.integer, np.floating)):
            raise TypeError(f"Invalid type given: {type(data)}")
        return ()

    if not data:
        return (0,)

    for i, element in enumerate(data):
        try:
            element_shape = _get_list_shape(element)
        except TypeError as e:
            raise TypeError(f"Error processing element at index {i}: {e}") from e
        if element_shape != ():
            raise ValueError(
                f"Tensor must be one-dimensional, element at index {i} has sub-shape {element_shape}"
            )

    return (len(data),)


def _check_same_shape(
    shape1: tuple[int, ...], shape2: tuple[int, ...]
) -> tuple[int, ...]:
    if shape1 != shape2:
        # no broadcasting, a length 1 operand is still a mismatch
        raise ShapeMismatch(shape1[0], shape2[0])
    return shape1
