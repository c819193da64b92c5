from __future__ import annotations
from warnings import warn

from enum import Enum, IntEnum, auto
from typing import Any, Optional

import numpy as np
import numpy.typing as npt


class FastEnum(IntEnum):
    def __str__(self):
        return Enum.__str__(self)

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return 1 + max([0, *last_values, *[max(c) for c in FastEnum.__subclasses__()]])


class Ops(FastEnum):
    # arithmetic
    ADDITION = auto()
    SUBTRACTION = auto()
    PRODUCT = auto()
    DIVISION = auto()

    # unary math
    SIN = auto()
    EXP = auto()

    # for tensors built from data
    NONE = auto()


class Type(FastEnum):
    FLOAT16 = 10
    FLOAT32 = 20
    FLOAT64 = 30


TYPE2DTYPE = {
    Type.FLOAT16: np.dtype(np.float16),
    Type.FLOAT32: np.dtype(np.float32),
    Type.FLOAT64: np.dtype(np.float64),
}


def dtype2tensor_type(dtype: npt.DTypeLike) -> Type:
    try:
        dtype = np.dtype(dtype)
    except TypeError:
        raise TypeError(f"Not a numpy dtype: {dtype!r}")

    if dtype == np.float16:
        return Type.FLOAT16
    elif dtype == np.float32:
        return Type.FLOAT32
    elif dtype == np.float64:
        return Type.FLOAT64
    else:
        raise TypeError(f"Tensor elements must be a floating type, got {dtype}")


def calc_promoted_dtype(dtype1: np.dtype, dtype2: np.dtype) -> np.dtype:
    promoted_rank = max(dtype2tensor_type(dtype1).value, dtype2tensor_type(dtype2).value)

    try:
        return TYPE2DTYPE[Type(promoted_rank)]
    except ValueError:
        raise ValueError("Internal Error, did not found corresponding type")


_DEFAULT_DTYPE: np.dtype = TYPE2DTYPE[Type.FLOAT32]


def get_default_dtype() -> np.dtype:
    """Gets the element type used for tensors built from non-float data."""
    return _DEFAULT_DTYPE


def set_default_dtype(dtype: Optional[npt.DTypeLike]) -> None:
    """Allows explicitly setting or resetting (with None) the default element type."""
    global _DEFAULT_DTYPE
    if dtype is None:
        _DEFAULT_DTYPE = TYPE2DTYPE[Type.FLOAT32]
        return

    tensor_type = dtype2tensor_type(dtype)
    if tensor_type == Type.FLOAT16:
        warn("float16 default dtype, new tensors will have reduced precision")
    _DEFAULT_DTYPE = TYPE2DTYPE[tensor_type]


def _exec_add_np(inputs: tuple[np.ndarray, ...], op_kwargs: dict) -> np.ndarray:
    tensor0, tensor1 = inputs
    return np.add(tensor0, tensor1)


def _exec_sub_np(inputs, op_kwargs) -> np.ndarray:
    tensor0, tensor1 = inputs
    return np.subtract(tensor0, tensor1)


def _exec_mul_np(inputs, op_kwargs) -> np.ndarray:
    tensor0, tensor1 = inputs
    return np.multiply(tensor0, tensor1)


def _exec_div_np(inputs, op_kwargs) -> np.ndarray:
    tensor0, tensor1 = inputs
    zero_mask = tensor1 == 0

    # smallest positive normal of the element type stands in for NaN
    result = np.full_like(tensor0, np.finfo(tensor0.dtype).tiny)
    np.divide(tensor0, tensor1, out=result, where=~zero_mask)

    if zero_mask.any():
        warn(
            f"division by zero at indices {np.flatnonzero(zero_mask).tolist()}, "
            f"replaced by {result.dtype.type(np.finfo(result.dtype).tiny)}",
            RuntimeWarning,
            stacklevel=5,
        )
    return result


def _exec_sin_np(inputs, op_kwargs) -> np.ndarray:
    (tensor0,) = inputs
    return np.sin(tensor0)


def _exec_exp_np(inputs, op_kwargs) -> np.ndarray:
    (tensor0,) = inputs
    return np.exp(tensor0)


NUMPY_EXECUTION_DISPATCH = {
    Ops.ADDITION: _exec_add_np,
    Ops.SUBTRACTION: _exec_sub_np,
    Ops.PRODUCT: _exec_mul_np,
    Ops.DIVISION: _exec_div_np,
    Ops.SIN: _exec_sin_np,
    Ops.EXP: _exec_exp_np,
}


def executor_numpy(
    op: Ops,
    inputs: tuple[np.ndarray, ...],
    dtype: np.dtype,
    op_kwargs: Optional[dict[str, Any]] = None,
) -> np.ndarray:
    """Runs `op` eagerly over `inputs` and returns a freshly allocated array of `dtype`."""
    if op_kwargs is None:
        op_kwargs = {}

    if op not in NUMPY_EXECUTION_DISPATCH:
        raise NotImplementedError(f"Exec func not implemented for op {op}")

    # astype always copies here, the kernels never see the callers buffers
    forward_inputs = tuple(np.asarray(t).astype(dtype) for t in inputs)

    exec_fn = NUMPY_EXECUTION_DISPATCH[op]
    return exec_fn(forward_inputs, op_kwargs).astype(dtype, copy=False)
