from __future__ import annotations  # do not touch

from typing import Optional, TypeAlias

import numpy as np
import numpy.typing as npt

from mlnet.engine import (
    TYPE2DTYPE,
    Ops,
    calc_promoted_dtype,
    dtype2tensor_type,
    executor_numpy,
    get_default_dtype,
)
from mlnet.utils_shape import _check_same_shape, _get_list_shape

ArrayLike: TypeAlias = int | float | np.ndarray | list | tuple
TensorLike: TypeAlias = "Tensor | int | float | np.ndarray | list | tuple"


class Tensor:
    """One-dimensional container of floating point numbers.

    Each tensor remembers which operation produced it through its
    `provenance` tag (`Ops.NONE` when built directly from data).

    Args:
        array: scalar, flat list/tuple, 1-D ndarray or another Tensor.
        dtype: floating element type, defaults to the source dtype when it
            is already floating, or to `get_default_dtype()`.
        copy: when False an ndarray of matching dtype is adopted as is, and
            a Tensor source is moved (left empty) instead of copied.
    """

    # keep numpy from broadcasting over a Tensor operand, use our reflected ops
    __array_ufunc__ = None

    def __init__(
        self,
        array: Optional[TensorLike] = None,
        dtype: Optional[npt.DTypeLike] = None,
        copy: bool = True,
    ):
        self._provenance: Ops = Ops.NONE

        if dtype is not None:
            dtype = TYPE2DTYPE[dtype2tensor_type(dtype)]

        if array is None:
            if dtype is None:
                dtype = get_default_dtype()
            self._data = np.array([], dtype=dtype)
        elif isinstance(array, Tensor):
            if dtype is None:
                dtype = array.dtype
            if copy:
                self._data = np.array(array._data, dtype=dtype)
            else:
                self._data = np.asarray(array._data, dtype=dtype)
                array._data = np.array([], dtype=array.dtype)
        else:
            self._data = _to_flat_array(array, dtype, copy)

    @property
    def value(self) -> np.ndarray:
        return self._data.copy()

    @value.setter
    def value(self, array: ArrayLike):
        self._data = _to_flat_array(array, self.dtype, copy=True)

    @property
    def provenance(self) -> Ops:
        return self._provenance

    @provenance.setter
    def provenance(self, op: Ops):
        self._provenance = Ops(op)

    def get_value(self) -> np.ndarray:
        return self.value

    def set_value(self, array: ArrayLike) -> None:
        self.value = array

    def get_function(self) -> Ops:
        return self.provenance

    def set_function(self, op: Ops) -> None:
        self.provenance = op

    @property
    def shape(self) -> tuple[int, ...]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.shape[0]

    def tolist(self) -> list[float]:
        return self._data.tolist()

    def numpy(self) -> np.ndarray:
        return self.value

    def _binary_op(self, op: Ops, other: TensorLike, reflected=False) -> Tensor:
        other = _to_tensor(other, self.dtype)
        lhs, rhs = (other, self) if reflected else (self, other)

        _check_same_shape(lhs.shape, rhs.shape)
        dtype = calc_promoted_dtype(lhs.dtype, rhs.dtype)

        result = Tensor(
            executor_numpy(op, (lhs._data, rhs._data), dtype),
            copy=False,
        )
        result.provenance = op
        return result

    def __add__(self, other: TensorLike) -> Tensor:
        return self._binary_op(Ops.ADDITION, other)

    def __sub__(self, other: TensorLike) -> Tensor:
        return self._binary_op(Ops.SUBTRACTION, other)

    def __mul__(self, other: TensorLike) -> Tensor:
        return self._binary_op(Ops.PRODUCT, other)

    def __truediv__(self, other: TensorLike) -> Tensor:
        return self._binary_op(Ops.DIVISION, other)

    def __radd__(self, other: TensorLike) -> Tensor:
        return self._binary_op(Ops.ADDITION, other, reflected=True)

    def __rsub__(self, other: TensorLike) -> Tensor:
        return self._binary_op(Ops.SUBTRACTION, other, reflected=True)

    def __rmul__(self, other: TensorLike) -> Tensor:
        return self._binary_op(Ops.PRODUCT, other, reflected=True)

    def __rtruediv__(self, other: TensorLike) -> Tensor:
        return self._binary_op(Ops.DIVISION, other, reflected=True)

    def sin(self) -> Tensor:
        from mlnet.functions import sin

        return sin(self)

    def exp(self) -> Tensor:
        from mlnet.functions import exp

        return exp(self)

    def __str__(self) -> str:
        # same layout as a C++ stream: six significant digits, trailing space
        return "[" + "".join(f"{val:g} " for val in self._data.tolist()) + "]"

    def __repr__(self) -> str:
        return f"Tensor({self._data.tolist()}, provenance={self._provenance.name}, shape={self.shape}, dtype={self.dtype})"


def _to_flat_array(
    array: ArrayLike, dtype: Optional[np.dtype], copy: bool
) -> np.ndarray:
    if isinstance(array, np.generic):
        array = np.asarray(array)

    if isinstance(array, np.ndarray):
        if array.ndim > 1:
            raise ValueError(
                f"Tensor must be one-dimensional, got array of shape {array.shape}"
            )
        if array.dtype.kind not in "iuf":
            raise TypeError(f"Unsupported array dtype for tensor: {array.dtype}")
        if dtype is None:
            if array.dtype.kind == "f":
                dtype = TYPE2DTYPE[dtype2tensor_type(array.dtype)]
            else:
                dtype = get_default_dtype()
        array = array.reshape(-1)
    elif isinstance(array, (list, tuple, int, float)):
        _get_list_shape(array)
        if dtype is None:
            dtype = get_default_dtype()
        array = np.atleast_1d(np.array(array, dtype=dtype))
        copy = False
    else:
        raise TypeError(
            f"Input to tensor must be list, tuple, int, float or np.ndarray, got {type(array)}"
        )

    if copy:
        return np.array(array, dtype=dtype)
    return np.asarray(array, dtype=dtype)


def _to_tensor(x: TensorLike, dtype: Optional[np.dtype] = None) -> Tensor:
    if isinstance(x, Tensor):
        return x
    return Tensor(x, dtype=dtype)
