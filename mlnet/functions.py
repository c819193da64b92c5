from mlnet.engine import Ops, executor_numpy
from mlnet.tensor import Tensor, TensorLike, _to_tensor


def _unary_op(op: Ops, in_tensor: TensorLike) -> Tensor:
    # work on an independent copy, the input is never touched
    result = Tensor(_to_tensor(in_tensor))
    result.set_value(executor_numpy(op, (result.value,), result.dtype))
    result.set_function(op)
    return result


def sin(x: TensorLike) -> Tensor:
    """Elementwise sine, tagged `Ops.SIN`."""
    return _unary_op(Ops.SIN, x)


def exp(x: TensorLike) -> Tensor:
    """Elementwise exponential, tagged `Ops.EXP`.

    Overflow is not an error, it follows numpy's float semantics (inf).
    """
    return _unary_op(Ops.EXP, x)


def add(a: TensorLike, b: TensorLike) -> Tensor:
    return _to_tensor(a) + b


def sub(a: TensorLike, b: TensorLike) -> Tensor:
    return _to_tensor(a) - b


def mul(a: TensorLike, b: TensorLike) -> Tensor:
    return _to_tensor(a) * b


def div(a: TensorLike, b: TensorLike) -> Tensor:
    """Elementwise division, zero divisors give `np.finfo(dtype).tiny`."""
    return _to_tensor(a) / b
