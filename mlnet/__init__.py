from .exceptions import ShapeMismatch
from .engine import Ops, Type, get_default_dtype, set_default_dtype
from .tensor import Tensor  # Make Tensor directly importable from mlnet
from .functions import add, div, exp, mul, sin, sub

__all__ = [
    "Tensor",
    "Ops",
    "Type",
    "ShapeMismatch",
    "sin",
    "exp",
    "add",
    "sub",
    "mul",
    "div",
    "get_default_dtype",
    "set_default_dtype",
]
