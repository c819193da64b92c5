class ShapeMismatch(ValueError):
    """Raised when the operands of an elementwise operation differ in length."""

    def __init__(self, lhs_size: int, rhs_size: int):
        self.lhs_size = lhs_size
        self.rhs_size = rhs_size
        super().__init__(
            f"Tensor a's shape ({lhs_size}) is different than Tensor b's shape ({rhs_size}). "
            "Both Tensors should have the same shape."
        )
