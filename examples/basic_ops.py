import numpy as np

from mlnet import Tensor, sin, exp

tensor1 = Tensor([1, 2, 3, 4])
tensor2 = Tensor([6, 7, 8, 9])
print(tensor1 - tensor2)

tensor3 = Tensor([9, 8, 7, 6])
print(tensor3 * tensor2)

x = Tensor([0.0, np.pi / 2, 1.0], dtype=np.float64)
print(repr(sin(x)))
print(repr(exp(x)))
