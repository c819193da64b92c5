import unittest

import numpy as np

from mlnet.engine import (
    Ops,
    Type,
    calc_promoted_dtype,
    dtype2tensor_type,
    executor_numpy,
    get_default_dtype,
    set_default_dtype,
)


class TestEnums(unittest.TestCase):
    def test_ops_are_closed(self):
        self.assertEqual(
            [op.name for op in Ops],
            ["ADDITION", "SUBTRACTION", "PRODUCT", "DIVISION", "SIN", "EXP", "NONE"],
        )
        self.assertEqual(len(set(Ops)), 7)

    def test_str(self):
        self.assertEqual(str(Ops.SIN), "Ops.SIN")
        self.assertEqual(str(Type.FLOAT32), "Type.FLOAT32")


class TestDtypes(unittest.TestCase):
    def tearDown(self):
        set_default_dtype(None)

    def test_dtype2tensor_type(self):
        self.assertEqual(dtype2tensor_type(np.float16), Type.FLOAT16)
        self.assertEqual(dtype2tensor_type("float32"), Type.FLOAT32)
        self.assertEqual(dtype2tensor_type(np.dtype(np.float64)), Type.FLOAT64)

        for bad in (np.int32, np.int64, np.bool_, np.complex64):
            with self.subTest(dtype=bad):
                with self.assertRaises(TypeError):
                    dtype2tensor_type(bad)

    def test_promotion(self):
        self.assertEqual(calc_promoted_dtype(np.dtype(np.float16), np.dtype(np.float64)), np.float64)
        self.assertEqual(calc_promoted_dtype(np.dtype(np.float32), np.dtype(np.float16)), np.float32)
        self.assertEqual(calc_promoted_dtype(np.dtype(np.float32), np.dtype(np.float32)), np.float32)

    def test_default_dtype(self):
        self.assertEqual(get_default_dtype(), np.float32)

        set_default_dtype(np.float64)
        self.assertEqual(get_default_dtype(), np.float64)

        set_default_dtype(None)
        self.assertEqual(get_default_dtype(), np.float32)

    def test_float16_default_warns(self):
        with self.assertWarns(UserWarning):
            set_default_dtype(np.float16)
        self.assertEqual(get_default_dtype(), np.float16)

    def test_non_float_default_rejected(self):
        with self.assertRaises(TypeError):
            set_default_dtype(np.int64)
        self.assertEqual(get_default_dtype(), np.float32)


class TestExecutor(unittest.TestCase):
    def test_inputs_not_mutated(self):
        a = np.array([1.0, 2.0], dtype=np.float32)
        b = np.array([0.0, 4.0], dtype=np.float32)

        with self.assertWarns(RuntimeWarning):
            out = executor_numpy(Ops.DIVISION, (a, b), np.dtype(np.float32))

        np.testing.assert_array_equal(a, [1.0, 2.0])
        np.testing.assert_array_equal(b, [0.0, 4.0])
        self.assertEqual(out[0], np.finfo(np.float32).tiny)
        self.assertEqual(out[1], 0.5)

    def test_output_dtype(self):
        a = np.array([1.0, 2.0], dtype=np.float16)
        out = executor_numpy(Ops.ADDITION, (a, a), np.dtype(np.float64))
        self.assertEqual(out.dtype, np.float64)

        out = executor_numpy(Ops.EXP, (a,), np.dtype(np.float16))
        self.assertEqual(out.dtype, np.float16)

    def test_negative_zero_divisor(self):
        a = np.array([1.0])
        with self.assertWarns(RuntimeWarning):
            out = executor_numpy(Ops.DIVISION, (a, np.array([-0.0])), np.dtype(np.float64))
        self.assertEqual(out[0], np.finfo(np.float64).tiny)

    def test_none_is_not_executable(self):
        with self.assertRaises(NotImplementedError):
            executor_numpy(Ops.NONE, (np.array([1.0]),), np.dtype(np.float32))


if __name__ == "__main__":
    unittest.main()
