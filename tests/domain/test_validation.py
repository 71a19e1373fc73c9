import unittest

import numpy as np

from src.layerconf.domain._errors import (
    BufferTooSmallError,
    ConfigurationIncompleteError,
    InvalidArgumentError,
)
from src.layerconf.domain.utils._validation import (
    assert_n_in_n_out_set,
    is_width_set,
)
from src.layerconf.domain.utils._weight_initialization import (
    _calculate_fan_in,
    _calculate_fan_in_and_fan_out,
)


class TestWidthValidation(unittest.TestCase):
    def test_is_width_set(self):
        self.assertTrue(is_width_set(1))
        self.assertTrue(is_width_set(np.int64(5)))
        self.assertFalse(is_width_set(np.int64(0)))
        for v in (None, 0, -1, True, 2.0):
            with self.subTest(v=v):
                self.assertFalse(is_width_set(v))

    def test_missing_n_in_reported_first(self):
        with self.assertRaises(ConfigurationIncompleteError) as ctx:
            assert_n_in_n_out_set("DenseLayer", "hidden", 3, None, None)
        err = ctx.exception
        self.assertEqual(err.field, "n_in")
        self.assertEqual(err.layer_index, 3)
        self.assertEqual(err.layer_name, "hidden")
        self.assertIn("idx=3", str(err))
        self.assertIn("DenseLayer", str(err))

    def test_missing_n_out(self):
        with self.assertRaises(ConfigurationIncompleteError) as ctx:
            assert_n_in_n_out_set("DenseLayer", None, 0, 4, 0)
        self.assertEqual(ctx.exception.field, "n_out")
        self.assertEqual(ctx.exception.value, 0)

    def test_both_set_passes(self):
        assert_n_in_n_out_set("DenseLayer", None, 0, 4, 2)


class TestErrorTaxonomy(unittest.TestCase):
    def test_error_bases(self):
        self.assertTrue(issubclass(InvalidArgumentError, ValueError))
        self.assertTrue(issubclass(BufferTooSmallError, ValueError))
        self.assertTrue(issubclass(ConfigurationIncompleteError, RuntimeError))

    def test_buffer_too_small_attributes(self):
        err = BufferTooSmallError(55, 10)
        self.assertEqual((err.required, err.actual), (55, 10))
        self.assertIn("55", str(err))


class TestFanHelpers(unittest.TestCase):
    def test_dense_layout(self):
        self.assertEqual(_calculate_fan_in_and_fan_out((10, 5)), (10, 5))
        self.assertEqual(_calculate_fan_in((10, 5)), 10)

    def test_vector_and_scalar(self):
        self.assertEqual(_calculate_fan_in_and_fan_out((7,)), (7, 7))
        self.assertEqual(_calculate_fan_in_and_fan_out(()), (1, 1))

    def test_receptive_field(self):
        self.assertEqual(_calculate_fan_in_and_fan_out((3, 4, 2, 2)), (12, 16))


if __name__ == "__main__":
    unittest.main()
