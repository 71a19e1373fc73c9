import math
import unittest
import numpy as np

from src.layerconf.infrastructure.utils.weight_initializer._base import (
    WeightInitializer,
)


class TestKaimingAndFanInInitializers(unittest.TestCase):
    def setUp(self) -> None:
        np.random.seed(0)

    def _std(self, x: np.ndarray) -> float:
        return float(x.std(ddof=0))

    def test_kaiming_normal_uses_fan_in_rows(self):
        view = np.zeros((1024, 512), dtype=np.float32)
        WeightInitializer("kaiming")(view)
        expected = math.sqrt(2.0 / 1024)
        self.assertTrue(math.isclose(self._std(view), expected, rel_tol=0.1))

    def test_kaiming_uniform_bounds(self):
        view = np.zeros((256, 128), dtype=np.float32)
        WeightInitializer("kaiming_uniform")(view)
        bound = math.sqrt(6.0 / 256)
        self.assertLessEqual(float(np.abs(view).max()), bound * 1.001)

    def test_kaiming_leaky_relu(self):
        view = np.zeros((1024, 512), dtype=np.float32)
        WeightInitializer("kaiming_leaky_relu_0.01")(view)
        expected = math.sqrt(2.0 / ((1.0 + 0.01**2) * 1024))
        self.assertTrue(math.isclose(self._std(view), expected, rel_tol=0.1))

    def test_lecun_normal(self):
        view = np.zeros((1024, 512), dtype=np.float32)
        WeightInitializer("lecun_normal")(view)
        self.assertTrue(math.isclose(self._std(view), math.sqrt(1.0 / 1024), rel_tol=0.1))

    def test_uniform_bounds(self):
        view = np.zeros((100, 50), dtype=np.float32)
        WeightInitializer("uniform")(view)
        self.assertLessEqual(float(np.abs(view).max()), (1.0 / math.sqrt(100)) * 1.001)


class TestConstantInitializers(unittest.TestCase):
    def test_zeros_and_ones(self):
        view = np.full((3, 4), 7.0, dtype=np.float32)
        WeightInitializer("zeros")(view)
        self.assertTrue((view == 0).all())
        WeightInitializer("ones")(view)
        self.assertTrue((view == 1).all())

    def test_writes_through_strided_view(self):
        buf = np.full(12, 7.0, dtype=np.float32)
        view = buf[::2]
        WeightInitializer("zeros")(view)
        np.testing.assert_array_equal(buf[::2], 0.0)
        np.testing.assert_array_equal(buf[1::2], 7.0)


if __name__ == "__main__":
    unittest.main()
