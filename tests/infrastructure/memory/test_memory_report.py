import unittest

import numpy as np

from src.layerconf.domain._errors import InvalidArgumentError
from src.layerconf.domain._input_type import InputType
from src.layerconf.domain._memory import CacheMode, MemoryType, MemoryUseMode
from src.layerconf.infrastructure.memory import MemoryReport


def _report(**overrides):
    fields = dict(
        layer_name="dense",
        layer_type="DenseLayer",
        input_type=InputType.feed_forward(10),
        output_type=InputType.feed_forward(5),
        standard_memory_params=55,
        standard_memory_updater_state=110,
        working_memory_variable_inference=5,
        working_memory_variable_training=15,
    )
    fields.update(overrides)
    return MemoryReport(**fields)


class TestMemoryReportElements(unittest.TestCase):
    def test_training_counts(self):
        r = _report()
        train = MemoryUseMode.TRAINING
        self.assertEqual(r.memory_elements(MemoryType.PARAMETERS, 32, train), 55)
        self.assertEqual(r.memory_elements(MemoryType.PARAMETER_GRADIENTS, 32, train), 55)
        self.assertEqual(r.memory_elements(MemoryType.UPDATER_STATE, 32, train), 110)
        self.assertEqual(r.memory_elements(MemoryType.WORKING_MEMORY_FIXED, 32, train), 0)
        self.assertEqual(r.memory_elements(MemoryType.WORKING_MEMORY_VARIABLE, 32, train), 15 * 32)

    def test_inference_counts(self):
        r = _report()
        infer = MemoryUseMode.INFERENCE
        self.assertEqual(r.memory_elements(MemoryType.PARAMETERS, 8, infer), 55)
        self.assertEqual(r.memory_elements(MemoryType.PARAMETER_GRADIENTS, 8, infer), 0)
        self.assertEqual(r.memory_elements(MemoryType.UPDATER_STATE, 8, infer), 0)
        self.assertEqual(r.memory_elements(MemoryType.WORKING_MEMORY_VARIABLE, 8, infer), 40)

    def test_cache_memory_per_mode(self):
        r = _report(
            cache_memory_fixed={CacheMode.DEVICE: 7},
            cache_memory_variable={CacheMode.DEVICE: 3},
        )
        train = MemoryUseMode.TRAINING
        self.assertEqual(r.cache_memory_fixed_for(CacheMode.NONE), 0)
        self.assertEqual(r.cache_memory_fixed_for(CacheMode.HOST), 0)
        self.assertEqual(
            r.memory_elements(MemoryType.CACHED_MEMORY_FIXED, 4, train, CacheMode.DEVICE), 7
        )
        self.assertEqual(
            r.memory_elements(MemoryType.CACHED_MEMORY_VARIABLE, 4, train, CacheMode.DEVICE), 12
        )
        self.assertEqual(
            r.memory_elements(
                MemoryType.CACHED_MEMORY_VARIABLE, 4, MemoryUseMode.INFERENCE, CacheMode.DEVICE
            ),
            0,
        )

    def test_minibatch_must_be_positive(self):
        with self.assertRaises(InvalidArgumentError):
            _report().memory_elements(MemoryType.PARAMETERS, 0, MemoryUseMode.TRAINING)


class TestMemoryReportBytes(unittest.TestCase):
    def test_bytes_follow_dtype(self):
        r = _report()
        for dtype, size in (("float16", 2), ("float32", 4), (np.float64, 8)):
            with self.subTest(dtype=dtype):
                self.assertEqual(
                    r.memory_bytes(MemoryType.PARAMETERS, 1, MemoryUseMode.TRAINING, data_type=dtype),
                    55 * size,
                )

    def test_total_bytes(self):
        r = _report()
        # params + grads + updater + variable working memory
        self.assertEqual(
            r.total_memory_bytes(2, MemoryUseMode.TRAINING),
            (55 + 55 + 110 + 15 * 2) * 4,
        )
        self.assertEqual(r.total_memory_bytes(2, MemoryUseMode.INFERENCE), (55 + 5 * 2) * 4)


class TestMemoryReportValue(unittest.TestCase):
    def test_negative_counts_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            _report(standard_memory_params=-1)
        with self.assertRaises(InvalidArgumentError):
            _report(cache_memory_fixed={CacheMode.HOST: -2})

    def test_cache_maps_are_read_only(self):
        r = _report()
        with self.assertRaises(TypeError):
            r.cache_memory_fixed[CacheMode.NONE] = 1

    def test_equality(self):
        self.assertEqual(_report(), _report())
        self.assertNotEqual(_report(), _report(working_memory_variable_training=5))

    def test_hash_consistent_with_equality(self):
        self.assertEqual(hash(_report()), hash(_report()))
        cached = _report(cache_memory_fixed={CacheMode.HOST: 4})
        self.assertNotEqual(cached, _report())
        self.assertEqual(len({cached, _report(), _report()}), 2)

    def test_to_dict(self):
        d = _report().to_dict()
        self.assertEqual(d["input_type"], {"type": "FeedForwardInput", "config": {"size": 10}})
        self.assertEqual(d["cache_memory_fixed"], {"none": 0, "host": 0, "device": 0})
        self.assertEqual(d["standard_memory_updater_state"], 110)

    def test_format_summary(self):
        text = _report().format_summary()
        self.assertIn("DenseLayer (dense)", text)
        self.assertIn("parameters:        55", text)


if __name__ == "__main__":
    unittest.main()
