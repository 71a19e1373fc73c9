import unittest

from src.layerconf.domain._errors import (
    ConfigurationIncompleteError,
    InvalidArgumentError,
)
from src.layerconf.domain._input_type import FeedForwardInput, InputType
from src.layerconf.domain._memory import CacheMode, MemoryType, MemoryUseMode
from src.layerconf.infrastructure.layers._dense import DenseLayer
from src.layerconf.infrastructure.layers._dropout import AlphaDropout
from src.layerconf.infrastructure.memory._memory_report import MemoryReport


def _dense(n_in=10, n_out=5, **kwargs):
    b = DenseLayer.builder().n_in(n_in).n_out(n_out)
    for key, value in kwargs.items():
        getattr(b, key)(value)
    return b.build()


class TestDenseNumParams(unittest.TestCase):
    def test_num_params_formula(self):
        for n_in, n_out, has_bias in [(10, 5, True), (10, 5, False), (1, 1, True), (784, 128, True)]:
            with self.subTest(n_in=n_in, n_out=n_out, has_bias=has_bias):
                conf = _dense(n_in, n_out, has_bias=has_bias)
                expected = n_in * n_out + (n_out if has_bias else 0)
                self.assertEqual(conf.num_params(), expected)

    def test_num_params_requires_widths(self):
        with self.assertRaises(ConfigurationIncompleteError):
            DenseLayer.builder().n_out(5).build().num_params()


class TestDenseMemoryReport(unittest.TestCase):
    def test_no_dropout_example(self):
        conf = _dense(10, 5, updater="sgd")
        report = conf.memory_report(InputType.feed_forward(10))

        self.assertIsInstance(report, MemoryReport)
        self.assertEqual(report.standard_memory_params, 55)
        self.assertEqual(report.standard_memory_updater_state, 0)
        self.assertEqual(report.working_memory_variable_training, 5)
        self.assertEqual(report.working_memory_variable_inference, 5)
        self.assertEqual(report.working_memory_fixed_training, 0)
        self.assertEqual(report.working_memory_fixed_inference, 0)
        self.assertEqual(report.output_type, FeedForwardInput(5))
        self.assertEqual(report.layer_type, "DenseLayer")

    def test_dropout_adds_input_copy_to_training_only(self):
        conf = _dense(10, 5, dropout=0.5)
        report = conf.memory_report(InputType.feed_forward(10))

        self.assertEqual(report.working_memory_variable_training, 15)
        self.assertEqual(report.working_memory_variable_inference, 5)

    def test_any_dropout_policy_counts(self):
        conf = _dense(10, 5, dropout=AlphaDropout(0.1))
        report = conf.memory_report(InputType.feed_forward(10))
        self.assertEqual(report.working_memory_variable_training, 15)

    def test_updater_state_follows_updater(self):
        cases = {"sgd": 0, "noop": 0, "nesterovs": 55, "rmsprop": 55, "adam": 110, "amsgrad": 165}
        for name, expected in cases.items():
            with self.subTest(updater=name):
                report = _dense(10, 5, updater=name).memory_report(InputType.feed_forward(10))
                self.assertEqual(report.standard_memory_updater_state, expected)

    def test_image_input_uses_total_elements(self):
        conf = _dense(28 * 28, 10, dropout=0.2)
        report = conf.memory_report(InputType.convolutional_flat(28, 28, 1))
        self.assertEqual(report.output_type, FeedForwardInput(10))
        self.assertEqual(report.working_memory_variable_training, 10 + 784)

    def test_cache_memory_always_zero(self):
        for dropout in (None, 0.5):
            conf = _dense(10, 5, dropout=dropout)
            report = conf.memory_report(InputType.feed_forward(10))
            for mode in CacheMode:
                with self.subTest(dropout=dropout, mode=mode):
                    self.assertEqual(report.cache_memory_fixed_for(mode), 0)
                    self.assertEqual(report.cache_memory_variable_for(mode), 0)
                    self.assertEqual(
                        report.memory_bytes(
                            MemoryType.CACHED_MEMORY_VARIABLE, 64, MemoryUseMode.TRAINING, mode
                        ),
                        0,
                    )

    def test_report_is_pure(self):
        conf = _dense(10, 5, dropout=0.5, updater="adam")
        shape = InputType.feed_forward(10)
        first = conf.memory_report(shape)
        second = conf.memory_report(shape)
        self.assertEqual(first, second)
        self.assertEqual(first.to_dict(), second.to_dict())
        self.assertIsNot(first, second)

    def test_report_is_hashable(self):
        conf = _dense(10, 5, dropout=0.5, updater="adam")
        shape = InputType.feed_forward(10)
        first = conf.memory_report(shape)
        second = conf.memory_report(shape)

        self.assertEqual(hash(first), hash(second))
        self.assertEqual(len({first, second}), 1)
        self.assertEqual({first: "dense"}[second], "dense")

    def test_wrong_arity_rejected(self):
        conf = _dense(10, 5)
        with self.assertRaises(InvalidArgumentError):
            conf.memory_report()
        with self.assertRaises(InvalidArgumentError):
            conf.memory_report(InputType.feed_forward(10), InputType.feed_forward(10))
        with self.assertRaises(InvalidArgumentError):
            conf.memory_report(None)

    def test_missing_widths_fail_loudly(self):
        with self.assertRaises(ConfigurationIncompleteError):
            DenseLayer.builder().n_in(10).build().memory_report(InputType.feed_forward(10))
        with self.assertRaises(ConfigurationIncompleteError):
            DenseLayer.builder().n_out(5).build().memory_report(InputType.feed_forward(10))


class TestDenseShapeInference(unittest.TestCase):
    def test_output_type_is_flat(self):
        conf = _dense(10, 5)
        self.assertEqual(conf.output_type(InputType.convolutional(4, 4, 2)), FeedForwardInput(5))

    def test_output_type_requires_n_out(self):
        with self.assertRaises(ConfigurationIncompleteError):
            DenseLayer.builder().build().output_type(InputType.feed_forward(3))

    def test_infer_n_in(self):
        conf = DenseLayer.builder().n_out(5).build()
        cases = [
            (InputType.feed_forward(12), 12),
            (InputType.convolutional_flat(4, 4, 2), 32),
            (InputType.convolutional(4, 4, 3), 48),
            (InputType.recurrent(7), 7),
        ]
        for input_type, expected in cases:
            with self.subTest(input_type=input_type):
                inferred = conf.with_inferred_n_in(input_type)
                self.assertEqual(inferred.n_in, expected)
                self.assertIsNone(conf.n_in)

    def test_infer_n_in_never_resets(self):
        conf = _dense(12, 5)
        self.assertIs(conf.with_inferred_n_in(InputType.feed_forward(12)), conf)
        with self.assertRaises(InvalidArgumentError):
            conf.with_inferred_n_in(InputType.feed_forward(13))

    def test_infer_n_in_rejects_missing_input_type(self):
        conf = DenseLayer.builder().n_out(5).build()
        with self.assertRaises(InvalidArgumentError):
            conf.with_inferred_n_in(None)
        with self.assertRaises(InvalidArgumentError):
            conf.output_type(None)


if __name__ == "__main__":
    unittest.main()
