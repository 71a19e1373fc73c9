import unittest

from src.layerconf.domain._input_type import FeedForwardInput, InputType
from src.layerconf.infrastructure.layers import DenseLayer
from src.layerconf.infrastructure.layers._layer_ops import memory_report, output_type


class TestLayerOps(unittest.TestCase):
    def test_dispatch_matches_direct_calls(self):
        conf = DenseLayer.builder().n_in(6).n_out(3).dropout(0.5).build()
        shape = InputType.feed_forward(6)
        self.assertEqual(memory_report(conf, shape), conf.memory_report(shape))
        self.assertEqual(output_type(conf, shape), FeedForwardInput(3))

    def test_rejects_non_layer(self):
        with self.assertRaises(TypeError):
            memory_report({"n_in": 3}, InputType.feed_forward(3))
        with self.assertRaises(TypeError):
            output_type(None, InputType.feed_forward(3))


if __name__ == "__main__":
    unittest.main()
