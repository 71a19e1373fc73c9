import json
import unittest

from src.layerconf.domain._input_type import InputType
from src.layerconf.infrastructure.layers import (
    DenseLayer,
    GaussianNoise,
    MaxNormConstraint,
    NonNegativeConstraint,
)
from src.layerconf.infrastructure.serialization import (
    config_from_dict,
    config_to_dict,
    from_json,
    to_json,
)
from src.layerconf.infrastructure.updaters import Adam, NoOp


class TestConfigSerialization(unittest.TestCase):
    def _conf(self):
        return (
            DenseLayer.builder()
            .n_in(10)
            .n_out(5)
            .activation("relu")
            .weight_init("kaiming")
            .bias_init(0.1)
            .updater(Adam(learning_rate=0.01))
            .dropout(0.3)
            .l2(1e-4)
            .name("hidden")
            .constrain_weights(MaxNormConstraint(max_norm=2.0))
            .constrain_all_parameters(NonNegativeConstraint())
            .build()
        )

    def test_dense_node_shape(self):
        node = config_to_dict(self._conf())
        self.assertEqual(node["type"], "DenseLayer")
        cfg = node["config"]
        self.assertEqual(cfg["n_in"], 10)
        self.assertEqual(cfg["activation"], "relu")
        self.assertTrue(cfg["has_bias"])
        self.assertEqual(cfg["updater"]["type"], "Adam")
        self.assertEqual(cfg["dropout"], {"type": "Dropout", "config": {"p": 0.3}})

    def test_json_round_trip(self):
        conf = self._conf()
        text = to_json(conf)
        json.loads(text)
        restored = from_json(text)
        self.assertEqual(restored, conf)
        self.assertEqual(
            restored.memory_report(InputType.feed_forward(10)),
            conf.memory_report(InputType.feed_forward(10)),
        )

    def test_round_trip_minimal_and_without_bias(self):
        for conf in (
            DenseLayer.builder().build(),
            DenseLayer.builder().n_in(3).n_out(2).has_bias(False).updater(NoOp()).build(),
            DenseLayer.builder().n_out(2).dropout(GaussianNoise(0.2)).build(),
        ):
            with self.subTest(conf=conf):
                self.assertEqual(config_from_dict(config_to_dict(conf)), conf)

    def test_input_types_round_trip(self):
        for it in (
            InputType.feed_forward(4),
            InputType.recurrent(3, 7),
            InputType.convolutional(2, 3, 4),
            InputType.convolutional_flat(5, 5, 1),
        ):
            with self.subTest(input_type=it):
                self.assertEqual(from_json(to_json(it)), it)

    def test_unknown_type_rejected(self):
        with self.assertRaises(ValueError):
            config_from_dict({"type": "Conv2DLayer", "config": {}})

    def test_unserializable_object_rejected(self):
        with self.assertRaises(TypeError):
            config_to_dict(object())


if __name__ == "__main__":
    unittest.main()
