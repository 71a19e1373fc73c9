import unittest

from src.layerconf.domain._errors import InvalidArgumentError
from src.layerconf.infrastructure.layers._activations import Activation
from src.layerconf.infrastructure.layers._dropout import (
    AlphaDropout,
    Dropout,
    GaussianDropout,
    GaussianNoise,
    resolve_dropout,
)


class TestActivationResolve(unittest.TestCase):
    def test_names_are_case_insensitive(self):
        self.assertIs(Activation.resolve("ReLU"), Activation.RELU)
        self.assertIs(Activation.resolve(" tanh "), Activation.TANH)
        self.assertIs(Activation.resolve(Activation.SOFTMAX), Activation.SOFTMAX)

    def test_unknown_activation(self):
        with self.assertRaises(InvalidArgumentError):
            Activation.resolve("gelu2")
        with self.assertRaises(InvalidArgumentError):
            Activation.resolve(3)


class TestDropoutPolicies(unittest.TestCase):
    def test_resolve(self):
        self.assertIsNone(resolve_dropout(None))
        self.assertIsNone(resolve_dropout(0.0))
        self.assertIsNone(resolve_dropout(0))
        self.assertEqual(resolve_dropout(0.25), Dropout(0.25))
        policy = GaussianDropout(0.1)
        self.assertIs(resolve_dropout(policy), policy)

    def test_resolve_rejects_other_types(self):
        with self.assertRaises(InvalidArgumentError):
            resolve_dropout("0.5")
        with self.assertRaises(InvalidArgumentError):
            resolve_dropout(True)

    def test_probability_validation(self):
        for bad in (-0.1, 1.0, 1.5):
            with self.subTest(p=bad):
                with self.assertRaises(InvalidArgumentError):
                    Dropout(bad)
        with self.assertRaises(InvalidArgumentError):
            AlphaDropout(1.0)
        with self.assertRaises(InvalidArgumentError):
            GaussianNoise(0.0)


if __name__ == "__main__":
    unittest.main()
