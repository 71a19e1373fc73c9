import unittest

from src.layerconf.domain._errors import InvalidArgumentError
from src.layerconf.domain._updater import IUpdater
from src.layerconf.infrastructure.updaters import (
    AdaDelta,
    AdaGrad,
    AdaMax,
    Adam,
    AmsGrad,
    Nadam,
    Nesterovs,
    NoOp,
    RmsProp,
    Sgd,
    UpdaterRegistry,
    resolve_updater,
)


class TestUpdaterStateSize(unittest.TestCase):
    def test_state_multipliers(self):
        expected = {
            Sgd: 0,
            NoOp: 0,
            Nesterovs: 1,
            AdaGrad: 1,
            RmsProp: 1,
            AdaDelta: 2,
            Adam: 2,
            AdaMax: 2,
            Nadam: 2,
            AmsGrad: 3,
        }
        for cls, multiplier in expected.items():
            with self.subTest(updater=cls.__name__):
                u = cls()
                self.assertIsInstance(u, IUpdater)
                self.assertEqual(u.state_size(55), multiplier * 55)
                self.assertEqual(u.state_size(0), 0)

    def test_negative_num_params_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            Adam().state_size(-1)


class TestUpdaterHyperparameters(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(Sgd().learning_rate, 1e-3)
        self.assertEqual(AdaMax().learning_rate, 2e-3)
        self.assertEqual((Nesterovs().learning_rate, Nesterovs().momentum), (0.1, 0.9))
        a = Adam()
        self.assertEqual((a.beta1, a.beta2, a.epsilon), (0.9, 0.999, 1e-8))

    def test_invalid_values_rejected(self):
        with self.assertRaises(ValueError):
            Sgd(learning_rate=0.0)
        with self.assertRaises(ValueError):
            Adam(beta1=1.0)
        with self.assertRaises(ValueError):
            Adam(epsilon=-1e-8)

    def test_value_semantics(self):
        self.assertEqual(Adam(learning_rate=0.01), Adam(learning_rate=0.01))
        self.assertNotEqual(Adam(), Nadam())
        self.assertEqual(hash(Sgd()), hash(Sgd()))

    def test_get_config(self):
        self.assertEqual(Sgd(0.5).get_config(), {"learning_rate": 0.5})
        self.assertEqual(NoOp().get_config(), {})
        self.assertEqual(
            set(AmsGrad().get_config()), {"learning_rate", "beta1", "beta2", "epsilon"}
        )


class TestUpdaterRegistry(unittest.TestCase):
    def test_builtin_names(self):
        names = set(UpdaterRegistry.available())
        self.assertTrue(
            {"sgd", "noop", "nesterovs", "adagrad", "rmsprop", "adadelta",
             "adam", "adamax", "nadam", "amsgrad"} <= names
        )

    def test_lookup_is_case_insensitive(self):
        self.assertIs(UpdaterRegistry.get("ADAM"), Adam)
        self.assertEqual(UpdaterRegistry.create("Sgd", learning_rate=0.2), Sgd(0.2))

    def test_unknown_name(self):
        with self.assertRaises(ValueError) as ctx:
            UpdaterRegistry.get("lbfgs")
        self.assertIn("Available", str(ctx.exception))

    def test_duplicate_registration_rejected(self):
        with self.assertRaises(ValueError):
            UpdaterRegistry.register_updater("adam")(type("Other", (), {}))

    def test_resolve(self):
        self.assertEqual(resolve_updater("adam"), Adam())
        custom = Nesterovs(momentum=0.5)
        self.assertIs(resolve_updater(custom), custom)
        with self.assertRaises(InvalidArgumentError):
            resolve_updater("lbfgs")
        with self.assertRaises(InvalidArgumentError):
            resolve_updater(3)


if __name__ == "__main__":
    unittest.main()
