import logging
import unittest

from blcount import Abstraction, App, Application, Lam, Var, Variable


class TestTerm(unittest.TestCase):
    logger = logging.getLogger(__name__)
    logging.basicConfig(
        format="%(module)s %(levelname)s: %(message)s",
    )

    def test_aliases(self) -> None:
        self.assertIs(Variable, Var)
        self.assertIs(Abstraction, Lam)
        self.assertIs(Application, App)

    def test_size(self) -> None:
        self.assertEqual(Var(1).size(), 2)
        self.assertEqual(Var(3).size(), 4)
        self.assertEqual(Lam(Var(1)).size(), 4)
        self.assertEqual(App(Var(1), Var(2)).size(), 7)
        self.assertEqual(Lam(Lam(App(Var(2), Var(1)))).size(), 11)

    def test_bits(self) -> None:
        identity = Lam(Var(1))
        self.assertEqual(identity.bits(), "0010")
        # K = λλ2
        self.assertEqual(Lam(Lam(Var(2))).bits(), "0000110")
        omega = Lam(App(Var(1), Var(1)))
        self.assertEqual(omega.bits(), "00011010")
        for term in [identity, omega, App(omega, omega), Var(5)]:
            self.assertEqual(len(term.bits()), term.size())

    def test_free_bound(self) -> None:
        self.assertEqual(Lam(Var(1)).free_bound(), 0)
        self.assertEqual(Lam(Var(2)).free_bound(), 1)
        self.assertEqual(App(Var(3), Var(1)).free_bound(), 3)
        self.assertEqual(Lam(App(Lam(Var(3)), Var(1))).free_bound(), 1)
        self.assertTrue(Lam(Lam(Var(2))).is_closed())
        self.assertFalse(Lam(Var(2)).is_valid(0))
        self.assertTrue(Lam(Var(2)).is_valid(1))

    def test_structural_equality(self) -> None:
        self.assertEqual(Lam(App(Var(1), Var(1))), Lam(App(Var(1), Var(1))))
        self.assertNotEqual(Lam(Var(1)), Lam(Var(2)))
        self.assertEqual(len({Lam(Var(1)), Lam(Var(1)), Var(1)}), 2)

    def test_call_applies(self) -> None:
        f, x = Lam(Var(1)), Var(1)
        self.assertEqual(f(x), App(f, x))
        self.assertIs(f(x).left, f)
        self.assertIs(f(x).right, x)

    def test_negative_index(self) -> None:
        with self.assertRaises(ValueError):
            Var(-1)


if __name__ == "__main__":
    unittest.main()
