import math
import unittest
import warnings

from thermokin.constants import H_PLANCK, K_BOLTZMANN, R_GAS
from thermokin.errors import InvalidInput, InvalidTemperature, UnsupportedOrder
from thermokin.kinetics import (
    ArrheniusKinetics,
    EyringKinetics,
    activation_energy,
    concentration_at,
    half_life,
    rate_constant_arrhenius,
    rate_constant_eyring,
)


class TestArrhenius(unittest.TestCase):
    def test_zero_activation_energy(self):
        k = rate_constant_arrhenius(1e13, 0.0, 300.0)
        self.assertEqual(k.value, 1e13)
        self.assertEqual(k.unit, "s⁻¹")

    def test_rate_constant(self):
        expected = 2.4e3 * math.exp(-85.0 * 1000.0 / (R_GAS * 350.0))
        k = ArrheniusKinetics(pre_exponential=2.4e3, activation_energy=85.0)
        self.assertAlmostEqual(k.rate_constant(350.0) / expected, 1.0, places=12)

    def test_unit_follows_pre_exponential(self):
        k = rate_constant_arrhenius(5.0e9, 40.0, 500.0, unit="L/(mol·s)")
        self.assertEqual(k.unit, "L/(mol·s)")

    def test_rate_increases_with_temperature(self):
        low = rate_constant_arrhenius(1e10, 60.0, 300.0).value
        high = rate_constant_arrhenius(1e10, 60.0, 350.0).value
        self.assertGreater(high, low)

    def test_underflow_is_zero(self):
        self.assertEqual(rate_constant_arrhenius(1.0, 1e6, 1.0).value, 0.0)

    def test_invalid_temperature(self):
        for temperature in (0.0, -10.0):
            with self.assertRaises(InvalidTemperature):
                rate_constant_arrhenius(1e13, 50.0, temperature)


class TestEyring(unittest.TestCase):
    def test_frequency_factor(self):
        k = rate_constant_eyring(0.0, 0.0, 298.15)
        expected = K_BOLTZMANN * 298.15 / H_PLANCK
        self.assertAlmostEqual(k.value / expected, 1.0, places=12)
        self.assertEqual(k.unit, "s⁻¹")

    def test_rate_constant(self):
        temperature = 310.0
        delta_g = 75.0 - temperature * (-20.0 / 1000.0)
        expected = (K_BOLTZMANN * temperature / H_PLANCK) * math.exp(
            -delta_g * 1000.0 / (R_GAS * temperature)
        )
        k = EyringKinetics(activation_enthalpy=75.0, activation_entropy=-20.0)
        self.assertAlmostEqual(k.rate_constant(temperature) / expected, 1.0, places=12)

    def test_invalid_temperature(self):
        for temperature in (0.0, -1.0):
            with self.assertRaises(InvalidTemperature):
                rate_constant_eyring(75.0, -20.0, temperature)


class TestActivationEnergy(unittest.TestCase):
    def test_two_point_fixture(self):
        ea = activation_energy(0.54, 600.0, 5.2, 700.0)
        expected = R_GAS * math.log(5.2 / 0.54) / (1.0 / 600.0 - 1.0 / 700.0) / 1000.0
        self.assertAlmostEqual(ea.value, expected, places=9)
        self.assertTrue(79.0 < ea.value < 79.2)
        self.assertEqual(ea.unit, "kJ/mol")

    def test_recovers_arrhenius_energy(self):
        arrhenius = ArrheniusKinetics(1e11, 95.0)
        k1 = arrhenius.rate_constant(400.0)
        k2 = arrhenius.rate_constant(450.0)
        self.assertAlmostEqual(activation_energy(k1, 400.0, k2, 450.0).value, 95.0, places=6)

    def test_invalid_inputs(self):
        cases = [
            (0.0, 600.0, 5.2, 700.0),
            (0.54, 600.0, -5.2, 700.0),
            (0.54, 0.0, 5.2, 700.0),
            (0.54, 600.0, 5.2, -700.0),
            (0.54, 600.0, 5.2, 600.0),
            (0.54, 7.0, 5.2, 7.000000000000001),
        ]
        for args in cases:
            with self.subTest(args=args):
                with self.assertRaises(InvalidInput):
                    activation_energy(*args)

    def test_vanishing_rate_ratio_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            ea = activation_energy(1e300, 300.0, 1e-300, 400.0)
        self.assertEqual(ea.value, -math.inf)


class TestHalfLife(unittest.TestCase):
    def test_first_order(self):
        t_half = half_life(0.693, 1)
        self.assertAlmostEqual(t_half.value, 1.0, delta=1e-3)
        self.assertEqual(t_half.unit, "s")

    def test_first_order_ignores_initial_concentration(self):
        self.assertEqual(half_life(0.1, 1, 0.01).value, half_life(0.1, 1, 5.0).value)
        self.assertEqual(half_life(0.1, 1, -1.0).value, half_life(0.1, 1).value)

    def test_second_order(self):
        self.assertAlmostEqual(half_life(0.54, 2, 0.01).value, 185.19, delta=0.01)

    def test_second_order_underflowing_product(self):
        self.assertEqual(half_life(1e-200, 2, 1e-200).value, math.inf)

    def test_zero_order(self):
        self.assertAlmostEqual(half_life(0.01, 0, 1.0).value, 50.0)

    def test_unsupported_order(self):
        for order in (-1, 3, 1.5):
            with self.assertRaises(UnsupportedOrder):
                half_life(0.1, order)

    def test_order_checked_before_rate_constant(self):
        with self.assertRaises(UnsupportedOrder):
            half_life(-1.0, 4)

    def test_invalid_inputs(self):
        with self.assertRaises(InvalidInput):
            half_life(0.0, 1)
        with self.assertRaises(InvalidInput):
            half_life(0.1, 0, 0.0)
        with self.assertRaises(InvalidInput):
            half_life(0.1, 2, -0.5)


class TestIntegratedRateLaw(unittest.TestCase):
    def test_half_life_halves_concentration(self):
        for order in (0, 1, 2):
            with self.subTest(order=order):
                t_half = half_life(0.2, order, 2.0).value
                remaining = concentration_at(0.2, order, 2.0, t_half)
                self.assertAlmostEqual(remaining.value, 1.0)
                self.assertEqual(remaining.unit, "mol/L")

    def test_zero_order_floors_at_zero(self):
        self.assertEqual(concentration_at(0.5, 0, 1.0, 10.0).value, 0.0)

    def test_invalid_inputs(self):
        with self.assertRaises(InvalidInput):
            concentration_at(0.5, 1, 1.0, -1.0)
        with self.assertRaises(UnsupportedOrder):
            concentration_at(0.5, 3, 1.0, 1.0)


if __name__ == '__main__':
    unittest.main()
