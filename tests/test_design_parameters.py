"""
test_design_parameters.py
=========================
Mapped seismic demand parameters and the MCE spectrum.
"""

import unittest

from femap695.errors import InvalidArgument
from femap695.hazard_analysis.design_parameters import (
    CodeParameterSet,
    DemandParameter,
    SeismicDesignCategory,
    code_parameters,
    mapped_value,
)
from femap695.hazard_analysis.mce_intensity import smt

ALL_SDCS = ("Dmax", "Dmin", "Cmax", "Cmin", "Bmax", "Bmin")


# ─────────────────────────────────────────────────────────────────────────────
# Category resolution
# ─────────────────────────────────────────────────────────────────────────────

class TestSeismicDesignCategory(unittest.TestCase):

    def test_shared_parameter_sets(self):
        self.assertIs(SeismicDesignCategory.parse("Cmax"), SeismicDesignCategory.CMAX_DMIN)
        self.assertIs(SeismicDesignCategory.parse("Dmin"), SeismicDesignCategory.CMAX_DMIN)
        self.assertIs(SeismicDesignCategory.parse("Bmax"), SeismicDesignCategory.BMAX_CMIN)
        self.assertIs(SeismicDesignCategory.parse("Cmin"), SeismicDesignCategory.BMAX_CMIN)

    def test_case_insensitive(self):
        self.assertIs(SeismicDesignCategory.parse("DMAX"), SeismicDesignCategory.DMAX)
        self.assertIs(SeismicDesignCategory.parse(" bmin "), SeismicDesignCategory.BMIN)

    def test_member_passthrough(self):
        self.assertIs(SeismicDesignCategory.parse(SeismicDesignCategory.BMIN), SeismicDesignCategory.BMIN)

    def test_unknown_category(self):
        with self.assertRaises(InvalidArgument) as ctx:
            SeismicDesignCategory.parse("Emax")
        self.assertEqual(ctx.exception.value, "Emax")
        self.assertIn("Emax", str(ctx.exception))

    def test_no_substring_match(self):
        with self.assertRaises(InvalidArgument):
            SeismicDesignCategory.parse("SDC Dmax")

    def test_demand_parameter_parse(self):
        self.assertIs(DemandParameter.parse("fa"), DemandParameter.FA)
        self.assertIs(DemandParameter.parse("sm1"), DemandParameter.SM1)


# ─────────────────────────────────────────────────────────────────────────────
# mapped_value
# ─────────────────────────────────────────────────────────────────────────────

class TestMappedValue(unittest.TestCase):

    def test_dmax_values(self):
        self.assertEqual(mapped_value("SMS", "Dmax"), 1.5)
        self.assertEqual(mapped_value("SM1", "Dmax"), 0.90)
        self.assertEqual(mapped_value("SDS", "Dmax"), 1.0)
        self.assertEqual(mapped_value("SD1", "Dmax"), 0.60)
        self.assertEqual(mapped_value("Fv", "Dmax"), 1.50)

    def test_bmin_values(self):
        self.assertEqual(mapped_value("SS", "bmin"), 0.156)
        self.assertEqual(mapped_value("s1", "bmin"), 0.042)
        self.assertEqual(mapped_value("SD1", "Bmin"), 0.067)

    def test_shared_categories_agree(self):
        for param in DemandParameter:
            self.assertEqual(mapped_value(param.value, "Cmax"), mapped_value(param.value, "Dmin"))
            self.assertEqual(mapped_value(param.value, "Bmax"), mapped_value(param.value, "Cmin"))

    def test_ts_is_derived(self):
        for sdc in ALL_SDCS:
            self.assertEqual(
                mapped_value("TS", sdc),
                mapped_value("SD1", sdc) / mapped_value("SDS", sdc),
            )

    def test_code_parameters(self):
        params = code_parameters("Cmax")
        self.assertIsInstance(params, CodeParameterSet)
        self.assertEqual(params.sms, 0.75)
        self.assertAlmostEqual(params.ts, 0.20 / 0.50)

    def test_unknown_parameter(self):
        with self.assertRaises(InvalidArgument) as ctx:
            mapped_value("XX", "Dmax")
        self.assertIn("XX", str(ctx.exception))

    def test_unknown_category(self):
        with self.assertRaises(InvalidArgument):
            mapped_value("SMS", "Amax")

    def test_invalid_error_is_value_error(self):
        with self.assertRaises(ValueError):
            mapped_value("SMS", "nope")


# ─────────────────────────────────────────────────────────────────────────────
# SMT
# ─────────────────────────────────────────────────────────────────────────────

class TestSMT(unittest.TestCase):

    def test_short_period_plateau(self):
        self.assertEqual(smt(0.3, "Dmax"), 1.5)

    def test_long_period_branch(self):
        self.assertAlmostEqual(smt(2.0, "Dmax"), 0.45)
        self.assertAlmostEqual(smt(1.0, "Bmin"), 0.10)

    def test_continuous_at_transition(self):
        for sdc in ALL_SDCS:
            t_c = mapped_value("SM1", sdc) / mapped_value("SMS", sdc)
            self.assertAlmostEqual(smt(t_c, sdc), mapped_value("SMS", sdc))
            self.assertAlmostEqual(smt(t_c * (1.0 + 1e-9), sdc), mapped_value("SMS", sdc), places=6)

    def test_non_increasing(self):
        values = [smt(t, "Cmin") for t in (0.1, 0.3, 0.5, 1.0, 2.0, 4.0)]
        self.assertEqual(values, sorted(values, reverse=True))

    def test_invalid_period(self):
        with self.assertRaises(InvalidArgument):
            smt(0.0, "Dmax")
        with self.assertRaises(InvalidArgument):
            smt(-1.0, "Dmax")

    def test_invalid_category(self):
        with self.assertRaises(InvalidArgument):
            smt(1.0, "Xmax")


if __name__ == "__main__":
    unittest.main()
