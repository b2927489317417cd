import unittest
from portions.logic.scaling.rounding import RoundingPolicy
from portions.logic.scaling.simplifier import simplify_quantity


class TestSimplifyVolume(unittest.TestCase):

    def test_teaspoons_to_cup(self):
        result = simplify_quantity(48, "tsp")
        self.assertEqual(result.quantity, 1)
        self.assertEqual(result.unit, "cup")
        self.assertEqual(result.note, "48 tsp converted to 1 cup")

    def test_tablespoons_to_cup(self):
        result = simplify_quantity(16, "tbsp")
        self.assertEqual((result.quantity, result.unit), (1, "cup"))

    def test_half_cup_threshold(self):
        result = simplify_quantity(24, "tsp")
        self.assertEqual((result.quantity, result.unit), (0.5, "cup"))

    def test_same_unit_has_no_note(self):
        result = simplify_quantity(2, "tbsp")
        self.assertEqual((result.quantity, result.unit, result.note), (2, "tbsp", None))

    def test_synonym_is_not_a_conversion(self):
        result = simplify_quantity(2, "tablespoons")
        self.assertEqual(result.unit, "tbsp")
        self.assertIsNone(result.note)

    def test_teaspoons_to_tablespoons(self):
        result = simplify_quantity(4, "tsp")
        self.assertEqual((result.quantity, result.unit), (1.5, "tbsp"))
        self.assertEqual(result.note, "4 tsp converted to 1.5 tbsp")

    def test_metric_volume(self):
        result = simplify_quantity(250, "ml")
        self.assertEqual((result.quantity, result.unit), (1, "cup"))
        self.assertIsNotNone(result.note)

    def test_zero_after_rounding_is_never_emitted(self):
        result = simplify_quantity(0.05, "tsp")
        self.assertEqual(result.unit, "tsp")
        self.assertGreater(result.quantity, 0)
        self.assertIsNone(result.note)


class TestSimplifyWeight(unittest.TestCase):

    def test_grams_to_pounds(self):
        result = simplify_quantity(1000, "g")
        self.assertEqual((result.quantity, result.unit), (2, "lb"))
        self.assertEqual(result.note, "1000 g converted to 2 lb")

    def test_kilograms_to_pounds(self):
        result = simplify_quantity(2, "kg")
        self.assertEqual((result.quantity, result.unit), (4.5, "lb"))

    def test_small_weight_stays_in_grams(self):
        result = simplify_quantity(10, "grams")
        self.assertEqual((result.quantity, result.unit, result.note), (10, "g", None))


class TestSimplifyCount(unittest.TestCase):

    def test_count_units_only_round(self):
        result = simplify_quantity(2.6, "cloves")
        self.assertEqual((result.quantity, result.unit, result.note), (2.5, "cloves", None))

    def test_unknown_unit_passes_through(self):
        result = simplify_quantity(13.4, "bunch")
        self.assertEqual((result.quantity, result.unit), (13, "bunch"))

    def test_no_unit(self):
        result = simplify_quantity(0.3, None)
        self.assertEqual((result.quantity, result.unit), (0.25, None))


class TestConversionNote(unittest.TestCase):

    def test_large_amount_is_written_out(self):
        result = simplify_quantity(1000000, "g")
        self.assertEqual(result.unit, "lb")
        self.assertEqual(result.note, f"1000000 g converted to {result.quantity:.0f} lb")
        self.assertNotIn("e+", result.note)

    def test_tiny_amount_keeps_its_digits(self):
        result = simplify_quantity(0.001, "cup")
        self.assertEqual(result.unit, "tsp")
        self.assertEqual(result.note, "0.001 cup converted to 0.048 tsp")


class TestSimplifyPolicy(unittest.TestCase):

    def test_custom_rounding_policy(self):
        fine = RoundingPolicy([(None, 0.01)])
        result = simplify_quantity(4, "tsp", policy=fine)
        self.assertEqual((result.quantity, result.unit), (1.33, "tbsp"))
