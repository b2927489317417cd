import unittest
from portions.domain.RecipeIngredient import RecipeIngredient
from portions.logic.scaling.rounding import RoundingPolicy
from portions.logic.scaling.scaler import scale_ingredient


class TestScaleIngredient(unittest.TestCase):

    def test_to_taste_passes_through(self):
        salt = RecipeIngredient("1", "Salt", None, "tsp", "herbs-spices", ingredient_id="salt")
        for factor in (0.25, 1, 3, 10):
            scaled = scale_ingredient(salt, factor)
            self.assertIsNone(scaled.scaled_quantity)
            self.assertEqual(scaled.display_text, "to taste")
            self.assertFalse(scaled.was_converted)
            self.assertEqual(scaled.scaled_unit, "tsp")
            self.assertIs(scaled.original, salt)

    def test_tablespoons_become_cup(self):
        butter = RecipeIngredient("2", "Butter", 2, "tbsp", "dairy")
        scaled = scale_ingredient(butter, 8)
        self.assertEqual(scaled.scaled_quantity, 1)
        self.assertEqual(scaled.scaled_unit, "cup")
        self.assertEqual(scaled.display_text, "1 cup")
        self.assertTrue(scaled.was_converted)
        self.assertEqual(scaled.conversion_note, "16 tbsp converted to 1 cup")

    def test_factor_one_is_identity_up_to_rounding(self):
        garlic = RecipeIngredient("3", "Garlic", 3, "cloves", "produce")
        self.assertEqual(scale_ingredient(garlic, 1).scaled_quantity, 3)
        carrots = RecipeIngredient("4", "Carrots", 2.6, "pieces", "produce")
        self.assertEqual(scale_ingredient(carrots, 1).scaled_quantity, 2.5)

    def test_halving_keeps_unit(self):
        milk = RecipeIngredient("5", "Milk", 1, "cup", "dairy")
        scaled = scale_ingredient(milk, 0.5)
        self.assertEqual(scaled.display_text, "½ cup")
        self.assertFalse(scaled.was_converted)
        self.assertIsNone(scaled.conversion_note)

    def test_input_is_not_mutated(self):
        flour = RecipeIngredient("6", "Flour", 2, "cups", "grains")
        scale_ingredient(flour, 3)
        self.assertEqual(flour.quantity, 2)
        self.assertEqual(flour.unit, "cups")

    def test_rounding_policy_is_forwarded(self):
        sugar = RecipeIngredient("7", "Sugar", 1, "tsp", "pantry")
        scaled = scale_ingredient(sugar, 4, policy=RoundingPolicy([(None, 0.01)]))
        self.assertEqual((scaled.scaled_quantity, scaled.scaled_unit), (1.33, "tbsp"))
