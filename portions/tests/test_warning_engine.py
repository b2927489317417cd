import unittest
from portions.domain.RecipeIngredient import RecipeIngredient
from portions.domain.ScalingKnowledge import MinimumQuantity, ScalingKnowledge
from portions.domain.ScalingWarning import ScalingWarningType
from portions.logic.scaling.warning_engine import check_ingredient, general_warnings
from portions.logic.scaling.scaler import scale_recipe


class TestCheckIngredient(unittest.TestCase):

    def setUp(self):
        self.knowledge = ScalingKnowledge(
            non_linear={"yeast", "salt"},
            minimums={
                "yeast": MinimumQuantity(0.25, "tsp"),
                "baking-soda": MinimumQuantity(0.125, "tsp"),
            },
        )
        self.yeast = RecipeIngredient("1", "Yeast", 1, "tsp", "pantry", ingredient_id="yeast")
        self.salt = RecipeIngredient("2", "Salt", 1, "tsp", "herbs-spices", ingredient_id="salt")
        self.soda = RecipeIngredient("3", "Baking soda", 0.5, "tsp", "pantry", ingredient_id="baking-soda")

    def test_no_master_reference_never_warns(self):
        loose = RecipeIngredient("9", "Yeast", 1, "tsp", "pantry")
        self.assertIsNone(check_ingredient(loose, 10, 10, self.knowledge))
        self.assertIsNone(check_ingredient(loose, 0.1, 0.01, self.knowledge))

    def test_non_linear_large_batch(self):
        warning = check_ingredient(self.yeast, 2.5, 2.5, self.knowledge)
        self.assertEqual(warning.type, ScalingWarningType.NON_LINEAR)
        self.assertEqual(warning.ingredient_id, "yeast")
        self.assertEqual(warning.message, "Yeast doesn't scale linearly for large batches")
        self.assertEqual(warning.suggestion, "You may need slightly less than calculated")

    def test_non_linear_very_large_batch(self):
        warning = check_ingredient(self.salt, 3.5, 3.5, self.knowledge)
        self.assertEqual(warning.suggestion, "Use 70-80% of calculated amount and adjust to taste")

    def test_non_linear_small_batch_wins_over_minimum(self):
        warning = check_ingredient(self.yeast, 0.25, 0.1, self.knowledge)
        self.assertEqual(warning.type, ScalingWarningType.NON_LINEAR)
        self.assertIn("difficult to measure", warning.message)
        self.assertEqual(warning.suggestion, "Consider rounding up slightly for better results")

    def test_non_linear_in_normal_range_falls_through_to_minimum(self):
        warning = check_ingredient(self.yeast, 1, 0.1, self.knowledge)
        self.assertEqual(warning.type, ScalingWarningType.MINIMUM_THRESHOLD)
        self.assertEqual(warning.suggestion, "Use at least 0.25 tsp")

    def test_factor_two_is_not_large(self):
        self.assertIsNone(check_ingredient(self.salt, 2, 2, self.knowledge))

    def test_minimum_threshold(self):
        warning = check_ingredient(self.soda, 0.2, 0.1, self.knowledge)
        self.assertEqual(warning.type, ScalingWarningType.MINIMUM_THRESHOLD)
        self.assertEqual(warning.message, "Baking soda quantity is below usable minimum")
        self.assertIsNone(check_ingredient(self.soda, 0.5, 0.25, self.knowledge))

    def test_to_taste_has_no_minimum(self):
        self.assertIsNone(check_ingredient(self.soda, 0.1, None, self.knowledge))

    def test_empty_knowledge(self):
        self.assertIsNone(check_ingredient(self.yeast, 10, 10, ScalingKnowledge()))


class TestGeneralWarnings(unittest.TestCase):

    def test_technique_change_above_four(self):
        warnings = general_warnings(5)
        self.assertEqual([w.type for w in warnings], [ScalingWarningType.TECHNIQUE_CHANGE])
        self.assertEqual(warnings[0].ingredient_id, "__general__")
        self.assertEqual(warnings[0].ingredient_name, "General")

    def test_timing_below_half(self):
        warnings = general_warnings(0.25)
        self.assertEqual([w.type for w in warnings], [ScalingWarningType.TIMING_ADJUSTMENT])
        self.assertIn("20-30% earlier", warnings[0].suggestion)

    def test_boundaries(self):
        self.assertEqual(general_warnings(4), [])
        self.assertEqual(general_warnings(0.5), [])
        self.assertEqual(general_warnings(1), [])


class TestScalingKnowledge(unittest.TestCase):

    def test_is_read_only(self):
        knowledge = ScalingKnowledge({"salt"}, {"egg": MinimumQuantity(1)})
        with self.assertRaises(TypeError):
            knowledge.minimums["salt"] = MinimumQuantity(1)
        self.assertIsInstance(knowledge.non_linear, frozenset)

    def test_from_dict_skips_incomplete_minimums(self):
        knowledge = ScalingKnowledge.from_dict({
            "non_linear": ["salt"],
            "minimums": {"egg": {"quantity": 1}, "yeast": {"unit": "tsp"}},
        })
        self.assertTrue(knowledge.is_non_linear("salt"))
        self.assertEqual(knowledge.minimum_for("egg"), MinimumQuantity(1, ""))
        self.assertIsNone(knowledge.minimum_for("yeast"))

    def test_mapping_minimums_drive_the_threshold_warning(self):
        knowledge = ScalingKnowledge(minimums={"yeast": {"quantity": 1, "unit": "tsp"}, "egg": (1, "")})
        self.assertEqual(knowledge.minimum_for("yeast"), MinimumQuantity(1, "tsp"))
        self.assertEqual(knowledge.minimum_for("egg"), MinimumQuantity(1, ""))

        yeast = RecipeIngredient("1", "Yeast", 1, "tsp", "pantry", ingredient_id="yeast")
        result = scale_recipe([yeast], 4, 2, knowledge=knowledge)
        self.assertEqual([w.type for w in result.warnings], [ScalingWarningType.MINIMUM_THRESHOLD])
        self.assertEqual(result.warnings[0].suggestion, "Use at least 1 tsp")

    def test_non_numeric_minimum_is_rejected(self):
        with self.assertRaises(ValueError):
            ScalingKnowledge(minimums={"yeast": {"unit": "tsp"}})
        with self.assertRaises(ValueError):
            ScalingKnowledge(minimums={"yeast": ("a lot", "tsp")})
