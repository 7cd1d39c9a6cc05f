import copy
import unittest
from chefmate.domain.Ingredient import Ingredient
from chefmate.domain.MealPlan import MealPlan
from chefmate.domain.Recipe import Recipe
from chefmate.logic.shopping.categories import LEGACY_CATEGORY_KEYWORDS
from chefmate.logic.shopping.list_builder import build_shopping_list, merge_ingredients, merge_key


def recipe(name, *ingredients):
    return Recipe(name=name, ingredients=[Ingredient(*i) for i in ingredients])


class TestMergeIngredients(unittest.TestCase):

    def test_merge_key_lowercases_name_only(self):
        self.assertEqual(merge_key(Ingredient("Rolled Oats", 1, "Cup")), ("rolled oats", "Cup"))

    def test_amounts_are_summed_across_days_and_slots(self):
        plan = MealPlan()
        plan.set_meal("Sunday", "snack2", recipe("A", ("flour", 1, "cup")))
        plan.set_meal("Monday", "breakfast", recipe("B", ("Flour", 2, "cup")))
        plan.set_meal("Thursday", "dinner", recipe("C", ("flour", 0.5, "cup")))
        merged = merge_ingredients(plan)
        self.assertEqual(list(merged), [("flour", "cup")])
        self.assertEqual(merged[("flour", "cup")]["amount"], 3.5)
        # first sighting follows week order, so Monday's spelling is kept
        self.assertEqual(merged[("flour", "cup")]["item"], "Flour")
        self.assertEqual(merged[("flour", "cup")]["recipes"], ["B", "C", "A"])

    def test_units_must_match_exactly(self):
        plan = MealPlan()
        plan.set_meal("Monday", "lunch", recipe("A", ("flour", 2, "cup"), ("flour", 2, "cups"),
                                                ("flour", 1, "Cup")))
        merged = merge_ingredients(plan)
        self.assertEqual(set(merged), {("flour", "cup"), ("flour", "cups"), ("flour", "Cup")})

    def test_recipe_names_are_unique(self):
        oatmeal = recipe("Oatmeal", ("rolled oats", 1, "cup"), ("Rolled oats", 1, "cup"))
        plan = MealPlan()
        plan.set_meal("Monday", "lunch", oatmeal)
        plan.set_meal("Tuesday", "dinner", oatmeal)
        entry = merge_ingredients(plan)[("rolled oats", "cup")]
        self.assertEqual(entry["amount"], 4)
        self.assertEqual(entry["recipes"], ["Oatmeal"])

    def test_non_positive_amounts_pass_through(self):
        plan = MealPlan()
        plan.set_meal("Monday", "lunch", recipe("A", ("salt", 0, "tsp")))
        plan.set_meal("Tuesday", "lunch", recipe("B", ("salt", -1, "tsp")))
        self.assertEqual(merge_ingredients(plan)[("salt", "tsp")]["amount"], -1)

    def test_plan_is_not_mutated(self):
        plan = MealPlan()
        plan.set_meal("Monday", "lunch", recipe("A", ("milk", 1, "cup")))
        plan.set_meal("Tuesday", "lunch", recipe("B", ("milk", 2, "cup")))
        before = copy.deepcopy(plan.to_dict())
        build_shopping_list(plan)
        self.assertEqual(plan.to_dict(), before)


class TestBuildShoppingList(unittest.TestCase):

    def test_empty_plan_gives_empty_list(self):
        self.assertEqual(build_shopping_list(MealPlan()), ())

    def test_recipe_without_ingredients(self):
        plan = MealPlan()
        plan.set_meal("Monday", "lunch", recipe("Water"))
        self.assertEqual(build_shopping_list(plan), ())

    def test_oatmeal_scenario(self):
        plan = MealPlan()
        plan.set_meal("Monday", "breakfast", recipe("Oatmeal", ("rolled oats", 1, "cup")))
        plan.set_meal("Wednesday", "breakfast", recipe("Oatmeal Deluxe", ("rolled oats", 0.5, "cup")))
        items = build_shopping_list(plan)
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].to_dict(), {
            "item": "rolled oats",
            "amount": 1.5,
            "unit": "cup",
            "recipes": ["Oatmeal", "Oatmeal Deluxe"],
            "category": "dry",
        })

    def test_sorted_by_category_and_stable_within(self):
        plan = MealPlan()
        plan.set_meal("Monday", "breakfast", recipe("A", ("milk", 1, "cup"), ("bananas", 2, ""),
                                                     ("butter", 1, "tbsp")))
        plan.set_meal("Monday", "lunch", recipe("B", ("chicken breast", 1, "lb"), ("apples", 3, ""),
                                                ("saffron threads", 1, "pinch")))
        items = build_shopping_list(plan)
        self.assertEqual([(i.category, i.item) for i in items], [
            ("dairy", "milk"),
            ("dairy", "butter"),
            ("meat", "chicken breast"),
            ("other", "saffron threads"),
            ("produce", "bananas"),
            ("produce", "apples"),
        ])

    def test_idempotent(self):
        plan = MealPlan()
        plan.set_meal("Monday", "breakfast", recipe("A", ("eggs", 2, "large"), ("bread", 2, "slice")))
        plan.set_meal("Friday", "snack1", recipe("B", ("eggs", 1, "large")))
        self.assertEqual(build_shopping_list(plan), build_shopping_list(plan))

    def test_returns_immutable_sequence(self):
        plan = MealPlan()
        plan.set_meal("Monday", "breakfast", recipe("A", ("eggs", 2, "large")))
        items = build_shopping_list(plan)
        self.assertIsInstance(items, tuple)
        self.assertIsInstance(items[0].recipes, tuple)

    def test_custom_table(self):
        plan = MealPlan()
        plan.set_meal("Monday", "breakfast", recipe("Oatmeal", ("rolled oats", 1, "cup")))
        items = build_shopping_list(plan, LEGACY_CATEGORY_KEYWORDS)
        self.assertEqual(items[0].category, "bakery")

    def test_invalid_table_raises(self):
        with self.assertRaises(ValueError):
            build_shopping_list(MealPlan(), (("snacks", ("chips",)),))
