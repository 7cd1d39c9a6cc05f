import json
import shutil
import tempfile
import threading
import unittest
from pathlib import Path

from chefmate.domain.Ingredient import Ingredient
from chefmate.domain.MealPlan import MealPlan
from chefmate.domain.Recipe import Recipe
from chefmate.domain.RecipeFilters import RecipeFilters
from chefmate.domain.ShoppingList import ShoppingList, ShoppingListItem
from chefmate.infra.errors import MealPlanNotFoundError, RecipeNotFoundError, ShoppingListNotFoundError
from chefmate.infra.Plan_Repository import PlanRepository
from chefmate.infra.Recipe_Repository import RecipeRepository
from chefmate.infra.ShoppingList_Repository import ShoppingListRepository

SAMPLE_RECIPES = Path(__file__).parent.parent / 'data' / 'recipes.json'


class TestRecipeRepository(unittest.TestCase):

    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())
        self.path = self.tmp / 'recipes.json'
        shutil.copy(SAMPLE_RECIPES, self.path)
        self.repo = RecipeRepository(self.path)

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def test_search_is_ordered_by_name(self):
        names = [r.name for r in self.repo.search()]
        self.assertEqual(names, sorted(names))
        self.assertEqual(len(names), 5)

    def test_search_with_filters(self):
        found = self.repo.search(RecipeFilters(dietary_restrictions=["vegetarian"], max_prep_time=10))
        self.assertEqual([r.name for r in found], ["Avocado Toast with Poached Egg", "Greek Yogurt Parfait"])
        found = self.repo.search(RecipeFilters(query="SALMON", difficulty="medium"))
        self.assertEqual([r.id for r in found], ["3"])

    def test_get(self):
        self.assertEqual(self.repo.get("4").name, "Vegetable Stir-Fry with Tofu")
        with self.assertRaises(RecipeNotFoundError):
            self.repo.get("missing")

    def test_save_assigns_id_and_rejects_duplicate_names(self):
        saved = self.repo.save(Recipe(name="Oatmeal", ingredients=[Ingredient("rolled oats", 1, "cup")]))
        self.assertTrue(saved.id)
        self.assertEqual(self.repo.get(saved.id).ingredients[0].item, "rolled oats")
        with self.assertRaises(ValueError):
            self.repo.save(Recipe(name="oatmeal "))

    def test_missing_or_corrupt_file_reads_as_empty(self):
        self.assertEqual(RecipeRepository(self.tmp / 'none.json').search(), [])
        bad = self.tmp / 'bad.json'
        bad.write_text("{not json", encoding='utf-8')
        self.assertEqual(RecipeRepository(bad).list_recipes(), [])


class TestPlanAndShoppingListRepositories(unittest.TestCase):

    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())
        self.plans = PlanRepository(self.tmp / 'meal_plans.json')
        self.lists = ShoppingListRepository(self.tmp / 'shopping_lists.json')

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def test_save_and_get_plan(self):
        plan = MealPlan()
        plan.set_meal("Monday", "breakfast", Recipe(name="Oatmeal", ingredients=[Ingredient("rolled oats", 1, "cup")]))
        saved = self.plans.save(plan)
        self.assertTrue(saved.id)
        self.assertTrue(saved.created_at)
        loaded = self.plans.get(saved.id)
        self.assertEqual(loaded.get_meal("Monday", "breakfast").ingredients[0].amount, 1)
        self.assertIsNone(loaded.get_meal("Monday", "lunch"))
        with self.assertRaises(MealPlanNotFoundError):
            self.plans.get("missing")

    def test_list_plans_newest_first(self):
        first = self.plans.save(MealPlan(created_at="2024-01-01T00:00:00+00:00"))
        second = self.plans.save(MealPlan(created_at="2024-02-01T00:00:00+00:00"))
        self.assertEqual([p.id for p in self.plans.list_plans()], [second.id, first.id])

    def test_shopping_list_snapshot_replaces_previous(self):
        item = ShoppingListItem("rolled oats", 1.5, "cup", ["Oatmeal"], "dry")
        self.lists.save(ShoppingList(items=[item], meal_plan_id="p1"))
        self.lists.save(ShoppingList(items=[item, item], meal_plan_id="p1"))
        loaded = self.lists.get("p1")
        self.assertEqual(len(loaded), 2)
        self.assertEqual(loaded.items[0], item)
        with open(self.tmp / 'shopping_lists.json', encoding='utf-8') as f:
            self.assertEqual(list(json.load(f)), ["p1"])
        with self.assertRaises(ShoppingListNotFoundError):
            self.lists.get("p2")

    def test_shopping_list_needs_plan_id(self):
        with self.assertRaises(ValueError):
            self.lists.save(ShoppingList(items=[]))

    def test_concurrent_plan_saves_are_all_kept(self):
        workers = 20
        barrier = threading.Barrier(workers)
        ids = []

        def save():
            barrier.wait()
            ids.append(PlanRepository(self.tmp / 'meal_plans.json').save(MealPlan()).id)

        threads = [threading.Thread(target=save) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(ids), workers)
        self.assertEqual(len(self.plans.list_plans()), workers)
        for plan_id in ids:
            self.assertEqual(self.plans.get(plan_id).id, plan_id)


class TestConcurrentRecipeSaves(unittest.TestCase):

    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())
        self.path = self.tmp / 'recipes.json'

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def test_concurrent_recipe_saves_are_all_kept(self):
        workers = 10
        barrier = threading.Barrier(workers)

        def save(n):
            barrier.wait()
            RecipeRepository(self.path).save(Recipe(name=f"Recipe {n}", ingredients=[Ingredient("rice", 1, "cup")]))

        threads = [threading.Thread(target=save, args=(n,)) for n in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        names = [r.name for r in RecipeRepository(self.path).search()]
        self.assertEqual(len(names), workers)
