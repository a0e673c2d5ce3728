"""
Tests for the request and result models.
"""
import pytest
from pydantic import ValidationError

from intellimacro.models.fitness import FitnessProfile
from intellimacro.models.nutrition import MealPlan, UserProfile


class TestFitnessProfile:
    """Tests for FitnessProfile validation."""

    @pytest.mark.parametrize("field", ["age", "restingHeartRate", "height", "weight", "waist", "cardioMinutes", "strengthSessions"])
    def test_rejects_negative_numbers(self, sample_fitness_profile, field):
        """Test that every numeric field must be non-negative."""
        sample_fitness_profile[field] = -1
        with pytest.raises(ValidationError):
            FitnessProfile(**sample_fitness_profile)

    def test_rejects_unknown_gender(self, sample_fitness_profile):
        """Test that gender is restricted to the fixed set."""
        sample_fitness_profile["gender"] = "Unknown"
        with pytest.raises(ValidationError):
            FitnessProfile(**sample_fitness_profile)

    def test_is_immutable(self, sample_fitness_profile):
        """Test that profiles cannot be changed after construction."""
        profile = FitnessProfile(**sample_fitness_profile)
        with pytest.raises(ValidationError):
            profile.age = 40


class TestUserProfile:
    """Tests for UserProfile validation."""

    def test_optional_text_defaults_to_empty(self, sample_user_profile):
        """Test that preferences and allergies may be omitted."""
        del sample_user_profile["preferences"]
        del sample_user_profile["allergies"]

        profile = UserProfile(**sample_user_profile)

        assert profile.preferences == ""
        assert profile.allergies == ""

    def test_rejects_unknown_activity_level(self, sample_user_profile):
        """Test that activity level is restricted to the five values."""
        sample_user_profile["activityLevel"] = "Extreme"
        with pytest.raises(ValidationError):
            UserProfile(**sample_user_profile)


class TestMealRating:
    """Tests for rating meals without mutating shared plans."""

    def test_with_rating_returns_new_meal(self, sample_meal_plan):
        """Test that the original meal keeps no rating."""
        plan = MealPlan(**sample_meal_plan)
        meal = plan.meals[0]

        rated = meal.with_rating(4)

        assert rated.rating == 4
        assert meal.rating is None
        assert rated.name == meal.name
        assert rated.macros == meal.macros

    @pytest.mark.parametrize("rating", [0, 6, True, 4.0, "4"])
    def test_with_rating_rejects_invalid(self, sample_meal_plan, rating):
        """Test that ratings must be integer 1-5 stars, with no coercion."""
        meal = MealPlan(**sample_meal_plan).meals[0]
        with pytest.raises(ValidationError):
            meal.with_rating(rating)

    def test_meal_rating_cannot_be_assigned(self, sample_meal_plan):
        """Test that meals are frozen; rating goes through with_rating."""
        meal = MealPlan(**sample_meal_plan).meals[0]
        with pytest.raises(ValidationError):
            meal.rating = 5

    def test_rate_meal_returns_new_plan(self, sample_meal_plan):
        """Test that only the named meal is rated and totals are untouched."""
        plan = MealPlan(**sample_meal_plan)

        rated = plan.rate_meal("Tofu Stir Fry", 5)

        assert [m.rating for m in rated.meals] == [None, None, 5, None]
        assert [m.rating for m in plan.meals] == [None, None, None, None]
        assert rated.totalMacros == plan.totalMacros
        assert rated.day == plan.day

    def test_plan_containers_cannot_be_mutated(self, sample_meal_plan):
        """Test that meals and ingredients are immutable sequences."""
        plan = MealPlan(**sample_meal_plan)

        with pytest.raises(AttributeError):
            plan.meals.pop()
        with pytest.raises(AttributeError):
            plan.meals[0].ingredients.append("honey")

        assert len(plan.meals) == 4
        assert len(plan.meals[0].ingredients) == 3

    def test_rated_copy_shares_no_mutable_state(self, sample_meal_plan):
        """Test that meals shared between a plan and its rated copy are immutable."""
        plan = MealPlan(**sample_meal_plan)
        rated = plan.rate_meal("Tofu Stir Fry", 5)

        assert rated.meals[0] is plan.meals[0]
        assert isinstance(rated.meals, tuple)
        assert isinstance(rated.meals[0].ingredients, tuple)

    def test_rate_meal_unknown_name(self, sample_meal_plan):
        """Test that rating a meal not in the plan raises KeyError."""
        plan = MealPlan(**sample_meal_plan)
        with pytest.raises(KeyError):
            plan.rate_meal("Pancakes", 3)
