from diet_tracker.models.user import User
from diet_tracker.models.food_entry import FoodEntry
from diet_tracker.models.photo import Photo

__all__ = ["User", "FoodEntry", "Photo"]
