"""
Food Controller Module

Handles the food log endpoints: adding, listing and deleting the caller's
food entries.
"""

from flask import request

from diet_tracker.errors import ValidationError
from diet_tracker.schemas import load_payload
from diet_tracker.schemas.food_schema import CreateFoodEntrySchema, FoodEntrySchema
from diet_tracker.services import food_entry_service
from diet_tracker.utils.dates import parse_date
from diet_tracker.utils.http import ok, json_body, arg_str


def create_food_entry_handler():
    """
    Log a food entry for the current user.

    Body Parameters:
        - name (required)
        - calories (required): positive integer
        - mealType (required): breakfast, lunch, dinner or snack
        - date (optional): YYYY-MM-DD, defaults to today
    """
    data = load_payload(CreateFoodEntrySchema(), json_body())
    entry = food_entry_service.add_food_entry(
        user_id=request.user_id,
        name=data["name"],
        calories=data["calories"],
        meal_type=data["meal_type"],
        entry_date=data.get("date"),
    )
    return ok({
        "message": "Food item added successfully",
        "foodItem": FoodEntrySchema().dump(entry),
    }, 201)


def list_food_entries_handler():
    """
    List the current user's food entries, newest first.

    Query Parameters:
        - date: Only entries logged for this day (YYYY-MM-DD)
    """
    raw_date = arg_str("date")
    entry_date = None
    if raw_date is not None:
        entry_date = parse_date(raw_date)
        if entry_date is None:
            raise ValidationError("date must be YYYY-MM-DD")

    entries = food_entry_service.list_food_entries(request.user_id, entry_date)
    return ok(FoodEntrySchema(many=True).dump(entries))


def delete_food_entry_handler(entry_id: int):
    food_entry_service.delete_food_entry(entry_id, request.user_id)
    return ok({"message": "Food item deleted successfully"})
