from marshmallow import Schema, fields, validate, pre_load, EXCLUDE

from diet_tracker.schemas.fields import TrimmedStr, WholeNumber
from diet_tracker.utils.enums import MealType


class CreateFoodEntrySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = TrimmedStr(required=True, validate=validate.Length(max=200))
    calories = WholeNumber(label="Calories", required=True)
    meal_type = TrimmedStr(
        required=True,
        validate=validate.OneOf(
            [e.value for e in MealType],
            error="mealType must be one of: breakfast, lunch, dinner, snack",
        ),
    )
    date = fields.Date(load_default=None, error_messages={"invalid": "date must be YYYY-MM-DD"})

    @pre_load
    def accept_camel_case(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "meal_type" not in data and "mealType" in data:
            data["meal_type"] = data.pop("mealType")
        if isinstance(data.get("meal_type"), str):
            data["meal_type"] = data["meal_type"].lower()
        if data.get("date") in ("", None):
            data.pop("date", None)
        return data


class FoodEntrySchema(Schema):
    id = fields.Int()
    user_id = fields.Int()
    name = fields.Str()
    calories = fields.Int()
    meal_type = fields.Str()
    date = fields.Date()
    created_at = fields.DateTime()
