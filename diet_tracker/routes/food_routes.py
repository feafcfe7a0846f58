from flask import Blueprint
from diet_tracker.utils.auth import require_auth
from diet_tracker.controllers.food_controller import (
    create_food_entry_handler,
    list_food_entries_handler,
    delete_food_entry_handler,
)

food_bp = Blueprint("food", __name__, url_prefix="/api/food-items")


@food_bp.route("", methods=["GET"])
@require_auth
def list_food_items():
    return list_food_entries_handler()


@food_bp.route("", methods=["POST"])
@require_auth
def create_food_item():
    return create_food_entry_handler()


@food_bp.route("/<int:id>", methods=["DELETE"])
@require_auth
def delete_food_item(id):
    return delete_food_entry_handler(id)
