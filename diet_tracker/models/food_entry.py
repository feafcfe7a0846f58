from diet_tracker.extensions import db
from diet_tracker.utils.dates import today, utcnow


class FoodEntry(db.Model):
    __tablename__ = "food_entries"
    __table_args__ = (
        db.Index("ix_food_entries_user_created", "user_id", "created_at"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    name = db.Column(db.String(200), nullable=False)
    calories = db.Column(db.Integer, nullable=False)
    meal_type = db.Column(db.String(20), nullable=False)
    date = db.Column(db.Date, default=today, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    user = db.relationship("User", back_populates="food_entries")
