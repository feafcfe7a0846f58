from diet_tracker.extensions import db
from diet_tracker.utils.dates import utcnow


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False, unique=True)
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    food_entries = db.relationship("FoodEntry", back_populates="user")
    photos = db.relationship("Photo", back_populates="user")
