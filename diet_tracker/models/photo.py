from diet_tracker.extensions import db
from diet_tracker.utils.dates import today, utcnow


class Photo(db.Model):
    __tablename__ = "photos"
    __table_args__ = (
        db.Index("ix_photos_user_created", "user_id", "created_at"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    # Generated by the upload manager, never taken from the client
    filename = db.Column(db.String(255), nullable=False, unique=True)
    original_name = db.Column(db.String(255), nullable=False)
    date = db.Column(db.Date, default=today, nullable=False)
    calories = db.Column(db.Integer, nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    user = db.relationship("User", back_populates="photos")
