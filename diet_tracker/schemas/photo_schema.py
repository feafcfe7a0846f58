from marshmallow import Schema, fields, pre_load, EXCLUDE

from diet_tracker.schemas.fields import WholeNumber


class PhotoUploadSchema(Schema):
    """Form fields that accompany the ``photo`` file part."""

    class Meta:
        unknown = EXCLUDE

    calories = WholeNumber(label="Calories", load_default=None, allow_none=True)

    @pre_load
    def blank_calories_is_none(self, data, **kwargs):
        data = dict(data)
        value = data.get("calories")
        if isinstance(value, str) and not value.strip():
            data["calories"] = None
        return data


class PhotoSchema(Schema):
    id = fields.Int()
    user_id = fields.Int()
    filename = fields.Str()
    original_name = fields.Str()
    date = fields.Date()
    calories = fields.Int(allow_none=True)
    created_at = fields.DateTime()
