from marshmallow import Schema, fields, validate, EXCLUDE

from diet_tracker.schemas.fields import MISSING, TrimmedStr


class RegisterSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = TrimmedStr(required=True)
    # Passwords are taken verbatim; whitespace is significant
    password = fields.Str(
        required=True,
        validate=validate.Length(min=1, error=MISSING),
        error_messages={"required": MISSING, "null": MISSING},
    )
    name = TrimmedStr(required=True)


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = TrimmedStr(required=True)
    password = fields.Str(
        required=True,
        validate=validate.Length(min=1, error=MISSING),
        error_messages={"required": MISSING, "null": MISSING},
    )


class UserSchema(Schema):
    id = fields.Int()
    email = fields.Str()
    name = fields.Str()
    created_at = fields.DateTime()
