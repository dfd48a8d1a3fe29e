from marshmallow import Schema, fields, EXCLUDE


class VoteSubmitSchema(Schema):
    class Meta:
        unknown = EXCLUDE  # HTML forms may post extra fields

    # Blank/missing values are left to the redemption engine, which checks the window first
    code = fields.Str(load_default="", allow_none=True)
    choice = fields.Str(load_default="", allow_none=True)


class WindowSchema(Schema):
    phase = fields.Str(required=True)
    start = fields.DateTime(required=True)
    end = fields.DateTime(required=True)


class VoteStatusSchema(Schema):
    code = fields.Str(required=True)
    status = fields.Str(required=True)  # NOT_FOUND / UNUSED / USED
    name = fields.Str(allow_none=True)
    can_vote = fields.Bool(required=True)
    message = fields.Str(allow_none=True)
    window = fields.Nested(WindowSchema, required=True)
    choices = fields.List(fields.Str())


class VoteReceiptSchema(Schema):
    success = fields.Bool(required=True)
    message = fields.Str(required=True)
    code = fields.Str(required=True)
    choice = fields.Str(required=True)
