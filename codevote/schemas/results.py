from marshmallow import Schema, fields


class VoterSchema(Schema):
    code = fields.Str(required=True)
    name = fields.Str(required=True)
    used = fields.Bool(required=True)
    used_at = fields.DateTime(allow_none=True)
    choice = fields.Str(allow_none=True)


class SummarySchema(Schema):
    total = fields.Int(required=True)
    voted_count = fields.Int(required=True)
    not_voted_count = fields.Int(required=True)
    tallies = fields.Dict(keys=fields.Str(), values=fields.Int(), required=True)
    voters = fields.List(fields.Nested(VoterSchema), required=True)
    voted = fields.List(fields.Nested(VoterSchema), required=True)
    not_voted = fields.List(fields.Nested(VoterSchema), required=True)
