"""
The tortoise models backing the database repositories. These are
records, not entities: the repositories translate them to and from
the classes in :mod:`bikeshare.models`.
"""

from tortoise import Model, fields


class UserRecord(Model):
    email = fields.CharField(max_length=255, primary_key=True)
    name = fields.CharField(max_length=255)
    password = fields.CharField(max_length=255)

    class Meta:
        table = "users"


class BikeRecord(Model):
    id = fields.CharField(max_length=32, primary_key=True)
    name = fields.CharField(max_length=255)
    type = fields.CharField(max_length=255)
    body_size = fields.IntField()
    max_load = fields.IntField()
    rate = fields.FloatField()
    description = fields.TextField()
    ratings = fields.IntField()
    image_urls = fields.JSONField(default=list)
    available = fields.BooleanField(default=True)
    latitude = fields.FloatField(default=0.0)
    longitude = fields.FloatField(default=0.0)

    class Meta:
        table = "bikes"


class RentRecord(Model):
    id = fields.IntField(primary_key=True)
    bike = fields.ForeignKeyField("models.BikeRecord", related_name="rents")

    user_email = fields.CharField(max_length=255, db_index=True)
    """Not a foreign key: closed rents outlive their user."""

    start = fields.DatetimeField()
    end = fields.DatetimeField(null=True)
    amount = fields.FloatField(null=True)

    class Meta:
        table = "rents"
