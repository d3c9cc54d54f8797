"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    EMAIL = "email"
    PASSWORD = "password"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
