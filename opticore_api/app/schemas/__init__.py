"""
Pydantic schema definitions for API payloads.

Request bodies declare every field as optional so that missing values
reach the service layer, which reports them with a single readable
message.  Response models use the camelCase keys of the public JSON
surface through field aliases.
"""
