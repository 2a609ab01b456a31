import os

server_mode = os.getenv("BIKESHARE_MODE", "development")
"""The operational mode of the server."""

database_uri = os.getenv("BIKESHARE_DATABASE_URI", None)
"""The database to store records in. Records are kept in memory when unset."""

port = int(os.getenv("BIKESHARE_PORT", "8080"))
"""The port the api listens on."""

api_root = "/api/v1"
"""The base url for the api."""
