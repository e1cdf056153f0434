"""Custom exceptions with helpful error messages."""


class PocketBaseSeedError(Exception):
    """Base exception for pocketbase-seed errors."""

    pass


class ConfigError(PocketBaseSeedError):
    """Connection configuration could not be loaded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            f"Could not load configuration from '{path}': {reason}\n\n"
            f"Suggestions:\n"
            f"1. Check the file exists and is readable\n"
            f"2. Use a .yaml, .yml, .json or .toml file with url, email and password keys\n"
            f"3. Or set POCKETBASE_URL, POCKETBASE_EMAIL and POCKETBASE_PASSWORD"
        )


class SchemaError(PocketBaseSeedError):
    """Record schema could not be loaded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            f"Could not load schema from '{path}': {reason}\n\n"
            f"Suggestions:\n"
            f"1. Check the file exists and is readable\n"
            f"2. The document needs a top-level 'fields' list:\n"
            f"   fields:\n"
            f"     - name: title\n"
            f"       type: fake\n"
            f"       value: '{{{{sentence}}}}'"
        )


class AuthenticationError(PocketBaseSeedError):
    """Superuser authentication failed."""

    def __init__(self, reason: str):
        super().__init__(
            f"Superuser authentication failed: {reason}\n\n"
            f"Suggestions:\n"
            f"1. Check the superuser email and password\n"
            f"2. Check the url points at the PocketBase instance (without /api)\n"
            f"3. Make sure the account is a superuser, not a regular user"
        )


class TransportError(PocketBaseSeedError):
    """Request could not be sent or its response could not be decoded."""

    pass


class APIError(PocketBaseSeedError):
    """API answered with a non-success status code."""

    def __init__(self, method: str, path: str, status_code: int, body: str):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"{method} {path} returned status {status_code}, body: {body}"
        )


class NoRecordsFoundError(PocketBaseSeedError):
    """Collection has no record to relate to."""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(
            f"No records found in collection '{collection}'.\n\n"
            f"Suggestions:\n"
            f"1. Seed '{collection}' before seeding collections that relate to it\n"
            f"2. Check the relation field's value names the right collection"
        )


class FieldGenerationError(PocketBaseSeedError):
    """Fake-data template could not be rendered."""

    def __init__(self, field: str, template: str, reason: str):
        self.field = field
        self.template = template
        super().__init__(
            f"Could not generate fake value for field '{field}' "
            f"from template '{template}': {reason}\n\n"
            f"Suggestions:\n"
            f"1. Use Faker provider names in double braces, e.g. '{{{{first_name}}}}'\n"
            f"2. Use '#' for a random digit and '?' for a random letter"
        )


class UnsupportedFileTypeError(PocketBaseSeedError):
    """Import file has an extension no reader handles."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(
            f"Unsupported file type: '{extension}'. "
            f"Records can be imported from .json or .csv files."
        )
