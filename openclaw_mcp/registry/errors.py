"""
Registry Errors
Failures surfaced by the registry client.
"""


class RegistryError(Exception):
    """Base class for registry failures."""


class RegistryUnavailable(RegistryError):
    """The index endpoint answered with a non-success status."""
    
    def __init__(self, status: int):
        self.status = status
        super().__init__(f"Registry unavailable: {status}")


class DocumentNotFound(RegistryError):
    """The document endpoint answered with a non-success status."""
    
    def __init__(self, slug: str, status: int):
        self.slug = slug
        self.status = status
        super().__init__(f"File not found: {slug} ({status})")
