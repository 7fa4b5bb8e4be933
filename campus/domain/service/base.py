"""Marker base for domain services."""


class Service:
    """Stateless domain logic built over repositories.

    Services hold no per-request state beyond their collaborators, which
    the DI container hands in at REQUEST scope.
    """
