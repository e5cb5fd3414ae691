"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span several entities: the migration stages
    and the delete sweeps that keep foreign keys consistent.
    """
