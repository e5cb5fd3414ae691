"""Migration use cases."""

from .run_migration import MigrationReport, RunMigrationRequest, RunMigrationUseCase

__all__ = [
    "MigrationReport",
    "RunMigrationRequest",
    "RunMigrationUseCase",
]
