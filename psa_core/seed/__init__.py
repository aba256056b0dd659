"""Development data seeding."""

from psa_core.seed.seeder import DatabaseSeeder

__all__ = ["DatabaseSeeder"]
