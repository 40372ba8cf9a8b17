"""Persistence layer: settings, ORM entities, DAOs and the core stores."""
