"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- persistence/: PostgreSQL models, database manager and repositories
- kms/: Per-organization key derivation and credential envelope encryption
- authorization/: Casbin permission service
- events/: In-memory event bus and its logging/audit handlers
- audit/: PostgreSQL audit trail adapter
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
