"""
Hosted database access.

Responsibilities:
- Manage the Supabase project URL and anon key.
- Read and write the ``stores``, ``reviews`` and ``genres`` tables through
  the project's PostgREST endpoint.
- Report every failure as a single ``DatabaseError`` type.
"""
