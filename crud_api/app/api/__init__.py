"""
API package containing the HTTP routes.

``router`` exposes the resource collections (users, products); the
``endpoints`` subpackage holds one module per domain.
"""
