"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain.  The resource routers are aggregated in ``api/router.py``.
"""
