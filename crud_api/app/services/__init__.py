"""
Service layer abstraction.

Each service encapsulates the state of one domain.  Stores are created
per application instance by ``create_app`` and kept on ``app.state``;
API handlers obtain them through dependencies in ``api.deps``.
"""
