from livevote.routes import live  # noqa: F401  registers Socket.IO handlers
from livevote.routes.admin import register_admin_routes
from livevote.routes.auth import register_auth_routes
from livevote.routes.public import register_public_routes


def register_routes(app):
    register_auth_routes(app)
    register_public_routes(app)
    register_admin_routes(app)
