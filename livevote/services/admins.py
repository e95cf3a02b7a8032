from flask import current_app

from livevote.errors import Unauthorized, ValidationError
from livevote.extensions import db
from livevote.models import Admin
from livevote.services.security import generate_admin_token, hash_password, verify_password
from livevote.services.validation import validate_password_change


def authenticate(username, password):
    if not isinstance(username, str) or not isinstance(password, str):
        raise Unauthorized("Username and password are required")
    username = username.strip()
    if not username or not password:
        raise Unauthorized("Username and password are required")

    admin = Admin.query.filter_by(username=username).first()
    if not admin or not verify_password(admin.password_hash, password):
        current_app.logger.warning("Failed admin login for %s", username)
        raise Unauthorized("Invalid username or password")

    current_app.logger.info("Admin %s logged in", admin.username)
    return admin, generate_admin_token(admin)


def change_password(admin, data):
    errors = validate_password_change(data)
    if errors:
        raise ValidationError(errors)

    if not verify_password(admin.password_hash, data["currentPassword"]):
        raise Unauthorized("Current password is incorrect")

    admin.password_hash = hash_password(data["newPassword"])
    db.session.commit()
    current_app.logger.info("Admin %s changed password", admin.username)


def ensure_bootstrap_admin(username=None, password=None):
    """Create the configured admin account when no admin exists yet."""
    if Admin.query.first() is not None:
        return None

    username = username or current_app.config["ADMIN_USERNAME"]
    password = password or current_app.config["ADMIN_PASSWORD"]

    admin = Admin(username=username, password_hash=hash_password(password), role="admin")
    db.session.add(admin)
    db.session.commit()
    current_app.logger.warning(
        "Created default admin '%s'; change its password after first login", username
    )
    return admin
