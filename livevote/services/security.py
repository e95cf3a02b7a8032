from flask import current_app
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from werkzeug.security import check_password_hash, generate_password_hash

from livevote.models import Admin

TOKEN_SALT = "admin-auth"


def hash_password(password):
    return generate_password_hash(password, method="pbkdf2:sha256")


def verify_password(password_hash, password):
    if not password_hash or password is None:
        return False
    return check_password_hash(password_hash, password)


def _token_serializer():
    return URLSafeTimedSerializer(current_app.config["SECRET_KEY"])


def generate_admin_token(admin):
    return _token_serializer().dumps(
        {"id": admin.id, "username": admin.username, "role": admin.role},
        salt=TOKEN_SALT,
    )


def verify_admin_token(token, max_age=None):
    if max_age is None:
        max_age = current_app.config["TOKEN_MAX_AGE"]
    try:
        return _token_serializer().loads(token, salt=TOKEN_SALT, max_age=max_age)
    except (BadSignature, SignatureExpired):
        return None


def extract_bearer_token(header_value):
    if not header_value:
        return None

    scheme, _, credentials = header_value.strip().partition(" ")
    if not credentials:
        # bare token without a scheme
        return scheme or None
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


def load_admin_from_request(request):
    """Flask-Login request loader: resolve the bearer token to an Admin."""
    token = extract_bearer_token(request.headers.get("Authorization"))
    if not token:
        return None

    payload = verify_admin_token(token)
    if not payload or "id" not in payload:
        return None

    admin = Admin.query.filter_by(id=payload["id"]).first()
    if admin is None or admin.username != payload.get("username"):
        return None
    return admin
