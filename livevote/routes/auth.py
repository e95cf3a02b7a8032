from flask import jsonify, request
from flask_login import current_user, login_required

from livevote.services.admins import authenticate, change_password


def register_auth_routes(app):
    @app.route("/api/admin/login", methods=["POST"])
    def admin_login():
        data = request.get_json(silent=True) or {}
        admin, token = authenticate(data.get("username"), data.get("password"))
        return jsonify(
            {"message": "Login successful", "token": token, "admin": admin.to_dict()}
        )

    @app.route("/api/admin/change-password", methods=["POST"])
    @login_required
    def admin_change_password():
        data = request.get_json(silent=True) or {}
        change_password(current_user, data)
        return jsonify({"message": "Password changed successfully"})

    @app.route("/api/admin/me")
    @login_required
    def admin_me():
        return jsonify(current_user.to_dict())
