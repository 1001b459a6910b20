"""Web application with session-backed home page, login form and static files."""

from __future__ import annotations

import os
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

from flask import (
    Flask,
    Response,
    current_app,
    g,
    render_template,
    request,
    session,
)

from primeweb.form import Form
from primeweb.network import resolve_client_ip

DEFAULT_TEMPLATE_DIR = "./templates/"
DEFAULT_STATIC_DIR = "./static/"
BASE_LAYOUT = "base.layout.gohtml"
SESSION_LIFETIME = timedelta(hours=24)

_TEMPLATE_DIR_KEY = "PRIMEWEB_TEMPLATE_DIR"


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    fraction = f"{now.microsecond:06d}".rstrip("0")
    stamp = now.strftime("%Y-%m-%d %H:%M:%S")
    if fraction:
        stamp += "." + fraction
    return stamp + " +0000 UTC"


def _remote_addr(environ: Mapping[str, Any]) -> str:
    host = environ.get("REMOTE_ADDR") or ""
    port = environ.get("REMOTE_PORT")
    if not port:
        return host
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _bad_request() -> Response:
    return Response("bad request\n", status=400, mimetype="text/plain")


def configure_session(app: Flask) -> Flask:
    """Give ``app`` persistent, secure, same-site-lax session cookies lasting a day."""
    if not app.secret_key:
        app.secret_key = secrets.token_hex(32)
    app.config.update(
        PERMANENT_SESSION_LIFETIME=SESSION_LIFETIME,
        SESSION_COOKIE_SECURE=True,
        SESSION_COOKIE_SAMESITE="Lax",
    )
    return app


def ip_from_context() -> str:
    """Return the client address recorded for the current request."""
    try:
        return g.user_ip
    except AttributeError:
        raise LookupError("no client address recorded for this request") from None


def _record_client_ip() -> None:
    g.user_ip = resolve_client_ip(_remote_addr(request.environ), request.headers)
    session.permanent = True


def render(template_name: str, data: Optional[Mapping[str, Any]] = None) -> Response:
    """Render a page template inside the base layout.

    Answers 400 when either template file is missing.
    """
    template_dir = current_app.config[_TEMPLATE_DIR_KEY]
    for name in (template_name, BASE_LAYOUT):
        if not os.path.isfile(os.path.join(template_dir, name)):
            return _bad_request()
    body = render_template(
        template_name, IP=ip_from_context(), Data=dict(data or {})
    )
    return Response(body, mimetype="text/html")


def home() -> Response:
    """Show the home page, remembering the first visit in the session."""
    page_data: dict = {}
    if "test" in session:
        page_data["test"] = session["test"]
    else:
        session["test"] = "Hit this page " + _utc_timestamp()
    return render("home.page.gohtml", page_data)


def login() -> Response:
    """Validate the posted credentials and echo the e-mail address."""
    form = Form(request.form)
    form.required("email", "password")
    if not form.valid():
        return Response("failed validation", mimetype="text/plain")
    email = request.values.get("email", "")
    return Response(email, mimetype="text/plain")


def create_app(
    template_dir: Optional[str] = None, static_dir: Optional[str] = None
) -> Flask:
    """Build the application with its routes, middleware and sessions."""
    templates = os.path.abspath(template_dir or DEFAULT_TEMPLATE_DIR)
    static = os.path.abspath(static_dir or DEFAULT_STATIC_DIR)
    app = Flask(
        __name__,
        template_folder=templates,
        static_folder=static,
        static_url_path="/static",
    )
    app.config[_TEMPLATE_DIR_KEY] = templates
    configure_session(app)
    app.before_request(_record_client_ip)
    app.add_url_rule("/", "home", home, methods=["GET"])
    app.add_url_rule("/login", "login", login, methods=["POST"])
    return app