from __future__ import annotations

from functools import wraps

from flask import g, request

from .tokens import Identity, TokenService, extract_bearer_token


def make_token_required(tokens: TokenService):
    """Build a view decorator that verifies the bearer token.

    The verified identity is stored on ``flask.g.identity``. Failures raise
    MissingTokenError / InvalidTokenError, mapped to 401 / 403 by the error
    handlers.
    """

    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = extract_bearer_token(request.headers.get("Authorization"))
            g.identity = tokens.verify(token)
            return view(*args, **kwargs)

        return wrapper

    return token_required


def current_identity() -> Identity:
    return g.identity
