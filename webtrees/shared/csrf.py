"""
Session-bound tokens protecting form submissions against cross-site request forgery
"""

import secrets

from flask import session


CSRF_SESSION_KEY = 'csrf_token'
CSRF_FORM_FIELD = 'csrf'


def get_csrf_token() -> str:
    """Token for the current session, created on first use"""
    token = session.get(CSRF_SESSION_KEY)
    if not token:
        token = secrets.token_hex(16)
        session[CSRF_SESSION_KEY] = token
    return token


def check_csrf(form) -> bool:
    """Does the submitted form carry the session's token?"""
    expected = session.get(CSRF_SESSION_KEY)
    submitted = form.get(CSRF_FORM_FIELD, '')
    if not expected or not submitted:
        return False
    return secrets.compare_digest(expected, submitted)
