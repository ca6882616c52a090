"""
Signed-in user context handed to the dashboard shell
"""

import logging
from typing import Callable, Optional

from flask_jwt_extended import get_jwt_identity

from .models import db, User

logger = logging.getLogger(__name__)


class Session:
    """The current user plus a way to sign them out.

    ``on_logout`` runs once, on the first call to ``logout()``.
    """

    def __init__(self, user: User, on_logout: Optional[Callable[[], None]] = None):
        self.current_user = user
        self._on_logout = on_logout
        self.active = True

    def logout(self):
        if not self.active:
            return
        logger.info("Signing out user %s", self.current_user.id)
        self.active = False
        if self._on_logout is not None:
            self._on_logout()


def session_for_request(on_logout: Optional[Callable[[], None]] = None) -> Optional[Session]:
    """Build the session for the JWT identity of the current request"""
    user_id = get_jwt_identity()
    if user_id is None:
        return None

    user = db.session.get(User, int(user_id))
    if user is None:
        return None
    return Session(user, on_logout)
