"""
Grants Service

Access checks for Integram objects, evaluated for the session user.

Rules (same order for view, edit and delete):
- Admin => allowed
- Object owner => allowed
- Object carries a grants mapping => allowed only if grants[action] is True
- Otherwise => allowed
"""

from typing import Any, Mapping, Optional

from app.auth import SessionUser

ADMIN_ROLE = "admin"
ACTIONS = ("view", "edit", "delete")


def _owner_id(object_data: Mapping[str, Any]) -> Any:
    """Owner id as sent by the Integram frontend (ownerId) or by Python callers."""
    owner_id = object_data.get("ownerId")
    if owner_id is None:
        owner_id = object_data.get("owner_id")
    return owner_id


class Grants:
    """Permission checks bound to one session user."""

    def __init__(self, user_role: str = "", user_id: Optional[int] = None):
        self._user_role = user_role or ""
        self._user_id = user_id

    @property
    def user_role(self) -> str:
        return self._user_role

    @property
    def user_id(self) -> Optional[int]:
        return self._user_id

    @property
    def is_admin(self) -> bool:
        return self._user_role == ADMIN_ROLE

    def _is_owner(self, object_data: Mapping[str, Any]) -> bool:
        owner_id = _owner_id(object_data)
        return owner_id is not None and owner_id == self._user_id

    def check(self, action: str, object_data: Optional[Mapping[str, Any]]) -> bool:
        """Return whether the user may perform action on the object."""
        if action not in ACTIONS:
            raise ValueError(f"Unknown action '{action}', expected one of {', '.join(ACTIONS)}")

        if self.is_admin:
            return True

        if object_data is None:
            return True

        if self._is_owner(object_data):
            return True

        grants = object_data.get("grants")
        # Any grants value other than None decides, even false or empty
        if grants is not None:
            return isinstance(grants, Mapping) and grants.get(action) is True

        # Default: allow (can be made more restrictive)
        return True

    def can_view(self, object_data: Optional[Mapping[str, Any]]) -> bool:
        return self.check("view", object_data)

    def can_edit(self, object_data: Optional[Mapping[str, Any]]) -> bool:
        return self.check("edit", object_data)

    def can_delete(self, object_data: Optional[Mapping[str, Any]]) -> bool:
        return self.check("delete", object_data)

    def summary(self, object_data: Optional[Mapping[str, Any]]) -> dict:
        """All action checks plus the admin flag, keyed for JSON responses."""
        result = {action: self.check(action, object_data) for action in ACTIONS}
        result["is_admin"] = self.is_admin
        return result


def use_grants(session_user: Optional[SessionUser]) -> Grants:
    """Build the grants checker for a session user (anonymous when None)."""
    if session_user is None:
        return Grants()
    return Grants(user_role=session_user.user_role, user_id=session_user.user_id)
