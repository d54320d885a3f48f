"""Who may approve overtime and Sunday work.

The same predicates gate what the UI offers and what the service layer
accepts; the service calls :func:`ensure_can_approve` before any mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..core.constants import LONG_OVERTIME_THRESHOLD_MINUTES
from ..core.enums import Role
from ..core.exceptions import ApprovalNotAllowedError
from .overtime import is_long_overtime


class ApprovalCandidate(Protocol):
    is_sunday_work: bool
    overtime: int


@dataclass(frozen=True)
class ApprovalRole:
    """Capabilities held by an approver; the two gates are independent."""

    can_approve: bool = False
    can_approve_sunday_work: bool = False
    can_approve_long_overtime: bool = False


_FULL = ApprovalRole(can_approve=True, can_approve_sunday_work=True, can_approve_long_overtime=True)

_ROLE_CAPABILITIES = {
    Role.ADMIN: _FULL,
    Role.MANAGER: _FULL,
    Role.FOREMAN: _FULL,
    Role.ASSISTANT_FOREMAN: ApprovalRole(can_approve=True),
}


def approval_role_for(role: Role) -> ApprovalRole:
    return _ROLE_CAPABILITIES.get(role, ApprovalRole())


def _denial_reason(record: ApprovalCandidate, role: ApprovalRole, threshold: int):
    if not role.can_approve:
        return "You are not allowed to approve overtime"
    if record.is_sunday_work and not role.can_approve_sunday_work:
        return "You are not allowed to approve Sunday work"
    if is_long_overtime(int(record.overtime or 0), threshold) and not role.can_approve_long_overtime:
        return f"Your approval limit is {threshold} minutes of overtime"
    return None


def can_approve(
    record: ApprovalCandidate,
    role: ApprovalRole,
    *,
    long_overtime_threshold: int = LONG_OVERTIME_THRESHOLD_MINUTES,
) -> bool:
    return _denial_reason(record, role, long_overtime_threshold) is None


def ensure_can_approve(
    record: ApprovalCandidate,
    role: ApprovalRole,
    *,
    long_overtime_threshold: int = LONG_OVERTIME_THRESHOLD_MINUTES,
) -> None:
    reason = _denial_reason(record, role, long_overtime_threshold)
    if reason:
        raise ApprovalNotAllowedError(reason)
