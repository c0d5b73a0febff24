"""Login check and profile page."""
from __future__ import annotations

from config import USERS_TABLE
from services.access import AccessStatus, ProfileController, check_access


def test_blank_matricula(recording_store):
    result = check_access(recording_store, "   ")
    assert result.status is AccessStatus.BLANK
    assert recording_store.calls == []


def test_unknown_matricula(seeded_store):
    result = check_access(seeded_store, "9999")
    assert result.status is AccessStatus.UNKNOWN
    assert not result.granted
    assert "inválida" in result.message


def test_inactive_plan_is_blocked(seeded_store):
    result = check_access(seeded_store, "2002")
    assert result.status is AccessStatus.BLOCKED
    assert result.user["name"] == "Bruno"


def test_active_plan_is_granted(seeded_store):
    result = check_access(seeded_store, " 1001 ")
    assert result.granted
    assert result.matricula == "1001"
    assert result.user["active_plan"] is True


def test_store_failure(recording_store):
    recording_store.fail_tables.add(USERS_TABLE)
    result = check_access(recording_store, "1001")
    assert result.status is AccessStatus.FAILED
    assert result.message


def test_profile_controller(seeded_store):
    ctrl = ProfileController(seeded_store)
    ctrl.mount("1001")
    assert ctrl.data.user["email"] == "ana@example.com"
