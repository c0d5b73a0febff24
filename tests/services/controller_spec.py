"""Fetch cycle: state transitions, stale-cycle discard, NotFound vs Failed."""
from __future__ import annotations

from config import TRANSACTIONS_TABLE, USERS_TABLE
from services.controller import PageController
from services.state import Failed, Idle, Loading, NotFound, Ready


class _UserPage(PageController):
    """Minimal page: just echoes the resolved user."""

    def __init__(self, store):
        super().__init__(store)
        self.fetched = []

    def fetch(self, user):
        self.fetched.append(user["id"])
        return self.store.find_many(TRANSACTIONS_TABLE, "user_id", user["id"])


def test_starts_idle(seeded_store):
    page = _UserPage(seeded_store)
    assert isinstance(page.state, Idle)
    assert page.matricula is None
    assert page.data is None


def test_mount_reaches_ready(seeded_store):
    page = _UserPage(seeded_store)
    state = page.mount("1001")
    assert isinstance(state, Ready)
    assert state.matricula == "1001"
    assert len(page.data) == 5


def test_begin_enters_loading(seeded_store):
    page = _UserPage(seeded_store)
    cycle = page.begin("1001")
    assert page.state == Loading(token=cycle.token, matricula="1001")


def test_unknown_matricula_is_not_found(seeded_store):
    page = _UserPage(seeded_store)
    assert page.mount("9999") == NotFound(matricula="9999")
    assert page.fetched == []


def test_store_failure_is_failed_not_not_found(recording_store):
    recording_store.fail_tables.add(TRANSACTIONS_TABLE)
    page = _UserPage(recording_store)
    state = page.mount("1001")
    assert isinstance(state, Failed)
    assert "simulated outage" in state.message
    assert page.data is None


def test_user_lookup_failure_is_failed(recording_store):
    recording_store.fail_tables.add(USERS_TABLE)
    page = _UserPage(recording_store)
    assert isinstance(page.mount("1001"), Failed)


def test_user_resolved_before_dependent_reads(recording_store):
    page = _UserPage(recording_store)
    page.mount("1001")
    assert recording_store.calls == [("find_one", USERS_TABLE), ("find_many", TRANSACTIONS_TABLE)]


def test_stale_cycle_cannot_overwrite_new_identifier(seeded_store):
    """Old cycle resolves after the new one started: its result is dropped."""
    page = _UserPage(seeded_store)
    old = page.begin("1001")
    new = page.begin("2002")

    new_outcome = page.run(new)
    old_outcome = page.run(old)

    assert page.commit(new, new_outcome) is True
    assert page.commit(old, old_outcome) is False
    assert page.state.matricula == "2002"
    assert page.data == []


def test_stale_cycle_dropped_even_while_new_one_is_loading(seeded_store):
    page = _UserPage(seeded_store)
    old = page.begin("1001")
    new = page.begin("2002")

    assert page.commit(old, page.run(old)) is False
    assert page.state == Loading(token=new.token, matricula="2002")


def test_failure_does_not_keep_previous_ready_data(recording_store):
    page = _UserPage(recording_store)
    page.mount("1001")
    assert page.data

    recording_store.fail_tables.add(TRANSACTIONS_TABLE)
    state = page.reload()
    assert isinstance(state, Failed)
    assert page.data is None


def test_mount_same_matricula_does_not_refetch(recording_store):
    page = _UserPage(recording_store)
    page.mount("1001")
    page.mount("1001")
    assert len(page.fetched) == 1

    page.mount("1001", fresh=True)
    assert len(page.fetched) == 2


def test_mount_new_matricula_refetches(recording_store):
    page = _UserPage(recording_store)
    page.mount("1001")
    page.mount("2002")
    assert page.matricula == "2002"
    assert len(page.fetched) == 2


def test_mount_after_interrupted_run_reloads(seeded_store):
    page = _UserPage(seeded_store)
    page.begin("1001")            # run interrupted before commit
    assert isinstance(page.mount("1001"), Ready)


def test_retry_after_failure(recording_store):
    recording_store.fail_tables.add(TRANSACTIONS_TABLE)
    page = _UserPage(recording_store)
    page.mount("1001")

    recording_store.fail_tables.clear()
    assert isinstance(page.reload(), Ready)


def test_reload_without_matricula_is_noop(seeded_store):
    page = _UserPage(seeded_store)
    assert isinstance(page.reload(), Idle)
