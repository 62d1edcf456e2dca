"""
Session Registry Tests

Tests validate:
- Create / get / delete
- Idle sessions are evicted on the next create or get
- Lookups keep a session alive; held locks protect a session
"""

import asyncio

import pytest

from protocol_engine.session.registry import SessionRegistry


class FakeClock:

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(clock):
    return SessionRegistry(idle_ttl_seconds=60, clock=clock)


class TestLifecycle:

    def test_create_get_delete(self, registry):
        entry = registry.create(max_selections=3)
        session_id = entry.session.session_id

        assert session_id in registry
        assert registry.get(session_id) is entry
        assert entry.session.max_selections == 3
        assert registry.delete(session_id) is True
        assert registry.delete(session_id) is False
        assert registry.get(session_id) is None


class TestIdleEviction:

    def test_idle_session_evicted_on_next_lookup(self, registry, clock):
        stale = registry.create().session.session_id
        clock.now += 61

        fresh = registry.create().session.session_id

        assert stale not in registry
        assert fresh in registry
        assert len(registry) == 1

    def test_lookup_keeps_session_alive(self, registry, clock):
        session_id = registry.create().session.session_id
        clock.now += 50
        assert registry.get(session_id) is not None
        clock.now += 50
        assert registry.get(session_id) is not None

    def test_session_at_ttl_is_kept(self, registry, clock):
        session_id = registry.create().session.session_id
        clock.now += 60
        assert registry.evict_idle() == []
        assert session_id in registry

    def test_locked_session_is_not_evicted(self, registry, clock):
        entry = registry.create()
        clock.now += 120

        async def evict_while_held():
            async with entry.lock:
                return registry.evict_idle()

        assert asyncio.run(evict_while_held()) == []
        assert registry.evict_idle() == [entry.session.session_id]

    def test_zero_ttl_disables_eviction(self, clock):
        registry = SessionRegistry(idle_ttl_seconds=0, clock=clock)
        session_id = registry.create().session.session_id
        clock.now += 10 ** 9
        assert registry.get(session_id) is not None
