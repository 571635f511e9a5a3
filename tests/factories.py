"""Shared builders and fakes for the test suite."""

import asyncio

from models import PlayerScore


def make_player(name="Alice", scores=None, out=None, in_=None, total=None) -> PlayerScore:
    """Helper: a PlayerScore with 18 holes, every hole a 4 unless given."""
    if scores is None:
        scores = [4] * 18
    return PlayerScore(playerName=name, scores=scores, out=out, total=total, **{"in": in_})


class CountingPreviewStore:
    """Preview store that records every create/release instead of touching disk."""

    def __init__(self):
        self.created = []
        self.released = []

    def create(self, image):
        ref = f"preview-{len(self.created) + 1}"
        self.created.append(ref)
        return ref

    def release(self, ref):
        self.released.append(ref)

    @property
    def live(self):
        return [r for r in self.created if r not in self.released]


class FakeSheets:
    """In-memory SheetSyncClient that drives the status callback like the real one."""

    def __init__(self, auth_error=None, append_error=None):
        self.auth_error = auth_error
        self.append_error = append_error
        self.appended = []
        self.initialized = False
        self._on_status_change = None

    async def initialize(self, on_status_change):
        self._on_status_change = on_status_change
        self.initialized = True

    async def authenticate(self):
        if self.auth_error is not None:
            self._on_status_change(False)
            raise self.auth_error
        self._on_status_change(True)

    async def sign_out(self):
        self._on_status_change(False)

    async def append(self, data):
        if self.append_error is not None:
            raise self.append_error
        self.appended.append(data)
        return {"updates": {"updatedRows": 1}}


class GatedSheets(FakeSheets):
    """FakeSheets whose appends wait on ``gate`` and count how many overlap."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.gate = asyncio.Event()
        self.in_flight = 0
        self.max_in_flight = 0

    async def append(self, data):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await self.gate.wait()
            return await super().append(data)
        finally:
            self.in_flight -= 1
