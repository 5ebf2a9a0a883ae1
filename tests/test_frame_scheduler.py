"""Tests for FrameScheduler."""

from brickbreaker.frame_scheduler import FrameScheduler


class TestFrameScheduler:

    def test_empty(self):
        scheduler = FrameScheduler()
        assert scheduler.pending == 0
        assert scheduler.run_frame() == 0
        assert scheduler.frames_run == 0

    def test_runs_queued_callbacks_in_order(self):
        scheduler = FrameScheduler()
        calls = []
        scheduler.request_frame(lambda: calls.append('a'))
        scheduler.request_frame(lambda: calls.append('b'))

        assert scheduler.run_frame() == 2
        assert calls == ['a', 'b']
        assert scheduler.pending == 0
        assert scheduler.frames_run == 1

    def test_requests_during_frame_wait(self):
        scheduler = FrameScheduler()
        calls = []

        def tick():
            calls.append(len(calls))
            scheduler.request_frame(tick)

        scheduler.request_frame(tick)
        scheduler.run_frame()
        assert calls == [0]
        assert scheduler.pending == 1

    def test_run_until_idle(self):
        scheduler = FrameScheduler()
        remaining = [3]

        def tick():
            remaining[0] -= 1
            if remaining[0] > 0:
                scheduler.request_frame(tick)

        scheduler.request_frame(tick)
        assert scheduler.run_until_idle() == 3
        assert scheduler.pending == 0

    def test_run_until_idle_limit(self):
        scheduler = FrameScheduler()

        def forever():
            scheduler.request_frame(forever)

        scheduler.request_frame(forever)
        assert scheduler.run_until_idle(max_frames=10) == 10
        assert scheduler.pending == 1

    def test_cancel_all(self):
        scheduler = FrameScheduler()
        calls = []
        scheduler.request_frame(lambda: calls.append(1))
        scheduler.cancel_all()
        scheduler.run_frame()
        assert calls == []
