"""Animation-frame style callback queue.

The session never loops on its own: at the end of each frame it asks
the host for the next one. FrameScheduler is the host side of that
contract for a pygame clock loop (or a test that steps frames by hand).
"""

from typing import Callable, List

FrameCallback = Callable[[], None]


class FrameScheduler:
    """Queue of callbacks to run on the next frame.

    Callbacks requested while a frame runs wait for the following frame,
    mirroring requestAnimationFrame semantics.
    """

    def __init__(self):
        self._queue: List[FrameCallback] = []
        self._frames_run = 0

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return len(self._queue)

    @property
    def frames_run(self) -> int:
        return self._frames_run

    def request_frame(self, callback: FrameCallback) -> None:
        """Schedule ``callback`` for the next frame."""
        self._queue.append(callback)

    def run_frame(self) -> int:
        """Run callbacks queued before this call.

        Returns:
            Number of callbacks that ran
        """
        callbacks, self._queue = self._queue, []
        for callback in callbacks:
            callback()
        if callbacks:
            self._frames_run += 1
        return len(callbacks)

    def run_until_idle(self, max_frames: int = 100_000) -> int:
        """Run frames until nothing is pending or ``max_frames`` is reached.

        Returns:
            Number of frames run
        """
        frames = 0
        while self._queue and frames < max_frames:
            self.run_frame()
            frames += 1
        return frames

    def cancel_all(self) -> None:
        """Drop all pending callbacks."""
        self._queue.clear()
