"""A sound output that produces no sound but drives the audio callback in real time."""

import logging
import threading

from goldfish.thread import Worker

__all__ = ["NullSound"]

log = logging.getLogger(__name__)

_CHANNELS = 2
_SAMPLE_BYTES = 2


class NullSound:
    """Calls ``callback(buffer, frames)`` every ``interval`` milliseconds.

    ``buffer`` is a ``bytearray`` holding ``frames`` frames of 16-bit stereo
    audio, which is then discarded.
    """

    def __init__(self, callback, rate=44100, interval=60):
        if rate <= 0:
            raise ValueError(f"sample rate must be positive: {rate!r}")
        if interval <= 0:
            raise ValueError(f"interval must be positive: {interval!r}")
        self.callback = callback
        self.sample_rate = rate
        self.interval = interval
        self._quit = threading.Event()
        self._worker = None
        self._closed = False
        log.debug("Null available")

    def buffer_frames(self):
        """Return the number of frames handed to the callback each time."""
        length = self.sample_rate * _CHANNELS * _SAMPLE_BYTES * self.interval // 1000
        return length // _CHANNELS // _SAMPLE_BYTES

    def _run(self, _data):
        frames = self.buffer_frames()
        buffer = bytearray(frames * _CHANNELS * _SAMPLE_BYTES)
        while True:
            self.callback(buffer, frames)
            if self._quit.wait(self.interval / 1000):
                break

    def start(self):
        """Start feeding the callback; raises ``RuntimeError`` if already started or closed."""
        if self._closed:
            raise RuntimeError("sound output is closed")
        if self._worker is not None:
            raise RuntimeError("sound output already started")
        self._quit.clear()
        self._worker = Worker(self._run).start()

    def close(self):
        """Stop the callback thread and wait for it to finish."""
        self._closed = True
        self._quit.set()
        if self._worker is not None:
            self._worker.join()
            self._worker = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False