"""Threads, mutual exclusion and wake-up signals."""

import threading

__all__ = ["Worker", "Mutex", "Signal"]


class Worker:
    """Runs ``func(data)`` on its own thread once started."""

    def __init__(self, func, data=None):
        self.func = func
        self.data = data
        self._thread = threading.Thread(target=self._run, daemon=True)

    def _run(self):
        self.func(self.data)

    def start(self):
        """Start the thread and return this worker.

        Raises ``RuntimeError`` if it was started before.
        """
        self._thread.start()
        return self

    def join(self):
        """Wait until the thread has finished."""
        self._thread.join()

    @property
    def alive(self):
        """Whether the thread is still running."""
        return self._thread.is_alive()


class Mutex:
    """A non-reentrant lock usable as a context manager."""

    def __init__(self):
        self._lock = threading.Lock()

    def lock(self):
        """Block until the mutex is held by the caller."""
        self._lock.acquire()

    def unlock(self):
        """Release the mutex; raises ``RuntimeError`` if it is not held."""
        self._lock.release()

    def locked(self):
        """Tell whether some thread holds the mutex."""
        return self._lock.locked()

    def __enter__(self):
        self.lock()
        return self

    def __exit__(self, *args):
        self.unlock()
        return False


class Signal:
    """An auto-resetting wake-up signal.

    ``signal`` lets one waiter through; a signal sent while nobody waits is
    kept until the next ``wait`` consumes it.
    """

    def __init__(self):
        self._condition = threading.Condition()
        self._set = False

    def wait(self, timeout=None):
        """Wait for a signal; return ``False`` if ``timeout`` seconds pass first."""
        with self._condition:
            if not self._condition.wait_for(lambda: self._set, timeout):
                return False
            self._set = False
            return True

    def signal(self):
        """Wake one waiter, or the next one to wait."""
        with self._condition:
            self._set = True
            self._condition.notify()