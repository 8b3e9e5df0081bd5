"""Keep a program running: restart it whenever its pid file shows it gone.

Restarts are rate limited so a program that dies immediately does not
get relaunched in a tight loop.
"""

from __future__ import annotations

import argparse
import logging
import os
import subprocess
import threading
import time
from collections.abc import Sequence
from pathlib import Path

DEFAULT_COMMAND = ("/home/root/gateWay",)
DEFAULT_PID_FILE = "/var/run/gateway.pid"
DEFAULT_INTERVAL = 3.0

log = logging.getLogger(__name__)


def is_process_running(pid_file: str | os.PathLike[str]) -> bool:
    """Return True if ``pid_file`` names a process that can be signalled."""
    try:
        text = Path(pid_file).read_text()
    except OSError:
        return False
    try:
        pid = int(text.split()[0])
    except (IndexError, ValueError):
        return False
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except OSError:
        return False
    return True


class RestartLimiter:
    """Counts restarts that come quickly after one another.

    A restart within ``window`` seconds of the previous one counts toward a
    burst; once more than ``burst`` such restarts pile up, the next restart
    waits ``cooldown`` seconds and the count starts again.
    """

    def __init__(self, window: float = 5, burst: int = 5, cooldown: float = 10) -> None:
        self.window = window
        self.burst = burst
        self.cooldown = cooldown
        self._count = 0
        self._last: float | None = None

    def record(self, now: float) -> float:
        """Register a restart at time ``now``; return the seconds to wait first."""
        if self._last is not None and now - self._last < self.window:
            self._count += 1
        else:
            self._count = 0
        self._last = now
        if self._count > self.burst:
            self._count = 0
            return self.cooldown
        return 0


class Supervisor:
    """Watches a pid file and launches ``command`` when the process is gone."""

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_COMMAND,
        pid_file: str | os.PathLike[str] = DEFAULT_PID_FILE,
        interval: float = DEFAULT_INTERVAL,
        limiter: RestartLimiter | None = None,
    ) -> None:
        if not command:
            raise ValueError("command must not be empty")
        self.command = list(command)
        self.pid_file = pid_file
        self.interval = interval
        self.limiter = limiter if limiter is not None else RestartLimiter()
        self._children: list[subprocess.Popen] = []
        self._stop = threading.Event()

    def _reap(self) -> None:
        self._children = [child for child in self._children if child.poll() is None]

    def check_once(self) -> subprocess.Popen | None:
        """Start the program if it is not running; return the new process, if any."""
        self._reap()
        if is_process_running(self.pid_file):
            return None
        delay = self.limiter.record(time.time())
        if delay:
            log.warning("restarting too often, waiting %s s", delay)
            if self._stop.wait(delay):
                return None
        try:
            child = subprocess.Popen(self.command)
        except OSError as exc:
            log.error("failed to start %s: %s", self.command[0], exc)
            return None
        log.info("started %s as pid %d", self.command[0], child.pid)
        self._children.append(child)
        return child

    def run(self) -> None:
        """Check, then wait ``interval`` seconds, until :meth:`stop` is called."""
        self._stop.clear()
        while True:
            self.check_once()
            if self._stop.wait(self.interval):
                break

    def stop(self) -> None:
        """Ask :meth:`run` to return."""
        self._stop.set()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Restart a program whenever it stops.")
    parser.add_argument("--pid-file", default=DEFAULT_PID_FILE)
    parser.add_argument("--interval", type=float, default=DEFAULT_INTERVAL)
    parser.add_argument("command", nargs=argparse.REMAINDER)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    supervisor = Supervisor(
        args.command or DEFAULT_COMMAND, args.pid_file, args.interval
    )
    try:
        supervisor.run()
    except KeyboardInterrupt:
        pass
    return 0