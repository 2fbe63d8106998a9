"""
sim/sim_bridge.py
=================
Background-thread simulation clock driving :class:`~sim.traffic.Traffic`.
The HTTP server polls the bridge for the latest snapshot without ever
seeing a half-finished tick.

Public API consumed by :mod:`server.api`
----------------------------------------
* ``snapshot()``          → ``dict``
* ``start()`` / ``stop()`` → ``None``
* ``set_paused(bool)``    → ``None``
* ``reset()``             → ``None``
* ``is_running()``        → ``bool``
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional

from config import DEFAULT_TICK_INTERVAL_S
from sim.scene import default_traffic
from sim.traffic import Traffic

log = logging.getLogger("sim_bridge")


class SimBridge:
    """Simulation clock running in a background thread.

    The thread wakes every ``tick_interval_s`` seconds, measures the wall
    clock time since the previous tick and advances the traffic by exactly
    that much.  Ticks and snapshot reads share one lock.

    Parameters
    ----------
    scene_factory : callable or None
        Returns a fresh :class:`Traffic`; called at construction and on
        :meth:`reset`.  Uses :func:`~sim.scene.default_traffic` when *None*.
    tick_interval_s : float
        Scheduling interval between ticks.
    clock : callable
        Monotonic time source in seconds.
    """

    def __init__(
        self,
        scene_factory: Optional[Callable[[], Traffic]] = None,
        tick_interval_s: float = DEFAULT_TICK_INTERVAL_S,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._scene_factory = scene_factory or default_traffic
        self._tick_interval_s = tick_interval_s
        self._clock = clock

        self._lock = threading.Lock()
        self._traffic = self._scene_factory()
        self._last_tick = self._clock()

        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._running = False
        self._paused = False
        self.error: Optional[BaseException] = None

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Spawn the background simulation thread."""
        if self._running:
            return
        self._running = True
        self.error = None
        self._stop_event.clear()
        with self._lock:
            self._last_tick = self._clock()
        self._thread = threading.Thread(
            target=self._loop, daemon=True, name="SimBridge"
        )
        self._thread.start()
        log.info("SimBridge started, tick every %.0f ms", self._tick_interval_s * 1000)

    def stop(self) -> None:
        """Signal the thread to stop and wait for it to join."""
        self._running = False
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=2.0)
            self._thread = None
        log.info("SimBridge stopped")

    def is_running(self) -> bool:
        return self._running

    # ── Server-facing API ─────────────────────────────────────────────────────

    def snapshot(self) -> Dict[str, Any]:
        """Serialised copy of the whole traffic aggregate."""
        with self._lock:
            return self._traffic.as_dict()

    def reset(self) -> None:
        """Rebuild the scene so the scenario replays."""
        traffic = self._scene_factory()
        with self._lock:
            self._traffic = traffic
            self._last_tick = self._clock()
        log.info("SimBridge reset")

    def set_paused(self, paused: bool) -> None:
        """Pause / unpause the simulation tick.

        Time spent paused is not fed to the integrator.
        """
        with self._lock:
            if self._paused and not paused:
                self._last_tick = self._clock()
            self._paused = paused

    # ── Background loop ───────────────────────────────────────────────────────

    def tick(self) -> float:
        """Run one tick now and return the elapsed seconds it applied."""
        with self._lock:
            now = self._clock()
            elapsed = now - self._last_tick
            self._last_tick = now
            if self._paused:
                return 0.0
            self._traffic.step(elapsed)
            return elapsed

    def _loop(self) -> None:
        interval = self._tick_interval_s
        while self._running:
            t0 = time.perf_counter()
            try:
                self.tick()
            except Exception as exc:
                log.exception("SimBridge tick failed, stopping simulation")
                self.error = exc
                self._running = False
                return
            self._stop_event.wait(max(0.0, interval - (time.perf_counter() - t0)))
