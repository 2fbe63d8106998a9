#!/usr/bin/env python3
"""
main.py
=======
Process entry point: configure logging, build the scene, start the
simulation clock and serve it over HTTP.

Environment overrides
---------------------
``TRAFFIC_HOST``, ``TRAFFIC_PORT``, ``TRAFFIC_STATIC_ROOT``,
``TRAFFIC_SCENE`` (JSON scene file; built-in scene when unset),
``TRAFFIC_TICK_INTERVAL_S``, ``TRAFFIC_LOG_LEVEL``.
"""

import functools
import logging
import os

import uvicorn

import config
from logging_setup import setup_logging
from server.api import create_app
from sim.scene import default_traffic, load_scene
from sim.sim_bridge import SimBridge


def main() -> None:
    level_name = os.environ.get("TRAFFIC_LOG_LEVEL", config.DEFAULT_LOG_LEVEL).upper()
    setup_logging(getattr(logging, level_name, logging.INFO))
    log = logging.getLogger("main")

    host = os.environ.get("TRAFFIC_HOST", config.DEFAULT_HOST)
    port = int(os.environ.get("TRAFFIC_PORT", config.DEFAULT_PORT))
    static_root = os.environ.get("TRAFFIC_STATIC_ROOT", config.STATIC_ROOT)
    tick_interval_s = float(
        os.environ.get("TRAFFIC_TICK_INTERVAL_S", config.DEFAULT_TICK_INTERVAL_S)
    )
    scene_path = os.environ.get("TRAFFIC_SCENE")

    if scene_path:
        scene_factory = functools.partial(load_scene, scene_path)
    else:
        scene_factory = default_traffic

    bridge = SimBridge(scene_factory=scene_factory, tick_interval_s=tick_interval_s)
    app = create_app(bridge, static_root=static_root)

    log.info("Serving simulation on http://%s:%d (static root %s)", host, port, static_root)
    try:
        uvicorn.run(app, host=host, port=port, log_config=None)
    except KeyboardInterrupt:
        log.info("Shutting down...")


if __name__ == "__main__":
    main()
