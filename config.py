#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf; it never imports from
other project packages.
"""

# ── Simulation defaults ──────────────────────────────────────────────────────
DEFAULT_TICK_INTERVAL_S: float = 0.02

# ── Steering controller defaults ─────────────────────────────────────────────
STEERING_GAIN: float = 5.0
BLEND_SHARPNESS: float = 3.0
ARRIVAL_RADIUS: float = 1.0

# ── HTTP server defaults ─────────────────────────────────────────────────────
DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8000
STATIC_ROOT: str = "Web"
SNAPSHOT_PATH: str = "/Cars"
FALLBACK_REPLY: str = "Hello!"

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_FILE: str = "traffic.log"
DEFAULT_LOG_LEVEL: str = "INFO"
