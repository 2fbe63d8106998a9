"""
sim — Simulation core
=====================

Modules
-------
geometry
    :class:`Point`, angle conversion and line projection helpers.
network
    :class:`RoadSegment` and :class:`RoadNetwork` road graph.
vehicle
    :class:`Vehicle`, :class:`PathStep` and the kinematic integrator.
steering
    Pursuit steering controller and :class:`SteeringPolicy` constants.
traffic
    :class:`Traffic` aggregate and per-tick stepping.
scene
    Default scene and scene-file loading.
sim_bridge
    :class:`SimBridge` background-thread simulation clock.
"""
