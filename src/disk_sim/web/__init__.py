"""HTTP API for the disk scheduling simulator.

This package provides a Flask application that exposes the simulator
as JSON endpoints.  It is an **optional** extra — install with::

    pip install disk-sim[web]

The ``create_app`` factory in ``app.py`` serves four endpoints:

- ``GET /api/algorithms`` — supported algorithms and default settings.
- ``POST /api/simulate`` — run one algorithm, return trace and metrics.
- ``POST /api/compare`` — run all six algorithms on the same workload.
- ``POST /api/export`` — return one algorithm's trace as CSV.
"""
