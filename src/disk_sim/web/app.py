"""Flask application factory for the simulator's HTTP API.

Every endpoint is stateless: the request body carries the workload and
settings, the response carries the result.  Request bodies look like::

    {
        "requests": [95, 180, 34] or "95, 180, 34",
        "algorithm": "C-SCAN",
        "disk_max": 199,
        "head_start": 50,
        "direction": "up",
        "use_edge": true,
        "count_jump": false
    }

Everything except ``requests`` is optional.  Invalid input is answered
with HTTP 400 and ``{"error": "..."}``.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from disk_sim.config import ConfigError, SimulationConfig
from disk_sim.dispatcher import Algorithm, compare, simulate
from disk_sim.export import result_to_dict, trace_to_csv
from disk_sim.workload import WorkloadError, clamp, parse_requests

_HTTP_BAD_REQUEST = 400


def _read_body() -> dict[str, Any]:
    """Return the JSON body as a dict, or raise ``ConfigError``."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        msg = "Request body must be a JSON object"
        raise ConfigError(msg)
    return data  # pyright: ignore[reportUnknownVariableType]


def _read_requests(data: dict[str, Any], disk_max: int) -> list[int]:
    """Extract the workload from a request body."""
    if "requests" not in data:
        msg = "Missing 'requests' field"
        raise WorkloadError(msg)
    raw: object = data["requests"]
    if isinstance(raw, str):
        return parse_requests(raw, disk_max)
    if isinstance(raw, list):
        items: list[object] = raw  # pyright: ignore[reportUnknownVariableType]
        tracks = [r for r in items if isinstance(r, int) and not isinstance(r, bool)]
        if len(tracks) == len(items):
            return [clamp(r, disk_max) for r in tracks]
    msg = "'requests' must be a list of integers or a string"
    raise WorkloadError(msg)


def _read_job(data: dict[str, Any]) -> tuple[SimulationConfig, list[int]]:
    config = SimulationConfig.from_mapping(data)
    return config, _read_requests(data, config.disk_max)


def _bad_request(error: Exception) -> tuple[Response, int]:
    return jsonify({"error": str(error)}), _HTTP_BAD_REQUEST


def create_app() -> Flask:
    """Create and configure the Flask application.

    Returns:
        A configured Flask application ready to serve.

    """
    app = Flask(__name__)

    @app.errorhandler(ConfigError)
    def config_error(error: ConfigError) -> tuple[Response, int]:  # pyright: ignore[reportUnusedFunction]
        return _bad_request(error)

    @app.errorhandler(WorkloadError)
    def workload_error(error: WorkloadError) -> tuple[Response, int]:  # pyright: ignore[reportUnusedFunction]
        return _bad_request(error)

    @app.route("/api/algorithms")
    def algorithms() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the algorithm names and default settings."""
        defaults = SimulationConfig()
        return jsonify(
            {
                "algorithms": [a.value for a in Algorithm],
                "defaults": {
                    "disk_max": defaults.disk_max,
                    "head_start": defaults.head_start,
                    "direction": defaults.direction.value,
                    "use_edge": defaults.use_edge,
                    "count_jump": defaults.count_jump,
                },
            }
        )

    @app.route("/api/simulate", methods=["POST"])
    def simulate_one() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Run one algorithm and return its trace and metrics.

        Expects JSON body with ``requests`` and optional ``algorithm``
        (default FCFS) and settings.

        """
        data = _read_body()
        config, requests = _read_job(data)
        algorithm = Algorithm.parse(str(data.get("algorithm", Algorithm.FCFS)))
        return jsonify(result_to_dict(simulate(algorithm, requests, config)))

    @app.route("/api/compare", methods=["POST"])
    def compare_all() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Run all six algorithms and return their results in order."""
        config, requests = _read_job(_read_body())
        return jsonify({"results": [result_to_dict(r) for r in compare(requests, config)]})

    @app.route("/api/export", methods=["POST"])
    def export_csv() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return one algorithm's trace as a CSV download."""
        data = _read_body()
        config, requests = _read_job(data)
        algorithm = Algorithm.parse(str(data.get("algorithm", Algorithm.FCFS)))
        result = simulate(algorithm, requests, config)
        return Response(
            trace_to_csv(result.trace),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=trace.csv"},
        )

    return app


def main() -> None:
    """Run the API development server.

    This is the ``disk-sim-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
