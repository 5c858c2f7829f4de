from __future__ import annotations

import logging
from typing import Callable, Collection, Optional

from dotenv import load_dotenv
from flask import Flask, current_app, jsonify, request
from flask_cors import CORS

from weather_news import Dashboard, DashboardConfig
from weather_news.errors import DashboardError, MissingParameterError, UpstreamFailureError
from weather_news.logging_config import configure_logging
from weather_news.serializers import combined_to_dict, news_to_dict, weather_to_dict

logger = logging.getLogger(__name__)

EXAMPLES = {
    "weather": "/api/weather?city=London",
    "news": "/api/news?city=London or /api/news?country=GB",
    "data": "/api/data?city=London",
}

# The combined feed only distinguishes missing input and unknown cities.
DATA_STATUSES = (400, 404)


def create_app(config: Optional[DashboardConfig] = None, dashboard: Optional[Dashboard] = None) -> Flask:
    config = config or DashboardConfig.from_env()
    configure_logging(config.log_level)
    app = Flask(__name__, static_folder="static", static_url_path="")
    app.config["DASHBOARD"] = dashboard or Dashboard.from_config(config)
    CORS(app, origins=config.cors_origin)

    @app.get("/")
    def index():
        return app.send_static_file("index.html")

    @app.get("/health")
    def healthcheck():
        return {"status": "ok"}

    @app.get("/api/weather")
    def weather():
        return _respond(
            lambda: weather_to_dict(_dashboard().weather(request.args.get("city"))),
            example=EXAMPLES["weather"],
            failure="Failed to fetch weather data",
        )

    @app.get("/api/news")
    def news():
        return _respond(
            lambda: news_to_dict(
                _dashboard().news(city=request.args.get("city"), country=request.args.get("country"))
            ),
            example=EXAMPLES["news"],
            failure="Failed to fetch news data",
        )

    @app.get("/api/data")
    def data():
        return _respond(
            lambda: combined_to_dict(_dashboard().combined(request.args.get("city"))),
            example=EXAMPLES["data"],
            failure="Failed to fetch data",
            statuses=DATA_STATUSES,
        )

    return app


def _dashboard() -> Dashboard:
    return current_app.config["DASHBOARD"]


def _respond(
    build: Callable[[], dict],
    example: str,
    failure: str,
    statuses: Optional[Collection[int]] = None,
):
    try:
        return jsonify(build())
    except MissingParameterError as exc:
        return jsonify({"error": exc.message, "example": example}), exc.status_code
    except UpstreamFailureError as exc:
        return jsonify({"error": failure, "message": exc.message}), exc.status_code
    except DashboardError as exc:
        if statuses is not None and exc.status_code not in statuses:
            return jsonify({"error": failure, "message": exc.message}), 500
        return jsonify({"error": exc.error, "message": exc.message}), exc.status_code
    except Exception as exc:  # noqa: BLE001
        current_app.logger.exception("Uncaught exception when handling %s", request.path)
        return jsonify({"error": failure, "message": str(exc)}), 500


load_dotenv()
_config = DashboardConfig.from_env()
app = create_app(_config)


if __name__ == "__main__":
    base = f"http://localhost:{_config.port}"
    logger.info("Server running on %s", base)
    logger.info("Weather API endpoint: %s/api/weather?city=London", base)
    logger.info("News API endpoint: %s/api/news?city=London", base)
    logger.info("Combined endpoint: %s/api/data?city=London", base)
    if _config.uses_demo_keys:
        logger.warning("Using demo API keys. Please set your API keys in .env file")
    app.run(host=_config.host, port=_config.port)
