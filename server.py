import argparse
import logging

from flask import Flask, request

from tsresample.errors import ResampleError
from tsresample.model.data import FREQUENCY_PARAM, FUNCTION_PARAM
from tsresample.model.frequency import Frequency
from tsresample.model.function import Function
from tsresample.resample import resample_series


def parse_args():
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="The interface to listen on",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8080,
        help="The server port",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run flask in debug mode and log every resample",
    )

    return parser.parse_args()


# Init flask
app = Flask(__name__)


def _valid_pair(entry) -> bool:
    return isinstance(entry, list) and len(entry) == 2


@app.route("/api/resample/options", methods=["GET"])
def get_resample_options():
    return {
        FREQUENCY_PARAM: Frequency.values(),
        FUNCTION_PARAM: Function.values(),
    }


@app.route("/api/resample", methods=["POST"])
def post_resample():
    body = request.get_json(silent=True)
    if body is None:
        app.logger.warning("Rejected resample request without a body")
        return {"message": "A timeseries must be provided via POST body"}, 400

    if type(body) != list or not all(_valid_pair(entry) for entry in body):
        app.logger.warning("Rejected resample request with a malformed body")
        return {"message": "The timeseries must be a list of [date, value] pairs"}, 400

    try:
        resampled = resample_series(body, request.args)
    except ResampleError as e:
        app.logger.warning("Rejected resample request: %s", e)
        return {"message": str(e)}, 400

    app.logger.info(
        "Resampled %d points into %d points (%s)",
        len(body),
        len(resampled),
        request.query_string.decode(),
    )
    return {"details": [point.to_pair() for point in resampled]}, 200


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    app.run(host=args.host, port=args.port, debug=args.debug)
