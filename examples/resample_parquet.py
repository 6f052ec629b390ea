"""
Resample a column of a parquet file through the resample API.
"""

import argparse
import math
import pathlib

import pandas as pd
import requests


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="resample_parquet.py",
        description="Resample a column stored in a parquet file",
    )
    parser.add_argument(
        "--host",
        default="localhost:8080",
        help="The API endpoint",
    )
    parser.add_argument(
        "--filename",
        required=True,
        type=str,
        help="The parquet file with the data",
    )
    parser.add_argument(
        "--time-column",
        required=True,
        type=str,
        help="The name of the timestamp column",
    )
    parser.add_argument(
        "--value-column",
        required=True,
        type=str,
        help="The name of the column to resample",
    )
    parser.add_argument(
        "--frequency",
        default="monthEnd",
        help="One of monthEnd, weekEnd, quarterEnd or yearEnd",
    )
    parser.add_argument(
        "--function",
        default="sum",
        help="One of min, max or sum",
    )
    return parser.parse_args()


def load_series(
    filename: pathlib.Path,
    time_column: str,
    value_column: str,
) -> list[tuple[str, float]]:
    if not filename.is_file():
        raise ValueError(f"File not found: {filename}")

    df = pd.read_parquet(filename, columns=[time_column, value_column])
    time_col = pd.to_datetime(df[time_column]).to_list()
    return [
        (time.date().isoformat(), float(val))
        for time, val in zip(time_col, df[value_column], strict=True)
        if not math.isnan(val)
    ]


def post(args: argparse.Namespace):
    url = f"http://{args.host}/api/resample"

    series = load_series(
        pathlib.Path(args.filename), args.time_column, args.value_column
    )

    resp = requests.post(
        url,
        params={
            "resampleFrequency": args.frequency,
            "resampleFunction": args.function,
        },
        json=[[date, value] for date, value in series],
    )
    body = resp.json()
    if resp.status_code != 200:
        raise SystemExit(f"Resample failed: {body['message']}")

    for period, value in body["details"]:
        print(f"{period}\t{value}")


if __name__ == "__main__":
    post(parse_args())
