"""CLI entry point for the NBM wind forecast parser."""

import argparse
import logging
from pathlib import Path

from windplot.bulletin.errors import BulletinParseError
from windplot.bulletin.parser import parse_station_forecast
from windplot.config.loader import (
    config_hash,
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from windplot.config.schema import WindplotConfig
from windplot.ingest.forecast_fetcher import ForecastFetcher, upcoming
from windplot.ingest.nomads_client import NomadsClient
from windplot.models.common import ProductType
from windplot.models.forecast import ForecastPoint, ParsedStationForecast

DEFAULT_CONFIG = "windplot.yaml"


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return n


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="windplot",
        description="NBM text bulletin wind forecasts for airports",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Show a station forecast")
    fc_p.add_argument("station", help="Station identifier, e.g. KFRG")
    fc_p.add_argument(
        "--product",
        choices=[p.value for p in ProductType],
        help="nbh (hourly) or nbs (short range)",
    )
    fc_p.add_argument("--file", help="Parse a local bulletin instead of fetching")
    fc_p.add_argument("--hours", type=_positive_int, help="Maximum number of points")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(config: WindplotConfig, args) -> int:
    product = ProductType(args.product) if args.product else config.forecast.default_product
    station = args.station.strip().upper()
    hours = args.hours if args.hours is not None else config.forecast.hours

    if args.file:
        try:
            text = Path(args.file).read_text()
            forecast = parse_station_forecast(
                text, station, product, config.product(product)
            )
        except (OSError, BulletinParseError) as e:
            print(f"Error: {e}")
            return 1
        points = list(forecast.points[:hours])
    else:
        fetcher = ForecastFetcher(_nomads_client(config), config)
        forecast = fetcher.fetch(station, product)
        if forecast is None:
            print(f"Error: no {product.value.upper()} forecast for {station}")
            return 1
        points = upcoming(
            forecast,
            hours=hours,
            past_grace_minutes=config.forecast.past_grace_minutes,
        )

    _print_forecast(forecast, points)
    return 0


def _nomads_client(config: WindplotConfig) -> NomadsClient:
    n = config.nomads
    return NomadsClient(
        base_url=n.base_url,
        user_agent=n.user_agent,
        timeout=n.timeout,
        max_retries=n.max_retries,
        retry_base_delay=n.retry_base_delay,
        fallback_cycles=n.fallback_cycles,
        products=config.products,
    )


def _fmt(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.1f}"
    return str(value)


def _print_forecast(forecast: ParsedStationForecast, points: list[ForecastPoint]) -> None:
    print(
        f"{forecast.station} {forecast.product.value.upper()} "
        f"issued {forecast.issued_at:%Y-%m-%d %H:%M}Z | {len(points)} points"
    )
    print(
        f"{'UTC':<16} {'DIR':>4} {'SPD':>4} {'GST':>4} {'TMP':>4} {'DPT':>4} "
        f"{'SKY':>4} {'CIG':>6} {'VIS':>5} {'POP':>4}"
    )
    for p in points:
        print(
            f"{p.timestamp:%Y-%m-%d %H:%M} "
            f"{_fmt(p.wind_direction_deg):>4} {_fmt(p.wind_speed_kt):>4} "
            f"{_fmt(p.wind_gust_kt):>4} {_fmt(p.temperature_f):>4} "
            f"{_fmt(p.dew_point_f):>4} {_fmt(p.sky_cover_pct):>4} "
            f"{_fmt(p.ceiling_ft):>6} {_fmt(p.visibility_sm):>5} "
            f"{_fmt(p.precip_probability_pct):>4}"
        )


def _cmd_config(config: WindplotConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        print(f"Config hash: {config_hash(config)}")
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, args.config)
        except (KeyError, TypeError, ValueError, OSError) as e:
            print(f"Error: {e}")
            return 1
        print(f"Set {key} = {get_config_value(new_config, key.strip())} in {args.config}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
