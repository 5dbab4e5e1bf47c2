"""
Static catalog of every metric stormcast knows how to ingest.

Each entry ties a station query parameter to a ``weather_*`` metric name,
its unit and the rule used to interpret the raw string. Supporting a new
sensor means adding a line to ``CATALOG``; nothing else changes.
"""
import enum
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


class MetricKind(enum.Enum):
    GAUGE = "gauge"
    BOOLEAN = "boolean"  # 0/1 exposed as a gauge
    ANGLE = "angle"  # degrees in [0, 360)


@dataclass(frozen=True)
class MetricSpec:
    name: str
    source_key: str
    unit: str
    kind: MetricKind
    help_text: str
    aliases: Tuple[str, ...] = ()

    @property
    def source_keys(self) -> Tuple[str, ...]:
        return (self.source_key,) + self.aliases


G, B, A = MetricKind.GAUGE, MetricKind.BOOLEAN, MetricKind.ANGLE

CATALOG: Tuple[MetricSpec, ...] = (
    # outdoor
    MetricSpec("weather_temperature_fahrenheit", "tempf", "fahrenheit", G,
               "Outdoor temperature in Fahrenheit"),
    MetricSpec("weather_humidity_percent", "humidity", "percent", G,
               "Outdoor relative humidity percentage"),
    MetricSpec("weather_dew_point_fahrenheit", "dewptf", "fahrenheit", G,
               "Outdoor dew point in Fahrenheit"),
    MetricSpec("weather_wind_chill_fahrenheit", "windchillf", "fahrenheit", G,
               "Outdoor wind chill in Fahrenheit"),
    MetricSpec("weather_wind_speed_mph", "windspeedmph", "mph", G,
               "Current wind speed in mph"),
    MetricSpec("weather_wind_gust_mph", "windgustmph", "mph", G,
               "Current wind gust speed in mph"),
    MetricSpec("weather_max_daily_gust_mph", "maxdailygust", "mph", G,
               "Maximum wind gust today in mph"),
    MetricSpec("weather_wind_direction_degrees", "winddir", "degrees", A,
               "Current wind direction in degrees (0-359)"),
    MetricSpec("weather_wind_direction_avg10m_degrees", "winddir_avg10m", "degrees", A,
               "10-minute average wind direction in degrees"),
    MetricSpec("weather_uv_index", "uv", "index", G,
               "Current UV index level", aliases=("UV",)),
    MetricSpec("weather_solar_radiation_wm2", "solarradiation", "W/m^2", G,
               "Solar radiation in watts per square meter"),
    # rainfall
    MetricSpec("weather_rain_hourly_inches", "hourlyrainin", "inches", G,
               "Rainfall in the last hour", aliases=("rainin",)),
    MetricSpec("weather_rain_event_inches", "eventrainin", "inches", G,
               "Rainfall for the current rain event"),
    MetricSpec("weather_rain_daily_inches", "dailyrainin", "inches", G,
               "Total rainfall today"),
    MetricSpec("weather_rain_weekly_inches", "weeklyrainin", "inches", G,
               "Total rainfall this week"),
    MetricSpec("weather_rain_monthly_inches", "monthlyrainin", "inches", G,
               "Total rainfall this month"),
    MetricSpec("weather_rain_yearly_inches", "yearlyrainin", "inches", G,
               "Total rainfall this year"),
    # indoor
    MetricSpec("weather_indoor_temperature_fahrenheit", "indoortempf", "fahrenheit", G,
               "Indoor temperature in Fahrenheit", aliases=("tempinf",)),
    MetricSpec("weather_indoor_humidity_percent", "indoorhumidity", "percent", G,
               "Indoor relative humidity percentage", aliases=("humidityin",)),
    MetricSpec("weather_barometer_relative_inhg", "baromrelin", "inHg", G,
               "Relative barometric pressure in inches of mercury", aliases=("baromin",)),
    MetricSpec("weather_barometer_absolute_inhg", "baromabsin", "inHg", G,
               "Absolute barometric pressure in inches of mercury", aliases=("absbaromin",)),
    # battery
    MetricSpec("weather_battery_outdoor", "battout", "status", B,
               "Outdoor sensor battery status (0=low, 1=ok)"),
    MetricSpec("weather_battery_indoor", "battin", "status", B,
               "Indoor sensor battery status (0=low, 1=ok)"),
)

del G, B, A


def _index(catalog) -> Dict[str, MetricSpec]:
    index: Dict[str, MetricSpec] = {}
    for spec in catalog:
        for key in spec.source_keys:
            if key in index:
                raise ValueError(f"source key {key!r} mapped twice")
            index[key] = spec
    return index


_BY_SOURCE_KEY = _index(CATALOG)
_BY_NAME = {spec.name: spec for spec in CATALOG}

if len(_BY_NAME) != len(CATALOG):
    raise ValueError("duplicate metric name in catalog")


def lookup(source_key: str) -> Optional[MetricSpec]:
    """Return the spec fed by a station parameter, or None if unsupported."""
    return _BY_SOURCE_KEY.get(source_key)


def by_name(name: str) -> Optional[MetricSpec]:
    return _BY_NAME.get(name)
