from .base import HttpProvider, RequestConfig
from .openweathermap import OpenWeatherMapFetcher

__all__ = ["HttpProvider", "OpenWeatherMapFetcher", "RequestConfig"]
