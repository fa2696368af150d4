"""Failure taxonomy for the weather request pipeline."""


class WeatherError(Exception):
    """Base class for every pipeline failure."""


class UnsupportedCity(WeatherError):
    """The requested city is not in the static city table."""

    def __init__(self, city: str, supported: list[str]):
        self.city = city
        self.supported = supported
        super().__init__(f"unsupported city: {city}")


class UpstreamError(WeatherError):
    """Base for failures attributable to the weather provider."""


class UpstreamTransportError(UpstreamError):
    """Non-2xx HTTP status, or no response at all (status_code is None)."""

    def __init__(self, status_code: int | None, reason: str):
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"天气API请求失败: {reason}"
        else:
            message = f"天气API返回错误: {status_code} {reason}"
        super().__init__(message)


class UpstreamFormatError(UpstreamError):
    """Response body is not valid JSON."""


class UpstreamDataError(UpstreamError):
    """Well-formed envelope that is semantically unusable."""


class NoDataAvailable(WeatherError):
    """Valid envelope, but the section a report needs is absent."""
