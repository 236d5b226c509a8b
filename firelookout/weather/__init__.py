from firelookout.weather.forecast_series import ForecastSeries, sample_at, get_all_forecasts

__all__ = ["ForecastSeries", "sample_at", "get_all_forecasts"]
