from .openweathermap_data_mapper import OpenWeatherMapDataMapper

__all__ = ['OpenWeatherMapDataMapper']
