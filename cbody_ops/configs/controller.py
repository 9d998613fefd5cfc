"""
Config Controller
"""

# Services
from .services.config_service import ConfigService





class ConfigController:

    def list_configs(self, args) -> dict:
        return ConfigService().list_configs(args)


    def get_fare_config(self) -> dict:
        return ConfigService().get_fare_config()


    def update_fare_config(self, operator, params: dict) -> dict:
        return ConfigService().update_fare_config(operator, params)
