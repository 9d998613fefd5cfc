"""
City Panel Controller
"""

# Services
from .services.panel_service import PanelService





class PanelController:

    def list_girls(self, operator, panel: str, args) -> dict:
        return PanelService().list_girls(operator, panel, args)


    def toggle_busy(self, operator, panel: str, girl_id: str, minutes: int = None) -> dict:
        return PanelService().toggle_busy(operator, panel, girl_id, minutes)
