"""
Service Catalogue Controller
"""

# Services
from .services.service_query_service import ServiceQueryService
from .services.manage_service_service import ManageServiceService
from .services.binding_service import BindingService





class CatalogueController:

    # Services
    def list_categories(self) -> dict:
        return ServiceQueryService().list_categories()


    def list_services(self, args) -> dict:
        return ServiceQueryService().list_services(args)


    def get_service(self, service_id: int) -> dict:
        return ServiceQueryService().get_service(service_id)


    def create_service(self, operator, data: dict) -> dict:
        return ManageServiceService().create_service(operator, data)


    def update_service(self, operator, service_id: int, data: dict) -> dict:
        return ManageServiceService().update_service(operator, service_id, data)


    def toggle_service(self, service_id: int) -> dict:
        return ManageServiceService().toggle_service(service_id)


    # Durations
    def list_durations(self, service_id: int) -> dict:
        return ServiceQueryService().list_durations(service_id)


    def create_duration(self, service_id: int, data: dict) -> dict:
        return ManageServiceService().create_duration(service_id, data)


    def update_duration(self, duration_id: int, data: dict) -> dict:
        return ManageServiceService().update_duration(duration_id, data)


    def toggle_duration(self, duration_id: int) -> dict:
        return ManageServiceService().toggle_duration(duration_id)


    def delete_duration(self, operator, duration_id: int) -> dict:
        return ManageServiceService().delete_duration(operator, duration_id)


    # Bindings
    def list_bind_girls(self, service_id: int, args) -> dict:
        return BindingService().list_girls(service_id, args)


    def bind_girls(self, operator, service_id: int, girl_ids: list) -> dict:
        return BindingService().bind(operator, service_id, girl_ids)


    def unbind_girls(self, operator, service_id: int, girl_ids: list, notes: str, disable_durations: bool) -> dict:
        return BindingService().unbind(operator, service_id, girl_ids, notes, disable_durations)


    def restore_girls(self, operator, service_id: int, girl_ids: list, notes: str = None) -> dict:
        return BindingService().restore(operator, service_id, girl_ids, notes)
