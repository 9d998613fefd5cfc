"""
Media Controller

Handles:
    - Orchestration between handler and media services
"""

# Services
from .services.media_query_service import MediaQueryService
from .services.approve_media_service import ApproveMediaService
from .services.manage_media_service import ManageMediaService





class MediaController:

    def list_media(self, args) -> dict:
        return MediaQueryService().list_media(args)


    def get_stats(self) -> dict:
        return MediaQueryService().get_stats()


    def create_signed_url(self, args: dict) -> dict:
        return MediaQueryService().create_signed_url(args["key"], args["bucket"], args["expires_in"])


    def approve(self, operator, media_id: str, min_user_level: int) -> dict:
        return ApproveMediaService().approve(operator, media_id, min_user_level)


    def batch_approve(self, operator, ids: list, min_user_level: int) -> dict:
        return ApproveMediaService().batch_approve(operator, ids, min_user_level)


    def reject(self, operator, media_id: str, reason: str) -> dict:
        return ManageMediaService().reject(operator, media_id, reason)


    def batch_reject(self, operator, ids: list, reason: str) -> dict:
        return ManageMediaService().batch_reject(operator, ids, reason)


    def delete(self, media_id: str) -> dict:
        return ManageMediaService().delete(media_id)


    def reorder(self, args: dict) -> dict:
        return ManageMediaService().reorder(args["girl_id"], args["items"])


    def update_level(self, media_id: str, min_user_level: int) -> dict:
        return ManageMediaService().update_level(media_id, min_user_level)


    def restore(self, media_id: str) -> dict:
        return ManageMediaService().restore(media_id)
