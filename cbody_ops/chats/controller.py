"""
Chat Controller
"""

# Services
from .services.chat_query_service import ChatQueryService
from .services.chat_cleanup_service import ChatCleanupService





class ChatController:

    def get_stats(self) -> dict:
        return ChatQueryService().get_stats()


    def list_threads(self, args) -> dict:
        return ChatQueryService().list_threads(args)


    def get_messages(self, thread_id: str, args) -> dict:
        return ChatQueryService().get_messages(thread_id, args)


    def toggle_lock(self, thread_id: str) -> dict:
        return ChatQueryService().toggle_lock(thread_id)


    # Cleanup
    def get_cleanup_stats(self) -> dict:
        return ChatCleanupService().get_stats()


    def delete_thread(self, operator, thread_id: str) -> dict:
        return ChatCleanupService().delete_thread(operator, thread_id)


    def cleanup_old_messages(self, operator) -> dict:
        return ChatCleanupService().cleanup_old_messages(operator)


    def cleanup_invalid_threads(self, operator) -> dict:
        return ChatCleanupService().cleanup_invalid_threads(operator)
