"""
File: Chat Oversight Routes

Handles:
    - Stats, Thread List, Messages (any admin)
    - Lock / Unlock (superadmin, admin, support)
    - Cleanup (superadmin)
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Controller
from .controller import ChatController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
chat_namespace = Namespace('chats', description = 'Chat Oversight APIs')





@chat_namespace.route('/stats')
class ChatStats(Resource):

    @handle_errors
    def get(self):
        """
        Active, new today and locked threads
        """

        require_admin()
        return success(ChatController().get_stats())



@chat_namespace.route('/threads')
class ChatThreads(Resource):

    @chat_namespace.doc(params = {
        "thread_type": "c2g | s2c | s2g",
        "only_active": "Message in the last 24h",
        "has_order": "true | false",
        "search": "Participant name",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        Thread list
        """

        require_admin()
        return success(ChatController().list_threads(request.args))



@chat_namespace.route('/threads/<string:thread_id>')
class ChatThreadItem(Resource):

    @handle_errors
    def delete(self, thread_id):
        """
        Delete thread with messages and images
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)
        return success(ChatController().delete_thread(operator, thread_id))



@chat_namespace.route('/threads/<string:thread_id>/messages')
class ChatThreadMessages(Resource):

    @chat_namespace.doc(params = {"page": "Page number", "limit": "Page size (max 100)"})
    @handle_errors
    def get(self, thread_id):
        """
        Messages, newest first
        """

        require_admin()
        return success(ChatController().get_messages(thread_id, request.args))



@chat_namespace.route('/threads/<string:thread_id>/toggle-lock')
class ChatThreadLock(Resource):

    @handle_errors
    def post(self, thread_id):
        """
        Lock or unlock a thread
        """

        require_admin(constants.SUPPORT_ROLES)
        return success(ChatController().toggle_lock(thread_id))



@chat_namespace.route('/cleanup/stats')
class ChatCleanupStats(Resource):

    @handle_errors
    def get(self):
        """
        What a cleanup would remove
        """

        require_admin(constants.SUPERADMIN_ONLY)
        return success(ChatController().get_cleanup_stats())



@chat_namespace.route('/cleanup/old-messages')
class ChatCleanupOldMessages(Resource):

    @handle_errors
    def post(self):
        """
        Purge messages past retention
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)
        return success(ChatController().cleanup_old_messages(operator))



@chat_namespace.route('/cleanup/invalid-threads')
class ChatCleanupInvalidThreads(Resource):

    @handle_errors
    def post(self):
        """
        Delete one batch of invalid threads
        """

        operator = require_admin(constants.SUPERADMIN_ONLY)
        return success(ChatController().cleanup_invalid_threads(operator))
