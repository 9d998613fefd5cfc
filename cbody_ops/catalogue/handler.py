"""
File: Service Catalogue Routes

Handles:
    - Categories
    - Services (list, detail, create, update, toggle)
    - Durations (list, create, update, toggle, delete)
    - Therapist bindings (list, bind, unbind, restore)

All routes need superadmin or admin.
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.service_request import ServiceRequest, DurationRequest, BindRequest, UnbindRequest, RestoreRequest

# Validations
from .validations.service_validation import (
    ServiceValidation,
    DurationValidation,
    GirlIdsValidation,
    BindingNotesValidation
)

# Controller
from .controller import CatalogueController

# Exceptions
from ..util.exceptions import ValidationException

# App Messages
from ..util import messages

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
catalogue_namespace = Namespace('services', description = 'Service Catalogue APIs')





@catalogue_namespace.route('/categories')
class CategoryList(Resource):

    @handle_errors
    def get(self):
        """
        Active categories
        """

        require_admin(constants.MODERATION_ROLES)
        return success(CatalogueController().list_categories())



@catalogue_namespace.route('/')
class ServiceList(Resource):

    @catalogue_namespace.doc(params = {
        "search": "Code or title",
        "category_id": "Category id",
        "is_active": "true | false",
        "sort_by": "created_at | updated_at | total_sales | sort_order",
        "sort_order": "asc | desc",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        List services
        """

        require_admin(constants.MODERATION_ROLES)
        return success(CatalogueController().list_services(request.args))


    @ServiceRequest.apply(catalogue_namespace)
    @handle_errors
    def post(self):
        """
        Create service
        """

        operator = require_admin(constants.MODERATION_ROLES)
        data = ServiceValidation().validate(ServiceRequest.get_data())

        return success(CatalogueController().create_service(operator, data), 201)



@catalogue_namespace.route('/<int:service_id>')
class ServiceItem(Resource):

    @handle_errors
    def get(self, service_id):
        """
        Service detail with active durations
        """

        require_admin(constants.MODERATION_ROLES)
        return success(CatalogueController().get_service(service_id))


    @ServiceRequest.apply(catalogue_namespace)
    @handle_errors
    def patch(self, service_id):
        """
        Update service
        """

        operator = require_admin(constants.MODERATION_ROLES)
        data = ServiceValidation().validate(ServiceRequest.get_data(), partial = True)

        return success(CatalogueController().update_service(operator, service_id, data))



@catalogue_namespace.route('/<int:service_id>/toggle-active')
class ServiceToggle(Resource):

    @handle_errors
    def post(self, service_id):
        """
        Activate or deactivate
        """

        require_admin(constants.MODERATION_ROLES)
        return success(CatalogueController().toggle_service(service_id))



@catalogue_namespace.route('/<int:service_id>/durations')
class DurationList(Resource):

    @handle_errors
    def get(self, service_id):
        """
        Durations of a service, shortest first
        """

        require_admin(constants.MODERATION_ROLES)
        return success(CatalogueController().list_durations(service_id))


    @DurationRequest.apply(catalogue_namespace)
    @handle_errors
    def post(self, service_id):
        """
        Add a duration
        """

        require_admin(constants.MODERATION_ROLES)
        data = DurationValidation().validate(DurationRequest.get_data())

        return success(CatalogueController().create_duration(service_id, data), 201)



@catalogue_namespace.route('/durations/<int:duration_id>')
class DurationItem(Resource):

    @DurationRequest.apply(catalogue_namespace)
    @handle_errors
    def patch(self, duration_id):
        """
        Update a duration
        """

        require_admin(constants.MODERATION_ROLES)
        data = DurationValidation().validate(DurationRequest.get_data(), partial = True)

        return success(CatalogueController().update_duration(duration_id, data))


    @handle_errors
    def delete(self, duration_id):
        """
        Delete a duration
        """

        operator = require_admin(constants.MODERATION_ROLES)
        return success(CatalogueController().delete_duration(operator, duration_id))



@catalogue_namespace.route('/durations/<int:duration_id>/toggle-active')
class DurationToggle(Resource):

    @handle_errors
    def post(self, duration_id):
        """
        Activate or deactivate a duration
        """

        require_admin(constants.MODERATION_ROLES)
        return success(CatalogueController().toggle_duration(duration_id))



@catalogue_namespace.route('/<int:service_id>/girls')
class ServiceGirls(Resource):

    @catalogue_namespace.doc(params = {
        "search": "Number, name or username",
        "city_id": "City id",
        "category_id": "Category id",
        "bind_status": "all | bound-enabled | bound-disabled | unbound",
        "sort_by": "girl_number | name | created_at",
        "sort_order": "asc | desc",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self, service_id):
        """
        Therapists with their binding to this service
        """

        require_admin(constants.MODERATION_ROLES)
        return success(CatalogueController().list_bind_girls(service_id, request.args))



@catalogue_namespace.route('/<int:service_id>/girls/bind')
class ServiceBind(Resource):

    @BindRequest.apply(catalogue_namespace)
    @handle_errors
    def post(self, service_id):
        """
        Bind therapists
        """

        operator = require_admin(constants.MODERATION_ROLES)
        girl_ids = GirlIdsValidation().validate(BindRequest.get_data().get("girl_ids"))

        return success(CatalogueController().bind_girls(operator, service_id, girl_ids))



@catalogue_namespace.route('/<int:service_id>/girls/unbind')
class ServiceUnbind(Resource):

    @UnbindRequest.apply(catalogue_namespace)
    @handle_errors
    def post(self, service_id):
        """
        Unbind therapists
        """

        operator = require_admin(constants.MODERATION_ROLES)
        data = UnbindRequest.get_data()

        girl_ids = GirlIdsValidation().validate(data.get("girl_ids"))
        notes = BindingNotesValidation().validate(data.get("notes"))

        disable_durations = data.get("disable_durations", False)
        if not isinstance(disable_durations, bool):
            raise ValidationException(messages.ERROR['INVALID_BOOLEAN'].format("disable_durations"))

        return success(CatalogueController().unbind_girls(operator, service_id, girl_ids, notes, disable_durations))



@catalogue_namespace.route('/<int:service_id>/girls/restore')
class ServiceRestore(Resource):

    @RestoreRequest.apply(catalogue_namespace)
    @handle_errors
    def post(self, service_id):
        """
        Restore unbound therapists
        """

        operator = require_admin(constants.MODERATION_ROLES)
        data = RestoreRequest.get_data()

        girl_ids = GirlIdsValidation().validate(data.get("girl_ids"))
        notes = BindingNotesValidation().validate(data.get("notes"), required = False)

        return success(CatalogueController().restore_girls(operator, service_id, girl_ids, notes))
