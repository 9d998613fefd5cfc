"""
File: Therapist Routes

Handles:
    - Live Status Stats, Monitoring List, Work Stats
    - Cooldown, Block and Verify switches (superadmin/admin)
    - Profiles: list, detail, create, update (writes superadmin/admin)
    - Live status read and upsert, form cities and categories
    - Attendance (superadmin/admin/support)
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.therapist_request import CooldownRequest, GirlProfileRequest, LiveStatusRequest

# Validations
from .validations.cooldown_validation import CooldownValidation
from .validations.profile_validation import GirlProfileValidation, LiveStatusValidation

# Controller
from .controller import TherapistController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
therapist_namespace = Namespace('therapists', description = 'Therapist Monitoring APIs')





@therapist_namespace.route('/stats')
class TherapistStats(Resource):

    @handle_errors
    def get(self):
        """
        Online / busy / offline counts
        """

        require_admin()
        return success(TherapistController().get_stats())



@therapist_namespace.route('/monitoring')
class TherapistMonitoring(Resource):

    @therapist_namespace.doc(params = {
        "search": "Number, name or username",
        "status": "available | busy | offline (repeatable)",
        "city_id": "City id",
        "only_abnormal": "Only therapists in cooldown",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        Monitoring list
        """

        require_admin()
        return success(TherapistController().list_monitoring(request.args))



@therapist_namespace.route('/<string:girl_id>/work-stats')
class TherapistWorkStats(Resource):

    @handle_errors
    def get(self, girl_id):
        """
        Online hours
        """

        require_admin()
        return success(TherapistController().get_work_stats(girl_id))



@therapist_namespace.route('/<string:girl_id>/cooldown')
class TherapistCooldown(Resource):

    @CooldownRequest.apply(therapist_namespace)
    @handle_errors
    def post(self, girl_id):
        """
        Put therapist in cooldown
        """

        require_admin(constants.MODERATION_ROLES)
        hours = CooldownRequest.get_data().get("hours")

        CooldownValidation().validate(hours)

        return success(TherapistController().set_cooldown(girl_id, hours))


    @handle_errors
    def delete(self, girl_id):
        """
        Cancel cooldown
        """

        require_admin(constants.MODERATION_ROLES)
        return success(TherapistController().cancel_cooldown(girl_id))



@therapist_namespace.route('/<string:girl_id>/toggle-blocked')
class TherapistToggleBlocked(Resource):

    @handle_errors
    def post(self, girl_id):
        """
        Block or unblock
        """

        require_admin(constants.MODERATION_ROLES)
        return success(TherapistController().toggle_blocked(girl_id))



@therapist_namespace.route('/<string:girl_id>/toggle-verified')
class TherapistToggleVerified(Resource):

    @handle_errors
    def post(self, girl_id):
        """
        Verify or unverify
        """

        require_admin(constants.MODERATION_ROLES)
        return success(TherapistController().toggle_verified(girl_id))



@therapist_namespace.route('/')
class TherapistProfiles(Resource):

    @therapist_namespace.doc(params = {
        "search": "Number, name or username",
        "city_id": "City id",
        "category_id": "Category id",
        "is_verified": "true | false",
        "is_blocked": "true | false",
        "badge": "new | hot | top_rated",
        "sort_by": "created_at | updated_at | rating | total_sales | trust_score | sort_order",
        "sort_order": "asc | desc",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        Therapist profiles
        """

        require_admin()
        return success(TherapistController().list_profiles(request.args))


    @GirlProfileRequest.apply(therapist_namespace)
    @handle_errors
    def post(self):
        """
        Create therapist
        """

        operator = require_admin(constants.MODERATION_ROLES)
        data = GirlProfileValidation().validate(GirlProfileRequest.get_data())

        return success(TherapistController().create_profile(operator, data), 201)



@therapist_namespace.route('/cities')
class TherapistCities(Resource):

    @handle_errors
    def get(self):
        """
        Active cities
        """

        require_admin()
        return success(TherapistController().list_cities())



@therapist_namespace.route('/categories')
class TherapistCategories(Resource):

    @handle_errors
    def get(self):
        """
        Active categories
        """

        require_admin()
        return success(TherapistController().list_categories())



@therapist_namespace.route('/attendance')
class TherapistAttendance(Resource):

    @therapist_namespace.doc(params = {
        "start_date": "Window start (ISO), default 7 days before end",
        "end_date": "Window end (ISO), default now",
        "search": "Number or name",
        "city_id": "City id",
        "sort_by": "girl_number | online_seconds | order_count | order_duration_seconds | booking_rate_percent",
        "sort_order": "asc | desc",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        Online time, orders and booking rate
        """

        require_admin(constants.SUPPORT_ROLES)
        return success(TherapistController().list_attendance(request.args))



@therapist_namespace.route('/<string:girl_id>')
class TherapistProfile(Resource):

    @handle_errors
    def get(self, girl_id):
        """
        Therapist profile
        """

        require_admin()
        return success(TherapistController().get_profile(girl_id))


    @GirlProfileRequest.apply(therapist_namespace)
    @handle_errors
    def patch(self, girl_id):
        """
        Update therapist
        """

        operator = require_admin(constants.MODERATION_ROLES)
        data = GirlProfileValidation().validate(GirlProfileRequest.get_data(), partial = True)

        return success(TherapistController().update_profile(operator, girl_id, data))



@therapist_namespace.route('/<string:girl_id>/status')
class TherapistLiveStatus(Resource):

    @handle_errors
    def get(self, girl_id):
        """
        Live status
        """

        require_admin()
        return success(TherapistController().get_live_status(girl_id))


    @LiveStatusRequest.apply(therapist_namespace)
    @handle_errors
    def put(self, girl_id):
        """
        Upsert live status
        """

        require_admin(constants.MODERATION_ROLES)
        data = LiveStatusValidation().validate(LiveStatusRequest.get_data())

        return success(TherapistController().update_live_status(girl_id, data))
