"""
Therapist Controller
"""

# Services
from .services.therapist_query_service import TherapistQueryService
from .services.manage_therapist_service import ManageTherapistService
from .services.profile_service import ProfileService
from .services.live_status_service import LiveStatusService
from .services.attendance_service import AttendanceService





class TherapistController:

    def get_stats(self) -> dict:
        return TherapistQueryService().get_stats()


    def list_monitoring(self, args) -> dict:
        return TherapistQueryService().list_monitoring(args)


    def get_work_stats(self, girl_id: str) -> dict:
        return TherapistQueryService().get_work_stats(girl_id)


    def set_cooldown(self, girl_id: str, hours: float) -> dict:
        return ManageTherapistService().set_cooldown(girl_id, hours)


    def cancel_cooldown(self, girl_id: str) -> dict:
        return ManageTherapistService().cancel_cooldown(girl_id)


    def toggle_blocked(self, girl_id: str) -> dict:
        return ManageTherapistService().toggle_flag(girl_id, "is_blocked")


    def toggle_verified(self, girl_id: str) -> dict:
        return ManageTherapistService().toggle_flag(girl_id, "is_verified")


    # Profiles
    def list_cities(self) -> dict:
        return ProfileService().list_cities()


    def list_categories(self) -> dict:
        return ProfileService().list_categories()


    def list_profiles(self, args) -> dict:
        return ProfileService().list_girls(args)


    def get_profile(self, girl_id: str) -> dict:
        return ProfileService().get_girl(girl_id)


    def create_profile(self, operator, data: dict) -> dict:
        return ProfileService().create_girl(operator, data)


    def update_profile(self, operator, girl_id: str, data: dict) -> dict:
        return ProfileService().update_girl(operator, girl_id, data)


    # Live Status
    def get_live_status(self, girl_id: str) -> dict:
        return LiveStatusService().get_status(girl_id)


    def update_live_status(self, girl_id: str, data: dict) -> dict:
        return LiveStatusService().update_status(girl_id, data)


    # Attendance
    def list_attendance(self, args) -> dict:
        return AttendanceService().list_attendance(args)
