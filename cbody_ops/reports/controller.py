"""
Report Controller
"""

# Services
from .services.report_service import ReportService





class ReportController:

    def get_stats(self) -> dict:
        return ReportService().get_stats()


    def list_reports(self, args) -> dict:
        return ReportService().list_reports(args)


    def get_report(self, report_id: str) -> dict:
        return ReportService().get_report(report_id)


    def resolve(self, operator, report_id: str, admin_notes: str) -> dict:
        return ReportService().resolve(operator, report_id, admin_notes)
