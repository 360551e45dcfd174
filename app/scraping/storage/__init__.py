"""
Storage layer exports.
"""

from app.scraping.storage.base import ReportArtifacts, ReportStorage
from app.scraping.storage.file_storage import FileReportStorage

__all__ = ["FileReportStorage", "ReportArtifacts", "ReportStorage"]
