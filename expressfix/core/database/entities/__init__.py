"""
Database entity models.

Each module represents a single database table:

- profiles: User profiles mirrored from the auth service
- design_uploads: Uploaded and enhanced design files
- analysis_results: Review tool results per upload
- brand_guidelines: Brand rules used by the Brand Checker
- export_history: Requested exports
- notifications: In-app notifications
"""

from .analysis_results import AIAnalysisResult
from .brand_guidelines import BrandGuideline
from .design_uploads import DesignUpload
from .export_history import ExportHistory
from .notifications import Notification
from .profiles import Profile

__all__ = [
    "AIAnalysisResult",
    "BrandGuideline",
    "DesignUpload",
    "ExportHistory",
    "Notification",
    "Profile",
]
