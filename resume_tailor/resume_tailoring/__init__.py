from .models import AppState, JobInput, ResumeInput, TailoringResult
from .state import TailorController
from .tailor_service import TailorService

__all__ = ["AppState", "JobInput", "ResumeInput", "TailorController", "TailoringResult", "TailorService"]
