# app/services - Business logic layer
from .lift_service import LiftService
from .export_service import ExportService

__all__ = ['LiftService', 'ExportService']
