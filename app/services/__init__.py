# app/services - Business logic layer
from .tower_service import TowerService
from .export_service import ExportService

__all__ = ['TowerService', 'ExportService']
