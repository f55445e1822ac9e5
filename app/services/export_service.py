# app/services/export_service.py
"""
Export service: builds download payloads (OBJ, JSON, CSV, text summary) and
writes exports to disk.
"""

import logging
import sys
from pathlib import Path
from typing import Tuple

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from atower.export import (
    ExportError,
    export_tower,
    floor_schedule,
    generate_floor_csv,
    generate_model_json,
    generate_obj,
    generate_summary_text,
)
from atower.params import TowerParameters

logger = logging.getLogger(__name__)


class ExportService:
    """Service for exporting tower data to various formats."""

    @staticmethod
    def obj(
        params: TowerParameters,
        include_slabs: bool = True,
        segments: int = 16,
        rings: int = 10,
        include_core: bool = True,
    ) -> str:
        """OBJ file content as a string."""
        return generate_obj(
            params, include_slabs=include_slabs, segments=segments, rings=rings, include_core=include_core,
        )

    @staticmethod
    def model_json(params: TowerParameters) -> str:
        """JSON model content as a string."""
        return generate_model_json(params)

    @staticmethod
    def floor_csv(params: TowerParameters) -> str:
        """Floor schedule as CSV text."""
        return generate_floor_csv(params)

    @staticmethod
    def schedule(params: TowerParameters):
        """Floor schedule as a DataFrame (for on-screen tables)."""
        return floor_schedule(params)

    @staticmethod
    def summary_text(params: TowerParameters) -> str:
        return generate_summary_text(params)

    @staticmethod
    def save(params: TowerParameters, path: str, fmt: str = 'obj', **mesh_options) -> Tuple[bool, str]:
        """
        Write an export next to the app.

        Returns:
            success: bool
            message: written path, or the error text if the export failed
        """
        try:
            written = export_tower(params, path, fmt=fmt, **mesh_options)
        except ExportError as e:
            logger.error("%s", e)
            return False, str(e)
        return True, str(written)
