# config/system_config/repositories.py
from __future__ import annotations

from core.repositories import ModelRepository

from .models import CoreConfig


class CoreConfigRepository(ModelRepository):
    model = CoreConfig
