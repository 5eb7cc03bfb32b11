"""FastAPI dependency providers.

The dataset store and generator are built once from settings; tests swap
them through ``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from villageinfo.config import settings
from villageinfo.services.advisor import DevelopmentAdvisor
from villageinfo.services.dataset import DatasetStore
from villageinfo.services.generator import TextGenerator, build_generator


@lru_cache
def get_dataset_store() -> DatasetStore:
    return DatasetStore(settings.dataset_dir, cache_size=settings.dataset_cache_size)


@lru_cache
def get_generator() -> TextGenerator | None:
    return build_generator(settings)


def get_advisor(
    generator: TextGenerator | None = Depends(get_generator),
) -> DevelopmentAdvisor:
    return DevelopmentAdvisor(generator)
