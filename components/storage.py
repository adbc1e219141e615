"""
Shared repositories for the Streamlit pages
"""
from functools import lru_cache
from pathlib import Path
from typing import Tuple

from jusur_engine.persistence import DealRepository, JsonFileStore, ProfileRepository
from jusur_engine.settings import get_settings


@lru_cache
def get_repositories() -> Tuple[DealRepository, ProfileRepository]:
    """Deal and profile repositories on one JSON file under the data dir"""
    store = JsonFileStore(Path(get_settings().data_dir) / "jusur_store.json")
    return DealRepository(store), ProfileRepository(store)
