"""Use case implementations for application workflows."""

from loom_downloader.application.use_cases.check_dependencies import CheckDependenciesUseCase
from loom_downloader.application.use_cases.load_url_list import LoadUrlListUseCase

__all__ = [
    "CheckDependenciesUseCase",
    "LoadUrlListUseCase",
]
