"""Application service implementations."""

from loom_downloader.application.services.download_service import DefaultBatchDownloadService
from loom_downloader.application.services.verifier import PostDownloadVerifier

__all__ = ["DefaultBatchDownloadService", "PostDownloadVerifier"]
