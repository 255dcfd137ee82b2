# Services package
from icons_toolkit.services.build_service import BuildService
from icons_toolkit.services.classifier import classify_assets
from icons_toolkit.services.clone_service import CloneService
from icons_toolkit.services.fetch_service import FetchService
from icons_toolkit.services.manifest import ManifestService, merge_category, merge_manifest
from icons_toolkit.services.markdown import render_markdown, render_table
from icons_toolkit.services.names import build_name_index
from icons_toolkit.services.presence import filter_present, icon_exists
from icons_toolkit.services.release_service import ReleaseService
from icons_toolkit.services.setup_service import SetupService
from icons_toolkit.services.todo import TodoService, build_report

__all__ = [
    "BuildService",
    "CloneService",
    "FetchService",
    "ManifestService",
    "ReleaseService",
    "SetupService",
    "TodoService",
    "build_name_index",
    "build_report",
    "classify_assets",
    "filter_present",
    "icon_exists",
    "merge_category",
    "merge_manifest",
    "render_markdown",
    "render_table",
]
