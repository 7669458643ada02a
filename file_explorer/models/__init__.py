"""
Data models for File Explorer
"""

from file_explorer.models.directory_entry import DirectoryEntry, DirectoryListing
from file_explorer.models.navigation_state import NavigationState
from file_explorer.models.preview_result import PreviewResult

__all__ = ['DirectoryEntry', 'DirectoryListing', 'NavigationState', 'PreviewResult']
