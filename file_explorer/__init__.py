"""
File Explorer Package
A minimal interactive console file browser

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "File Explorer Team"

# Lazy imports keep `python -m file_explorer` startup light
__all__ = [
    'DirectoryLister',
    'FilePreviewer',
    'ConfigManager',
    'get_logger',
    '__version__'
]

def __getattr__(name):
    """Lazy import for public components"""
    if name == 'DirectoryLister':
        from file_explorer.core.directory_lister import DirectoryLister
        return DirectoryLister
    elif name == 'FilePreviewer':
        from file_explorer.core.file_previewer import FilePreviewer
        return FilePreviewer
    elif name == 'ConfigManager':
        from file_explorer.utils.config_manager import ConfigManager
        return ConfigManager
    elif name == 'get_logger':
        from file_explorer.utils.logging_config import get_logger
        return get_logger
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
