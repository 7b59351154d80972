from .sample import DEFAULT_ORG_ID, generate_sample_folders, write_sample_file
from .sources import FolderSource, InMemoryFolderSource, JsonFileFolderSource, load_folder_source

__all__ = [
    "DEFAULT_ORG_ID",
    "FolderSource",
    "InMemoryFolderSource",
    "JsonFileFolderSource",
    "generate_sample_folders",
    "load_folder_source",
    "write_sample_file",
]
