from dependency_injector import containers, providers

from folders.data.sources import load_folder_source
from folders.repos.folder import FolderRepo


class RepoContainer(containers.DeclarativeContainer):
    folder_source = providers.Singleton(load_folder_source)
    folder = providers.Singleton(FolderRepo, source=folder_source)
