from typing import cast

from dependency_injector import containers, providers

from folders.controllers.folder_controller import FolderController
from folders.repos.container import RepoContainer
from settings import settings


class ControllerContainer(containers.DeclarativeContainer):
    repos: RepoContainer = cast(RepoContainer, providers.DependenciesContainer())

    folder_controller = providers.Singleton(
        FolderController,
        folder_repo=repos.folder,
        max_page_limit=settings.folders.max_page_limit,
    )
