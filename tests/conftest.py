"""Pytest configuration: test settings and shared folder fixtures."""

import os

os.environ.setdefault("FOLDERS_ENV", "test")

from collections.abc import Iterator  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from folders.container import ApplicationContainer  # noqa: E402
from folders.controllers.folder_controller import FolderController  # noqa: E402
from folders.create_app import create_app  # noqa: E402
from folders.data.sources import InMemoryFolderSource  # noqa: E402
from folders.models.folder import Folder  # noqa: E402
from folders.repos.folder import FolderRepo  # noqa: E402
from tests.factories import (  # noqa: E402
    BAD_FOLDER_ORG_ID,
    NIL_FOLDER_ORG_ID,
    NIL_UUID,
    ORG_ID,
    OTHER_ORG_ID,
    UUID_V1,
    FolderFactory,
    interleave,
    make_folders,
)


@pytest.fixture
def org_folders() -> list[Folder]:
    """The 25 folders owned by ORG_ID, in dataset order."""
    return make_folders(ORG_ID, 25)


@pytest.fixture
def dataset(org_folders: list[Folder]) -> list[Folder]:
    nil_org = make_folders(NIL_FOLDER_ORG_ID, 2)
    nil_org.insert(1, FolderFactory.build(id=NIL_UUID, name="nil uuid v4", org_id=NIL_FOLDER_ORG_ID))

    bad_org = make_folders(BAD_FOLDER_ORG_ID, 2)
    bad_org.append(FolderFactory.build(id=UUID_V1, name="incorrect uuid v4 format", org_id=BAD_FOLDER_ORG_ID))

    return interleave(org_folders, make_folders(OTHER_ORG_ID, 7), nil_org, bad_org)


@pytest.fixture
def folder_source(dataset: list[Folder]) -> InMemoryFolderSource:
    return InMemoryFolderSource(dataset)


@pytest.fixture
def folder_repo(folder_source: InMemoryFolderSource) -> FolderRepo:
    return FolderRepo(folder_source)


@pytest.fixture
def folder_controller(folder_repo: FolderRepo) -> FolderController:
    return FolderController(folder_repo)


@pytest.fixture
def container(folder_source: InMemoryFolderSource) -> Iterator[ApplicationContainer]:
    application_container = ApplicationContainer()
    application_container.repos.folder_source.override(providers.Object(folder_source))
    application_container.wire(packages=["folders.api.v1"])
    yield application_container
    application_container.unwire()
    application_container.repos.folder_source.reset_override()


@pytest.fixture
def client(container: ApplicationContainer) -> Iterator[TestClient]:
    with TestClient(create_app()) as test_client:
        yield test_client
