"""Tests for filtering folders by organization."""

from unittest.mock import Mock

import pytest

from folders.data.sources import InMemoryFolderSource
from folders.exceptions import FolderValidationError
from folders.models.folder import Folder
from folders.repos.folder import FolderRepo
from folders.utils.identifiers import is_valid_uuid_v4
from tests.factories import (
    BAD_FOLDER_ORG_ID,
    EMPTY_ORG_ID,
    NIL_FOLDER_ORG_ID,
    NIL_UUID,
    ORG_ID,
    OTHER_ORG_ID,
    FolderFactory,
    make_folders,
)


def test_fetch_by_org_keeps_only_the_org_folders_in_order(folder_repo: FolderRepo, org_folders: list[Folder]) -> None:
    folders = folder_repo.fetch_by_org(ORG_ID)

    assert folders == org_folders
    assert all(folder.org_id == ORG_ID for folder in folders)


def test_fetch_by_org_for_other_org(folder_repo: FolderRepo) -> None:
    folders = folder_repo.fetch_by_org(OTHER_ORG_ID)

    assert len(folders) == 7
    assert all(folder.org_id == OTHER_ORG_ID for folder in folders)


def test_fetch_by_org_without_matches_is_empty(folder_repo: FolderRepo) -> None:
    assert folder_repo.fetch_by_org(EMPTY_ORG_ID) == []


@pytest.mark.parametrize(
    "org_id, folder_name",
    [
        (NIL_FOLDER_ORG_ID, "nil uuid v4"),
        (BAD_FOLDER_ORG_ID, "incorrect uuid v4 format"),
    ],
)
def test_fetch_by_org_fails_on_malformed_folder_id(folder_repo: FolderRepo, org_id: str, folder_name: str) -> None:
    with pytest.raises(FolderValidationError) as exc_info:
        folder_repo.fetch_by_org(org_id)

    assert exc_info.value.org_id == org_id
    assert exc_info.value.folder_name == folder_name
    assert exc_info.value.message == (
        f"folder with non-valid ID found for OrgID: {org_id} on folder named {folder_name}"
    )


def test_malformed_folder_of_another_org_is_ignored() -> None:
    broken = FolderFactory.build(id=NIL_UUID, name="broken", org_id=OTHER_ORG_ID)
    repo = FolderRepo(InMemoryFolderSource([broken, *make_folders(ORG_ID, 3)]))

    assert len(repo.fetch_by_org(ORG_ID)) == 3


def test_all_returns_the_whole_dataset(folder_repo: FolderRepo, dataset: list[Folder]) -> None:
    assert list(folder_repo.all()) == dataset


def test_repo_reads_the_source_on_every_call() -> None:
    source = Mock(get_all_folders=Mock(return_value=make_folders(ORG_ID, 2)))
    repo = FolderRepo(source)

    repo.fetch_by_org(ORG_ID)
    repo.fetch_by_org(OTHER_ORG_ID)

    assert source.get_all_folders.call_count == 2
    assert vars(repo) == {"_load_all": source.get_all_folders}


def test_factory_folders_have_valid_unique_ids() -> None:
    folders = make_folders(ORG_ID, 50)

    assert all(is_valid_uuid_v4(folder.id) for folder in folders)
    assert len({folder.id for folder in folders}) == 50
    assert all(folder.org_id == ORG_ID for folder in folders)
