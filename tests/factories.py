"""Factories for Folder fixtures."""

import itertools

import factory

from folders.models.folder import Folder

ORG_ID = "4f1c2e8a-9b3d-4e6f-a1b2-c3d4e5f60718"
OTHER_ORG_ID = "0d9e8f7a-6b5c-4d3e-9f21-0a1b2c3d4e5f"
EMPTY_ORG_ID = "f47ac10b-58cc-4372-a567-0e02b2c3d479"
NIL_FOLDER_ORG_ID = "3b9a868b-8cd9-4b6b-ba23-fd1e08f3e2fa"
BAD_FOLDER_ORG_ID = "c1556e17-b7c0-45a3-a6ae-9546248fb17c"

NIL_UUID = "00000000-0000-0000-0000-000000000000"
UUID_V1 = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"


class FolderFactory(factory.Factory):
    """Factory for creating Folder instances with valid version-4 IDs."""

    class Meta:
        model = Folder

    id = factory.Sequence(lambda n: f"{n:08x}-0000-4000-8000-{n:012x}")
    name = factory.Sequence(lambda n: f"folder {n}")
    org_id = ORG_ID
    deleted = False


def make_folders(org_id: str, count: int) -> list[Folder]:
    return FolderFactory.build_batch(count, org_id=org_id)


def interleave(*groups: list[Folder]) -> list[Folder]:
    """Merge folder lists round-robin, keeping each list's own order."""
    merged = []
    for row in itertools.zip_longest(*groups):
        merged.extend(folder for folder in row if folder is not None)
    return merged
