"""
Generated sample dataset.

The sample is deterministic for a given seed so that tokens handed out by one
process stay meaningful for another process started with the same settings.
"""

import json
import logging
from pathlib import Path

from faker import Faker

from folders.models.folder import Folder

logger = logging.getLogger(__name__)

DEFAULT_ORG_ID = "9f2d3c1a-6b7e-4c58-8a0d-3e4f5b6c7d81"


def generate_sample_folders(size: int = 1000, seed: int = 2022, org_count: int = 3) -> list[Folder]:
    """
    Generate a list of folders spread over a few organizations.

    Args:
        size: Number of folders to generate
        seed: Seed for the Faker instance
        org_count: Number of organizations, ``DEFAULT_ORG_ID`` included

    Returns:
        The generated folders. Each organization owns at least one folder when
        ``size >= org_count``.
    """
    if org_count < 1:
        raise ValueError("org_count must be at least 1")

    fake = Faker()
    fake.seed_instance(seed)

    org_ids = [DEFAULT_ORG_ID] + [fake.uuid4() for _ in range(org_count - 1)]

    folders = []
    for i in range(size):
        org_id = org_ids[i] if i < len(org_ids) else fake.random_element(org_ids)
        folders.append(
            Folder(
                id=fake.uuid4(),
                name=fake.catch_phrase(),
                org_id=org_id,
                deleted=fake.boolean(chance_of_getting_true=10),
            )
        )

    logger.debug(f"Generated {len(folders)} sample folders for {len(org_ids)} orgs")
    return folders


def write_sample_file(path: str | Path, folders: list[Folder]) -> None:
    """Write folders to ``path`` as a JSON array using the ``orgId`` key."""
    data = [folder.model_dump(by_alias=True) for folder in folders]
    Path(path).write_text(json.dumps(data, indent=2))
    logger.info(f"Wrote {len(folders)} folders to {path}")
