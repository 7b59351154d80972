import logging

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings

from folders.environment import EnvironmentName
from settings.log import LoggingSettings


class FolderSettings(BaseSettings):
    max_page_limit: int = Field(alias="FOLDERS_MAX_PAGE_LIMIT", default=1000)
    data_file: str | None = Field(alias="FOLDERS_DATA_FILE", default=None)
    sample_size: int = Field(alias="FOLDERS_SAMPLE_SIZE", default=1000)
    sample_seed: int = Field(alias="FOLDERS_SAMPLE_SEED", default=2022)
    sample_org_count: int = Field(alias="FOLDERS_SAMPLE_ORG_COUNT", default=3)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "allow"}

    environment: EnvironmentName = Field(alias="ENVIRONMENT")

    folders: FolderSettings = Field(default_factory=FolderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("environment", mode="before")
    def set_environment(cls, environment: str, info: ValidationInfo) -> EnvironmentName:
        try:
            return EnvironmentName(environment)
        except ValueError:
            logging.getLogger(__name__).warning(f"Invalid environment: {environment}")
            return EnvironmentName.DEVELOPMENT
