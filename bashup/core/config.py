from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bashup.upload.uploader import UPLOAD_ENDPOINT
from bashup.upload.writer import LINK_FILENAME


class Settings(BaseSettings):
    """Tool settings loaded from ``BASHUP_*`` environment variables.

    Defaults target the public bashupload.com host, so no configuration is
    needed for normal use. Overriding ``upload_url`` is mainly useful for
    pointing at a compatible self-hosted instance.
    """

    model_config = SettingsConfigDict(
        env_prefix="BASHUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upload endpoint; the archive file name is appended to it.
    upload_url: str = UPLOAD_ENDPOINT

    @field_validator("upload_url", mode="before")
    @classmethod
    def normalise_upload_url(cls, v: str) -> str:
        return v if v.endswith("/") else f"{v}/"

    # Seconds to wait for the host; unset blocks until the transport fails.
    upload_timeout: Optional[float] = None

    # Written next to the archive, holding only the download link.
    link_filename: str = LINK_FILENAME

    debug: bool = False


def get_settings() -> Settings:
    return Settings()
