from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # logging level name for the "carebook" logger
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    # start with a few demo patients and specialists (nothing is persisted)
    load_sample_data: bool = True

    prompt: str = "\n[bold italic][orchid]CareBook[/]>>> Command :[/]"

    model_config = SettingsConfigDict(env_prefix="CAREBOOK_", env_file=".env",
                                      env_file_encoding="utf-8", extra="ignore")


settings = Settings()

# ────────────────────────────────────────────────────────────────────────────
# Command syntax
# ────────────────────────────────────────────────────────────────────────────
PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_TAG = "t/"
PREFIX_SPECIALTY = "s/"

ALL_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
                PREFIX_TAG, PREFIX_SPECIALTY)
# every prefix but t/ may appear at most once
SINGLE_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
                   PREFIX_SPECIALTY)

COMMAND_DESC = {
    "add": "add <-p|-s> n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]... [s/SPECIALTY]",
    "edit": "edit <-p|-s> INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]... [s/SPECIALTY]",
    "find": "find <-p|-s> [n/KEYWORDS] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]... [s/SPECIALTY]",
    "delete": "delete <-p|-s> INDEX",
    "list": "list <-p|-s> – show all patients or all specialists",
    "clear": "clear – remove every contact",
    "help": "help – show this table",
    "exit": "exit / close – leave the assistant",
}
