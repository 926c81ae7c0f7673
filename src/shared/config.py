"""Third-party service settings loaded from the environment.

One settings group per external service (mail, AI models, vector store,
billing, monitoring). Every value is read from its environment variable
once, at first access; defaults live here and nowhere else. Empty variables
are treated as unset so a blank ``AWS_DEFAULT_REGION=`` still resolves to
``us-east-1``. ``AppSettings`` carries the database URL and queue connection.

    from shared.config import get_settings, service_setting

    get_settings().ses.region          # "us-east-1" unless overridden
    service_setting("openai.model")    # "gpt-4o-mini" unless overridden
"""

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_MISTRAL_MODEL = "mistral-large-latest"
DEFAULT_VOYAGE_MODEL = "voyage-3-large"
DEFAULT_QUEUE_CONNECTION = "database"


class ServiceSettings(BaseSettings):
    """Base for a single service's settings group."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )


class PostmarkSettings(ServiceSettings):
    token: str | None = Field(default=None, validation_alias="POSTMARK_TOKEN")


class SesSettings(ServiceSettings):
    key: str | None = Field(default=None, validation_alias="AWS_ACCESS_KEY_ID")
    secret: str | None = Field(default=None, validation_alias="AWS_SECRET_ACCESS_KEY")
    region: str = Field(default=DEFAULT_AWS_REGION, validation_alias="AWS_DEFAULT_REGION")


class ResendSettings(ServiceSettings):
    key: str | None = Field(default=None, validation_alias="RESEND_KEY")


class SlackNotificationSettings(ServiceSettings):
    bot_user_oauth_token: str | None = Field(default=None, validation_alias="SLACK_BOT_USER_OAUTH_TOKEN")
    channel: str | None = Field(default=None, validation_alias="SLACK_BOT_USER_DEFAULT_CHANNEL")


class SlackSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    notifications: SlackNotificationSettings = Field(default_factory=SlackNotificationSettings)


class OpenAISettings(ServiceSettings):
    api_key: str | None = Field(default=None, validation_alias="OPENAI_API_KEY")
    model: str = Field(default=DEFAULT_OPENAI_MODEL, validation_alias="OPENAI_MODEL")


class MistralSettings(ServiceSettings):
    api_key: str | None = Field(default=None, validation_alias="MISTRAL_API_KEY")
    model: str = Field(default=DEFAULT_MISTRAL_MODEL, validation_alias="MISTRAL_MODEL")


class VoyageSettings(ServiceSettings):
    api_key: str | None = Field(default=None, validation_alias="VOYAGE_API_KEY")
    model: str = Field(default=DEFAULT_VOYAGE_MODEL, validation_alias="VOYAGE_MODEL")


class PineconeSettings(ServiceSettings):
    api_key: str | None = Field(default=None, validation_alias="PINECONE_API_KEY")
    index_url: str | None = Field(default=None, validation_alias="PINECONE_INDEX_URL")


class StripeSettings(ServiceSettings):
    key: str | None = Field(default=None, validation_alias="STRIPE_KEY")
    secret: str | None = Field(default=None, validation_alias="STRIPE_SECRET")
    webhook_secret: str | None = Field(default=None, validation_alias="STRIPE_WEBHOOK_SECRET")


class InspectorSettings(ServiceSettings):
    ingestion_key: str | None = Field(default=None, validation_alias="INSPECTOR_INGESTION_KEY")


class ServicesSettings(BaseModel):
    """All third-party service settings, keyed by service name."""

    model_config = ConfigDict(frozen=True)

    postmark: PostmarkSettings = Field(default_factory=PostmarkSettings)
    ses: SesSettings = Field(default_factory=SesSettings)
    resend: ResendSettings = Field(default_factory=ResendSettings)
    slack: SlackSettings = Field(default_factory=SlackSettings)
    openai: OpenAISettings = Field(default_factory=OpenAISettings)
    mistral: MistralSettings = Field(default_factory=MistralSettings)
    voyage: VoyageSettings = Field(default_factory=VoyageSettings)
    pinecone: PineconeSettings = Field(default_factory=PineconeSettings)
    stripe: StripeSettings = Field(default_factory=StripeSettings)
    inspector: InspectorSettings = Field(default_factory=InspectorSettings)


class AppSettings(ServiceSettings):
    """Process-level settings: where aggregates live and which queue jobs go to."""

    database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")
    queue_connection: str = Field(default=DEFAULT_QUEUE_CONNECTION, validation_alias="QUEUE_CONNECTION")


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    return AppSettings()


@lru_cache(maxsize=1)
def get_settings() -> ServicesSettings:
    """Build the settings once per process and return the cached instance."""
    return ServicesSettings()


def service_setting(path: str, settings: ServicesSettings | None = None) -> Any:
    """Read a setting by dotted path, e.g. ``"slack.notifications.channel"``.

    Raises:
        KeyError: if any segment of ``path`` is not a known setting.
    """
    node: Any = settings or get_settings()
    for part in path.split("."):
        if not isinstance(node, BaseModel) or part not in type(node).model_fields:
            raise KeyError(path)
        node = getattr(node, part)
    return node
