"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MARKFOLIO_ prefix (e.g., MARKFOLIO_ESCAPE_UNKNOWN_LANGUAGES=true).

Settings can also be loaded from a .env file in the project root. The
renderer reads them once, when it is first built.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MARKFOLIO_ prefix.

    Examples:
        MARKFOLIO_ESCAPE_UNKNOWN_LANGUAGES=true
        MARKFOLIO_TABLE_CONTAINER_CLASS=table-scroll
        MARKFOLIO_EXCERPT_LENGTH=200
    """

    model_config = SettingsConfigDict(
        env_prefix="MARKFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Code block configuration
    escape_unknown_languages: bool = Field(
        default=False,
        description="Render code blocks with a missing/unknown language as escaped text instead of an empty block",
    )

    code_header: bool = Field(
        default=True,
        description="Wrap highlighted code blocks with a header (language label + copy button mount)",
    )

    highlight_selector: str = Field(
        default=".code-block-wrapper",
        description="CSS selector prefixing the generated Pygments stylesheet rules",
    )

    # Table configuration
    table_container_class: str = Field(
        default="markdown-table-container",
        description="Class of the horizontally scrollable element wrapping every table",
    )

    # Directive configuration
    icon_default_size: str = Field(
        default="20",
        description="Icon size used when an icon directive has no extra parameter",
    )

    # Excerpt configuration
    excerpt_length: int = Field(
        default=150,
        description="Maximum number of characters in a card excerpt",
    )

    # Editor configuration
    editor_context_window: int = Field(
        default=50,
        description="Characters inspected on each side of the cursor for toolbar state",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
