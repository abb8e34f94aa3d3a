"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use LINEMARK_ prefix (e.g., LINEMARK_LEGACY_TAGS=true).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use LINEMARK_ prefix.

    Examples:
        LINEMARK_BUFFER_SEED=" "
        LINEMARK_LEGACY_TAGS=true
        LINEMARK_OUTPUT_SUFFIX=.htm
    """

    model_config = SettingsConfigDict(
        env_prefix="LINEMARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Conversion configuration
    buffer_seed: str = Field(
        default="",
        description="Initial contents of the output document before any line is appended",
    )

    legacy_tags: bool = Field(
        default=False,
        description="Emit tags without the closing angle bracket ('<h1' instead of '<h1>')",
    )

    # Driver configuration
    empty_placeholder: str = Field(
        default="<p>Waiting for text . . .</p>",
        description="Markup written in place of a conversion when the input has no lines",
    )

    input_encoding: str = Field(
        default="utf-8",
        description="Encoding used to read input text files",
    )

    output_suffix: str = Field(
        default=".html",
        description="Suffix of the output file when --outputFile is not given",
    )

    def tag_make(self, delimiter: str, name: str, legacy: bool | None = None) -> str:
        """
        Build a tag string from its opening delimiter and tag name.

        Args:
            delimiter: Leading delimiter, "<" or "</"
            name: Tag name (e.g., "h1")
            legacy: Override for legacy_tags; None uses the configured value

        Returns:
            Tag string (e.g., "<h1>", or "<h1" in legacy mode)

        Example:
            >>> settings = AppSettings()
            >>> settings.tag_make("</", "h2")
            '</h2>'
            >>> settings.tag_make("<", "h2", legacy=True)
            '<h2'
        """
        if legacy is None:
            legacy = self.legacy_tags
        if legacy:
            return f"{delimiter}{name}"
        return f"{delimiter}{name}>"


# Singleton instance - import this in your code
appsettings = AppSettings()
