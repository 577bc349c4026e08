"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHOWCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Source profiles
    github_username: str = "octocat"
    cults3d_username: str = "octocat"
    bgg_username: str = "octocat"

    # Explicit source locations (empty = derived from usernames)
    github_url: str = ""
    cults3d_url: str = ""
    bgg_url: str = ""
    bgg_detail_url: str = "https://boardgamegeek.com/xmlapi/boardgame/{id}"

    # HTTP
    request_timeout: float = 30.0
    user_agent: str = "Showcase/0.1 (Project Gallery)"

    # Rendering
    placeholder_image: str = "/images/default.png"
    template_path: Path | None = None  # None = bundled card template

    output_dir: Path = Path("dist")

    @property
    def github_source(self) -> str:
        """Get the code-host profile page location."""
        return self.github_url or f"https://github.com/{self.github_username}"

    @property
    def cults3d_source(self) -> str:
        """Get the model-marketplace profile page location."""
        return self.cults3d_url or (
            f"https://cults3d.com/en/users/{self.cults3d_username}/3d-models"
        )

    @property
    def bgg_source(self) -> str:
        """Get the game-collection page location."""
        return self.bgg_url or (
            f"https://boardgamegeek.com/collection/user/{self.bgg_username}"
            "?own=1&subtype=boardgame"
        )

    def bgg_detail_source(self, item_id: str) -> str:
        """Get the per-item detail document location for a game."""
        return self.bgg_detail_url.format(id=item_id)

    @property
    def output_file(self) -> Path:
        """Get the default gallery page path."""
        return self.output_dir / "index.html"


# Global settings instance
settings = Settings()
