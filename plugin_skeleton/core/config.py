from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_env: str = "dev"
    log_level: str = "INFO"
    database_url: str = "sqlite+aiosqlite:///./plugin_skeleton.db"

    plugin_slug: str = "plugin-name"
    plugin_version: str = "1.0.0"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def option_prefix(self) -> str:
        # plugin-name -> plugin_name, used for stored option names
        return self.plugin_slug.replace("-", "_")

    @property
    def rest_namespace(self) -> str:
        return f"{self.plugin_slug}/v1"

    def option_name(self, group_id: str) -> str:
        return f"{self.option_prefix}_{group_id}"

settings = Settings()
