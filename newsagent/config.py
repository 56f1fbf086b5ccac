from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    NEWS_API_KEY: str | None = None
    NEWS_API_BASE_URL: str = Field("https://newsapi.org/v2")
    NEWS_LANGUAGE: str = Field("en")
    DEFAULT_TOPIC: str = Field("crypto")
    TIMEOUT_SECONDS: float = Field(10)

    LOG_LEVEL: str = Field("INFO")
    HOST: str = Field("0.0.0.0")
    PORT: int = Field(3000)
    MCP_TRANSPORT: str = Field("stdio")

    # x402 payment gateway
    FACILITATOR_URL: str | None = None
    ADDRESS: str | None = None
    PAYMENT_NETWORK: str = Field("base-sepolia")
    SEARCH_NEWS_PRICE: str = Field("$1")
    GET_NEWS_PRICE: str = Field("$0.5")
    JSONRPC_PRICE: str = Field("$0.5")

    @property
    def api_configured(self) -> bool:
        return bool(self.NEWS_API_KEY)

    @property
    def is_payment_configured(self) -> bool:
        return bool(self.FACILITATOR_URL and self.ADDRESS)

    def pricing(self) -> dict[str, str] | None:
        if not self.is_payment_configured:
            return None
        return {
            "search_news": self.SEARCH_NEWS_PRICE,
            "get_news": self.GET_NEWS_PRICE,
            "jsonRpc": self.JSONRPC_PRICE,
            "network": self.PAYMENT_NETWORK,
        }


settings = Settings()  # eagerly load
